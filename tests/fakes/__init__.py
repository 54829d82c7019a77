"""Shared test doubles — re-export the static name splitter."""

from __future__ import annotations

from csvbind.name_splitters.static_splitter import StaticNameSplitter

__all__ = ["StaticNameSplitter"]
