"""Static name splitter for local development and testing.

Returns canned decompositions. Names without a canned answer fall back to a
whitespace split: first token, last token, everything in between as middle.
"""

from __future__ import annotations

from csvbind.models.names import NameParts


class StaticNameSplitter:
    """INameSplitter implementation that returns deterministic results."""

    def __init__(self) -> None:
        self._canned: dict[str, NameParts] = {}
        self.calls: list[str] = []

    def set_parts(self, full_name: str, first: str = "", middle: str = "", last: str = "") -> None:
        """Register a canned decomposition for an exact full name."""
        self._canned[full_name] = NameParts(first=first, middle=middle, last=last)

    def split(self, full_name: str) -> NameParts:
        self.calls.append(full_name)
        if full_name in self._canned:
            return self._canned[full_name]
        tokens = full_name.split()
        if not tokens:
            return NameParts()
        if len(tokens) == 1:
            return NameParts(first=tokens[0])
        return NameParts(first=tokens[0], middle=" ".join(tokens[1:-1]), last=tokens[-1])
