"""Protocol interfaces for csvbind collaborators.

Collaborators are injected into the decoder and matched structurally,
no inheritance required.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from csvbind.models.names import NameParts


# ---------------------------------------------------------------------------
# Name splitting
# ---------------------------------------------------------------------------

@runtime_checkable
class INameSplitter(Protocol):
    """Best-effort decomposition of a full personal name."""

    def split(self, full_name: str) -> NameParts: ...
