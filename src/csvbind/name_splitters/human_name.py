"""Name splitter backed by the nameparser library."""

from __future__ import annotations

from nameparser import HumanName

from csvbind.models.names import NameParts


class HumanNameSplitter:
    """Production INameSplitter using ``nameparser.HumanName``.

    Titles, suffixes and nicknames recognized by nameparser are dropped; only
    the first, middle and last components are kept.
    """

    def split(self, full_name: str) -> NameParts:
        name = HumanName(full_name)
        return NameParts(first=name.first, middle=name.middle, last=name.last)
