"""Pure string transforms applied to raw CSV cells."""

from __future__ import annotations

import re

SEPARATOR_CHARS = "'#%$-+.*():;{}|& "

_SEPARATOR_TABLE = str.maketrans("", "", SEPARATOR_CHARS)
_TOKEN_START = re.compile(r"(^|\s)(\S)")


def title_case(value: str) -> str:
    """Lowercase, capitalize each whitespace-separated token, trim."""
    lowered = value.lower()
    return _TOKEN_START.sub(lambda m: m.group(1) + m.group(2).upper(), lowered).strip()


def upper_case(value: str) -> str:
    return value.strip().upper()


def lower_case(value: str) -> str:
    return value.strip().lower()


def strip_separators(value: str) -> str:
    """Remove every separator character, wherever it occurs."""
    return value.translate(_SEPARATOR_TABLE)
