"""Domain parsers: postal codes, phone numbers, zero trimming and dates.

None of these raise on bad input. Values that cannot be interpreted degrade to
a sentinel (``""`` for phones, ``ZERO_TIMESTAMP`` for dates, the untouched
input for postal codes) and decoding continues.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone

from csvbind.core.logging_config import get_logger
from csvbind.formatting.transforms import strip_separators
from csvbind.models.schema import ZERO_TIMESTAMP

logger = get_logger("parsers")

# Tried in order; the first layout that parses wins.
DATE_LAYOUTS: tuple[str, ...] = (
    "%m/%d/%Y",
    "%m-%d-%Y",
    "%m/%d/%y",
    "%m-%d-%y",
    "%Y/%m/%d",
    "%Y-%m-%d",
)

_RFC3339 = re.compile(
    r"([0-9]{4}-[0-9]{2}-[0-9]{2}[Tt][0-9]{2}:[0-9]{2}:[0-9]{2})(\.[0-9]+)?([Zz]|[+-][0-9]{2}:[0-9]{2})"
)

_ZIP_PATTERNS = (
    re.compile(r"([0-9]{5})([0-9]{4})"),
    re.compile(r"([0-9]{5})-([0-9]{4})"),
    re.compile(r"([0-9]{5}) ([0-9]{4})"),
)


def trim_leading_zeros(value: str) -> str:
    """Strip all leading zeros; an all-zero string becomes empty."""
    return value.lstrip("0")


def split_postal_code(value: str) -> tuple[str, str]:
    """Split a ZIP or ZIP+4 into its five-digit and four-digit parts.

    Recognizes ``928821234``, ``92882-1234`` and ``92882 1234``. Anything else
    comes back unchanged with an empty plus-4.
    """
    if value == "":
        return "", ""
    for pattern in _ZIP_PATTERNS:
        m = pattern.fullmatch(value)
        if m:
            return trim_leading_zeros(m.group(1)), trim_leading_zeros(m.group(2))
    return value, ""


def format_phone(value: str) -> str:
    """Format a 10- or 7-digit phone number; any other length yields ""."""
    digits = strip_separators(value)
    if len(digits) == 10:
        return f"({digits[0:3]}) {digits[3:6]}-{digits[6:10]}"
    if len(digits) == 7:
        return f"{digits[0:3]}-{digits[3:7]}"
    logger.debug("Unformattable phone value %r (%d chars)", value, len(digits))
    return ""


def _parse_rfc3339(value: str) -> datetime | None:
    m = _RFC3339.fullmatch(value)
    if m is None:
        return None
    base, fraction, zone = m.group(1), m.group(2) or "", m.group(3).upper()
    if fraction:
        # fromisoformat keeps microseconds; RFC 3339 allows more digits.
        fraction = "." + fraction[1:7].ljust(6, "0")
    try:
        return datetime.fromisoformat(f"{base.upper()}{fraction}{zone}")
    except ValueError:
        return None


def parse_date(value: str, layouts: tuple[str, ...] = DATE_LAYOUTS) -> datetime:
    """Parse a date using the first matching layout, else ZERO_TIMESTAMP.

    Layout-based results are UTC; RFC 3339 timestamps keep their offset.
    """
    if value == "":
        return ZERO_TIMESTAMP
    for layout in layouts:
        try:
            return datetime.strptime(value, layout).replace(tzinfo=timezone.utc)
        except ValueError:
            continue
    parsed = _parse_rfc3339(value)
    if parsed is not None:
        return parsed
    logger.debug("Unparseable date value %r", value)
    return ZERO_TIMESTAMP
