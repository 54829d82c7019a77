"""Format directive dispatcher."""

from __future__ import annotations

from typing import Callable

from csvbind.core.exceptions import InvalidDirectiveError
from csvbind.formatting.parsers import format_phone
from csvbind.formatting.transforms import lower_case, strip_separators, title_case, upper_case
from csvbind.models.schema import FormatDirective

Formatter = Callable[[str], str]

FORMATTERS: dict[FormatDirective, Formatter] = {
    FormatDirective.TITLE_CASE: title_case,
    FormatDirective.UPPER_CASE: upper_case,
    FormatDirective.LOWER_CASE: lower_case,
    FormatDirective.FORMAT_PHONE: format_phone,
    FormatDirective.STRIP_SEPARATORS: strip_separators,
}


def parse_directive(token: str | FormatDirective) -> FormatDirective:
    """Resolve a directive token.

    Raises:
        InvalidDirectiveError: if the token names no known directive.
    """
    try:
        return FormatDirective(token)
    except ValueError:
        raise InvalidDirectiveError(str(token), valid=[str(d) for d in FORMATTERS]) from None


def format_value(directive: str | FormatDirective, value: str) -> str:
    """Apply the transform selected by ``directive`` to ``value``.

    The ``-`` directive returns the value untouched.
    """
    resolved = parse_directive(directive)
    if resolved is FormatDirective.NONE:
        return value
    return FORMATTERS[resolved](value)
