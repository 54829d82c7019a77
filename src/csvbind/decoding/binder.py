"""Schema binder — maps header cells to record fields."""

from __future__ import annotations

from typing import Sequence

from csvbind.core.exceptions import DuplicateHeaderError
from csvbind.core.types import ColumnMap
from csvbind.models.schema import RecordSchema


def check_duplicate_headers(header: Sequence[str]) -> None:
    """Raise DuplicateHeaderError on the first repeated header cell."""
    seen: set[str] = set()
    for name in header:
        if name in seen:
            raise DuplicateHeaderError(name)
        seen.add(name)


def bind_columns(
    header: Sequence[str],
    schema: RecordSchema,
    *,
    require_directive: bool = False,
) -> ColumnMap:
    """Build a fresh column map for one decode call.

    Every header cell is tested against every bound field in declaration
    order. When several cells match the same field the last one wins.

    Args:
        header: The header row.
        schema: Target record schema.
        require_directive: Skip fields that declare no format directive.

    Returns:
        Mapping of field name to zero-based column index.

    Raises:
        DuplicateHeaderError: if two header cells are identical.
    """
    check_duplicate_headers(header)

    candidates = [
        d for d in schema.fields
        if d.is_bound and (d.directive is not None or not require_directive)
    ]
    column_map: ColumnMap = {}
    for index, cell in enumerate(header):
        for descriptor in candidates:
            if descriptor.matches(cell):
                column_map[descriptor.name] = index
    return column_map
