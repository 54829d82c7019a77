"""Record materializer — builds typed records from data rows.

Per row and per field, in declaration order:
- temporal fields are parsed with ``parse_date``
- string fields are formatted by their directive (``-`` assigns the raw cell);
  fields without a directive are assigned raw unless ``require_directive``
- unbound fields keep their zero value

Once every field is set, cross-field post-processing runs:
- a non-empty full name with an empty first or last name is decomposed
- a non-empty postal code is split; the plus-4 field is only overwritten
  when it already holds a value
"""

from __future__ import annotations

from typing import Any, Literal, Sequence

from pydantic import BaseModel, ValidationError

from csvbind.core.exceptions import InputError
from csvbind.core.protocols import INameSplitter
from csvbind.core.types import ColumnMap
from csvbind.formatting.formatter import format_value
from csvbind.formatting.parsers import parse_date, split_postal_code
from csvbind.models.schema import FieldDescriptor, FieldRole, RecordSchema, resolve_schema


def _cell(
    row: Sequence[str],
    index: int,
    descriptor: FieldDescriptor,
    row_number: int,
    short_rows: str,
) -> str:
    if index < len(row):
        return row[index]
    if short_rows == "error":
        raise InputError(
            f"Row {row_number} has {len(row)} cells; field {descriptor.name!r} "
            f"is bound to column {index}"
        )
    return ""


def _split_full_name(draft: dict[str, Any], schema: RecordSchema, name_splitter: INameSplitter) -> None:
    full = schema.by_role(FieldRole.FULL_NAME)
    if full is None or not full.get(draft):
        return

    first = schema.by_role(FieldRole.FIRST_NAME)
    middle = schema.by_role(FieldRole.MIDDLE_NAME)
    last = schema.by_role(FieldRole.LAST_NAME)
    if first is None and middle is None and last is None:
        return

    first_value = first.get(draft) if first is not None else ""
    last_value = last.get(draft) if last is not None else ""
    if first_value and last_value:
        return

    parts = name_splitter.split(full.get(draft))
    for descriptor, value in ((first, parts.first), (middle, parts.middle), (last, parts.last)):
        if descriptor is not None:
            descriptor.set(draft, value)


def _split_postal(draft: dict[str, Any], schema: RecordSchema) -> None:
    postal = schema.by_role(FieldRole.POSTAL_CODE)
    if postal is None or not postal.get(draft):
        return

    zip5, plus4 = split_postal_code(str(postal.get(draft)))
    postal.set(draft, zip5)

    # Rows without a plus-4 value never receive one.
    plus = schema.by_role(FieldRole.PLUS4)
    if plus is not None and plus.get(draft):
        plus.set(draft, plus4)


def post_process(draft: dict[str, Any], schema: RecordSchema, name_splitter: INameSplitter) -> None:
    """Apply name decomposition and postal splitting to a completed draft."""
    _split_full_name(draft, schema, name_splitter)
    _split_postal(draft, schema)


def materialize(
    column_map: ColumnMap,
    data_rows: Sequence[Sequence[str]],
    target: Any,
    *,
    name_splitter: INameSplitter,
    require_directive: bool = False,
    short_rows: Literal["empty", "error"] = "empty",
) -> list[BaseModel]:
    """Build one record per data row, preserving row order.

    Raises:
        SchemaError: if ``target`` is not a sequence of structured records.
        InvalidDirectiveError: if a bound field declares an unknown directive.
        InputError: on a short row under the ``error`` policy, or when a row
            cannot be validated into the record model.
    """
    schema = resolve_schema(target)
    records: list[BaseModel] = []

    for row_number, row in enumerate(data_rows, start=1):
        draft: dict[str, Any] = {}
        for descriptor in schema.fields:
            index = column_map.get(descriptor.name)
            if index is None:
                continue

            if descriptor.is_temporal:
                value = _cell(row, index, descriptor, row_number, short_rows)
                descriptor.set(draft, parse_date(value))
                continue

            if descriptor.directive is None:
                if require_directive:
                    continue
                descriptor.set(draft, _cell(row, index, descriptor, row_number, short_rows))
            else:
                value = _cell(row, index, descriptor, row_number, short_rows)
                descriptor.set(draft, format_value(descriptor.directive, value))

        post_process(draft, schema, name_splitter)

        try:
            records.append(schema.build(draft))
        except ValidationError as exc:
            raise InputError(f"Row {row_number} does not fit {schema.model.__name__}: {exc}") from exc

    return records
