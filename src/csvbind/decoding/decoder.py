"""CSVDecoder — decodes CSV rows into typed record models."""

from __future__ import annotations

import io
import time
from typing import Any, Iterable, Sequence

from pydantic import BaseModel

from csvbind.core.config import DecoderSettings
from csvbind.core.exceptions import InputError
from csvbind.core.logging_config import get_logger
from csvbind.core.protocols import INameSplitter
from csvbind.decoding.binder import bind_columns, check_duplicate_headers
from csvbind.decoding.materializer import materialize
from csvbind.decoding.reader import read_rows
from csvbind.models.schema import resolve_schema
from csvbind.name_splitters.human_name import HumanNameSplitter

logger = get_logger("decoder")


class CSVDecoder:
    """Decodes CSV input into a list of record models.

    Settings and the name splitter are injected at construction time. The
    column map is built per call and never kept on the instance, so one
    decoder can serve any number of inputs and schemas.
    """

    def __init__(
        self,
        *,
        settings: DecoderSettings | None = None,
        name_splitter: INameSplitter | None = None,
    ) -> None:
        self._settings = settings or DecoderSettings()
        self._names = name_splitter or HumanNameSplitter()

    @property
    def settings(self) -> DecoderSettings:
        return self._settings

    def decode(self, rows: Sequence[Sequence[str]], target: Any) -> list[BaseModel]:
        """Decode header + data rows into records of ``target``.

        Args:
            rows: Header row followed by data rows.
            target: A record model class, ``list[Model]``, or a RecordSchema.

        Raises:
            InputError: if ``rows`` is empty.
            DuplicateHeaderError: if two header cells are identical.
            SchemaError: if ``target`` is not a sequence of records.
            InvalidDirectiveError: if a bound field declares an unknown directive.
        """
        start = time.perf_counter()
        outcome = "failed"
        try:
            if len(rows) == 0:
                raise InputError("empty csv input")

            header, body = rows[0], rows[1:]
            check_duplicate_headers(header)

            schema = resolve_schema(target)
            require_directive = self._settings.require_format_directive
            column_map = bind_columns(header, schema, require_directive=require_directive)
            logger.debug("Bound %d of %d fields for %s: %s",
                         len(column_map), len(schema.fields), schema.model.__name__, column_map)

            records = materialize(
                column_map,
                body,
                schema,
                name_splitter=self._names,
                require_directive=require_directive,
                short_rows=self._settings.short_row_policy,
            )
            outcome = f"{len(records)} records"
            return records
        finally:
            elapsed = time.perf_counter() - start
            logger.info("decode took %.6fs (%s)", elapsed, outcome)

    def decode_stream(self, stream: Iterable[str], target: Any) -> list[BaseModel]:
        """Read CSV text from a stream, then decode it."""
        rows = read_rows(
            stream,
            delimiter=self._settings.delimiter,
            strict=self._settings.strict_quoting,
        )
        return self.decode(rows, target)

    def decode_text(self, text: str, target: Any) -> list[BaseModel]:
        return self.decode_stream(io.StringIO(text, newline=""), target)


def decode(rows: Sequence[Sequence[str]], target: Any, **kwargs: Any) -> list[BaseModel]:
    """Decode rows with a one-off CSVDecoder built from ``kwargs``."""
    return CSVDecoder(**kwargs).decode(rows, target)
