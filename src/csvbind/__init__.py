"""Decode CSV rows into typed, schema-described records."""

from __future__ import annotations

from csvbind.core.config import DecoderSettings
from csvbind.core.exceptions import (
    CsvBindError,
    DuplicateHeaderError,
    InputError,
    InvalidDirectiveError,
    SchemaError,
)
from csvbind.core.logging_config import get_logger, setup_logging
from csvbind.decoding.decoder import CSVDecoder, decode
from csvbind.models.schema import (
    ZERO_TIMESTAMP,
    CsvRecord,
    FieldRole,
    FormatDirective,
    RecordSchema,
    SemanticType,
    csv_field,
)

__all__ = [
    "CSVDecoder",
    "CsvBindError",
    "CsvRecord",
    "DecoderSettings",
    "DuplicateHeaderError",
    "FieldRole",
    "FormatDirective",
    "InputError",
    "InvalidDirectiveError",
    "RecordSchema",
    "SchemaError",
    "SemanticType",
    "ZERO_TIMESTAMP",
    "csv_field",
    "decode",
    "get_logger",
    "setup_logging",
]
