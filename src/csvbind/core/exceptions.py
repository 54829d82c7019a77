"""csvbind exception hierarchy."""

from __future__ import annotations


class CsvBindError(Exception):
    """Base exception for all csvbind errors."""


class InputError(CsvBindError):
    """Row set is empty, unreadable, or structurally unusable."""


class SchemaError(CsvBindError):
    """Decode target is not a sequence of structured records."""


class DuplicateHeaderError(CsvBindError):
    """Two header cells carry the same text."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Repeated header name: {name!r}")


class InvalidDirectiveError(CsvBindError):
    """A field declares a format directive that is not recognized."""

    def __init__(self, token: str, valid: list[str] | None = None) -> None:
        self.token = token
        self.valid = valid or []
        allowed = f": use [{', '.join(self.valid)}]" if self.valid else ""
        super().__init__(f"Invalid string format {token!r}{allowed}")
