"""Row reader — turns CSV text into rows of string cells."""

from __future__ import annotations

import csv
from typing import Iterable

from csvbind.core.exceptions import InputError
from csvbind.core.types import Rows


def read_rows(stream: Iterable[str], *, delimiter: str = ",", strict: bool = True) -> Rows:
    """Read every row from a text stream.

    Raises:
        InputError: if the text is not valid CSV.
    """
    try:
        return [row for row in csv.reader(stream, delimiter=delimiter, strict=strict)]
    except csv.Error as exc:
        raise InputError(f"unable to read rows: {exc}") from exc
