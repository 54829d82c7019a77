"""Type aliases used across csvbind."""

from __future__ import annotations

Row = list[str]
Rows = list[Row]
ColumnMap = dict[str, int]
