"""Personal name parts produced by name splitters."""

from __future__ import annotations

from pydantic import BaseModel


class NameParts(BaseModel):
    """First / middle / last decomposition of a full name."""

    first: str = ""
    middle: str = ""
    last: str = ""

    model_config = {"frozen": True}
