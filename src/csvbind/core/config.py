"""Decoder configuration using pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class DecoderSettings(BaseSettings):
    """Settings shared by every decode call made through one decoder."""

    model_config = {"env_prefix": "CSVBIND_"}

    log_level: str = "INFO"

    # Row reader
    delimiter: str = ","
    strict_quoting: bool = True

    # Reference-compatible mode: fields without a format directive are neither
    # bound nor assigned.
    require_format_directive: bool = False

    # "empty": a missing cell reads as "", "error": raise InputError
    short_row_policy: Literal["empty", "error"] = "empty"
