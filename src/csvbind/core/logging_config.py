"""Logging configuration for csvbind.

The package only emits records through ``csvbind.*`` loggers. Host
applications that want csvbind output without configuring logging themselves
call ``setup_logging`` once at startup.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from csvbind.core.config import DecoderSettings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | None = None, stream: TextIO | None = None) -> logging.Logger:
    """Attach a stream handler to the ``csvbind`` logger and set its level.

    The level defaults to ``DecoderSettings().log_level`` (``CSVBIND_LOG_LEVEL``).
    Repeated calls replace the handler installed by a previous call instead of
    stacking another one. The root logger is left untouched.
    """
    level_val = level or DecoderSettings().log_level
    logger = logging.getLogger("csvbind")
    logger.setLevel(getattr(logging, level_val.upper(), logging.INFO))

    for handler in list(logger.handlers):
        if getattr(handler, "_csvbind_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    handler._csvbind_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(f"csvbind.{name}")
