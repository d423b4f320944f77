"""Logging helpers for the command line entry point."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_CONFIGURED = False

FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging(level: str | int = "WARNING", stream: TextIO | None = None) -> None:
    """Attach a single stream handler to the ``quadineq`` logger."""
    global _CONFIGURED
    logger = logging.getLogger("quadineq")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    logger.setLevel(level)
    if _CONFIGURED:
        return

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(FORMAT))
    logger.addHandler(handler)

    _CONFIGURED = True
    logger.debug("Logging initialized at %s", logging.getLevelName(level))
