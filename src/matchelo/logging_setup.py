"""Opt-in logging configuration for applications using matchelo.

The library itself only creates module loggers; nothing is configured on
import. Call configure_logging() from an application entry point to get
output formatted from Settings.
"""

from __future__ import annotations

import logging
from typing import Optional

from matchelo.config import Settings, get_settings


def configure_logging(level: Optional[str] = None, settings: Optional[Settings] = None) -> logging.Logger:
    """
    Configure root logging from settings and return the package logger.

    Args:
        level: Overrides settings.log_level when given (e.g. "DEBUG")
        settings: Settings to read. Defaults to the cached get_settings().
    """
    settings = settings or get_settings()
    level_name = (level or settings.log_level).upper()
    # Unknown names fall back to INFO
    resolved = getattr(logging, level_name, logging.INFO)
    if not isinstance(resolved, int):
        resolved = logging.INFO

    logging.basicConfig(
        level=resolved,
        format=settings.log_format,
        datefmt="%H:%M:%S",
    )
    logger = logging.getLogger("matchelo")
    logger.setLevel(resolved)
    return logger
