"""Root logger setup for applications embedding the records core.

The library modules only create ``logging.getLogger(__name__)`` loggers and
never configure handlers themselves. An embedding script calls
``configure_logging(settings)`` once at startup.
"""

from __future__ import annotations

import logging

from employee_records.core.config import Settings


def configure_logging(settings: Settings) -> int:
    """Apply the configured log level and format to the root logger.

    Returns the numeric level that was applied.
    """
    if settings.DEBUG:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(settings.LOG_LEVEL.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {settings.LOG_LEVEL}")

    logging.basicConfig(level=level, format=settings.LOG_FORMAT, force=True)
    return level
