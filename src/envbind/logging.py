"""structlog setup shared by the library and the CLI.

Library loggers write through the standard ``logging`` module under the
``envbind`` name, so nothing is printed unless the host configures logging.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

from .config import settings
from .values.loglevel import LogLevel


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """Configure structlog and the root logger with the given level name and format.

    Defaults come from ``settings`` (``ENVBIND_LOG_LEVEL``, ``ENVBIND_LOG_FORMAT``).
    Output goes to stderr.
    """
    log_level = LogLevel()
    log_level.set(level or settings.log_level)
    fmt = fmt or settings.log_format

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level.value, force=True)

    renderer = (
        structlog.processors.JSONRenderer()
        if fmt == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: Optional[str] = None):
    return structlog.get_logger(name) if name else structlog.get_logger()
