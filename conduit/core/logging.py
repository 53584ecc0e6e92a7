"""
Structured logging setup built on structlog.

Events are routed through the standard library ``logging`` module, so
until an application configures handlers the package stays silent
(the ``conduit`` logger carries a NullHandler).  Applications and
scripts call ``setup_logging()`` once at startup to get output.

Modules grab a logger with ``get_logger(__name__)`` and log events with
keyword context::

    logger = get_logger(__name__)
    logger.info("Pipeline finished", status="COMPLETED", steps_run=3)
"""

from __future__ import annotations

import logging
import sys

import structlog

_SHARED_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
]


def configure_defaults() -> None:
    """
    Quiet, stdlib-backed configuration used when nothing else is set.

    Leaves an existing structlog configuration alone.
    """
    logging.getLogger("conduit").addHandler(logging.NullHandler())

    if structlog.is_configured():
        return

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def setup_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """
    Configure stdlib logging and structlog to share one output stream.

    Args:
        level: Minimum level name, e.g. "DEBUG" or "INFO".
        json_logs: Render one JSON object per line instead of the
                   coloured console format.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
        force=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to ``name``."""
    return structlog.stdlib.get_logger(name)


configure_defaults()
