"""
Logging setup for the presentation service.

Application loggers and third-party stdlib loggers share one root handler
whose formatter renders through structlog, so SQLAlchemy and uvicorn lines
come out in the same JSON/console shape as the service's own events.
"""

from __future__ import annotations

import logging
from typing import Optional

import structlog

# Loggers created by the service, all at the configured level
SERVICE_LOGGERS = (
    "app",
    "http",
    "api.errors",
    "api.presentations",
    "api.slides",
    "store.presentation",
    "manager.slide",
    "repo.presentation",
    "repo.presentation.memory",
    "database",
)

_HANDLER_NAME = "presentation_service"


def _third_party_levels(debug_sql: bool) -> dict[str, int]:
    return {
        "sqlalchemy.engine": logging.INFO if debug_sql else logging.WARNING,
        "aiosqlite": logging.WARNING,
        "uvicorn.access": logging.WARNING,
    }


def setup_logging(settings) -> None:
    """Install the structlog pipeline using LOG_LEVEL, LOG_FORMAT and DATABASE_ECHO."""
    level = logging.getLevelName((settings.log_level or "INFO").upper())
    if not isinstance(level, int):
        level = logging.INFO

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    renderer = (
        structlog.dev.ConsoleRenderer()
        if (settings.log_format or "json").lower() == "console"
        else structlog.processors.JSONRenderer(sort_keys=True)
    )

    handler = logging.StreamHandler()
    handler.name = _HANDLER_NAME
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    # Repeated setup (one per app instance) must not stack handlers
    root.handlers = [h for h in root.handlers if h.name != _HANDLER_NAME]
    root.addHandler(handler)
    root.setLevel(level)

    for name in SERVICE_LOGGERS:
        logging.getLogger(name).setLevel(level)
    for name, lib_level in _third_party_levels(settings.debug_sql).items():
        logging.getLogger(name).setLevel(lib_level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name) if name else structlog.get_logger()
