"""
Structured logging for the stock ledger.

Engine and query events are structlog key/value events with snake_case
names. Development gets a colored console; every other environment gets
one JSON object per line.
"""

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import EventDict, Processor

if TYPE_CHECKING:
    from stockledger.config.settings import Settings

# Chatty per-operation store events (catalog_insert, ledger_append, ...)
STORAGE_LOGGER = "stockledger.infrastructure.storage"


def _app_context(settings: "Settings") -> Processor:
    app = {
        "app": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
    }

    def add_app_context(
        logger: logging.Logger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        for key, value in app.items():
            event_dict.setdefault(key, value)
        return event_dict

    return add_app_context


def _renderer(settings: "Settings") -> list[Processor]:
    if settings.environment == "development":
        return [structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())]
    return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]


def configure_logging(settings: "Settings | None" = None) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        settings: Settings to log with; defaults to the global settings.
            Pass the same instance the engine is built from.
    """
    if settings is None:
        from stockledger.config.settings import get_settings

        settings = get_settings()

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _app_context(settings),
        *_renderer(settings),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout)
    logging.getLogger().setLevel(settings.log_level)
    logging.getLogger("stockledger").setLevel(settings.log_level)
    logging.getLogger(STORAGE_LOGGER).setLevel(settings.storage_log_level)


def get_logger(name: str | None = None, **initial_values: Any) -> structlog.stdlib.BoundLogger:
    """Get a structured logger, optionally pre-bound with context values."""
    return structlog.get_logger(name, **initial_values)
