"""structlog configuration shared by every graphunit module."""

from __future__ import annotations

from typing import Any, Optional

import structlog

from graphunit.core import config
from graphunit.core.config import Settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Install the structlog processor chain for the given settings."""
    settings = settings or config.settings

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.LOG_JSON
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(settings.log_level_number),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def _resolve(name: str) -> Any:
    # A host (or configure_logging) that configured structlog owns filtering;
    # otherwise drop everything below the configured LOG_LEVEL.
    if structlog.is_configured():
        return structlog.get_logger(name)
    return structlog.wrap_logger(
        None,
        wrapper_class=structlog.make_filtering_bound_logger(config.settings.log_level_number),
        logger_factory_args=(name,),
    )


class _LibraryLogger:
    """Module-level logger that picks its configuration at call time."""

    def __init__(self, name: str) -> None:
        self._name = name

    def __getattr__(self, method: str) -> Any:
        return getattr(_resolve(self._name), method)


def get_logger(name: str) -> _LibraryLogger:
    return _LibraryLogger(name)
