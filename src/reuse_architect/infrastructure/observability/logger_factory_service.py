"""Logging setup for the studio: structlog for app code, stdlib records bridged into the same chain."""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable

import structlog

from reuse_architect.infrastructure.observability.logging.studio_schema_processor import (
    studio_schema_processor,
)

_configured = False

_RENDERERS: dict[str, Callable[[], Any]] = {
    "json": structlog.processors.JSONRenderer,
    "console": lambda: structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()),
}


def configure_logging(level: str = "INFO", log_format: str = "console") -> None:
    """Install the processor chain once per process; later calls are ignored."""
    global _configured  # noqa: PLW0603
    if _configured:
        return
    _configured = True

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    renderer = _RENDERERS.get(log_format.lower(), _RENDERERS["console"])()
    chain: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        studio_schema_processor,
    ]

    structlog.configure(
        processors=[*chain, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *chain, renderer],
        )
    )
    logging.basicConfig(handlers=[handler], level=numeric_level, force=True)


def get_logger(component: str) -> Any:
    # lazy proxy, so module-level loggers pick up configuration done later
    return structlog.get_logger(context_component=component)
