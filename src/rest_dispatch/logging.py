"""
rest_dispatch.logging
─────────────────────
Structured logging for the dispatch layer, built on structlog.

Nothing is configured on import; the host application either calls
``configure_logging()`` once at startup or routes structlog itself.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

_REDACT_KEYS = frozenset({
    "authorization", "cookie", "set-cookie", "headers", "token",
    "access_token", "api_key", "x-api-key", "password",
})

_REDACTED = "[REDACTED]"


def _redact_processor(logger: Any, method: str, event_dict: dict) -> dict:
    """Strip header values and credentials from log records."""
    for key in list(event_dict.keys()):
        if key.lower() in _REDACT_KEYS:
            event_dict[key] = _REDACTED
    return event_dict


def configure_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Route structlog through stdlib logging with a JSON or console renderer."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        _redact_processor,
    ]

    if fmt == "console":
        renderer: Any = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger("rest_dispatch")
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(log_level)


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger bound to ``name``.

    Usage:
        log = get_logger(__name__)
        log.info("dispatch.start", method="PUT", url="api/entity")
    """
    return structlog.get_logger(name or "rest_dispatch")
