"""Observability – structlog configuration and get_logger helper.

These cover nettrace's own diagnostics (sink failures, adapter warnings).
Lifecycle traces go through :class:`~nettrace.observability.logging.EventLogger`.
"""
from __future__ import annotations

import logging
from typing import Any

import structlog

from nettrace.observability.logging.filters import SensitiveFieldsFilter


def configure_logging(
    level: int = logging.INFO,
    json: bool = False,
    sensitive_fields: frozenset[str] | None = None,
) -> None:
    """Route structlog through stdlib :mod:`logging` with a single root handler.

    Parameters
    ----------
    level:
        Root log level.
    json:
        Render JSON lines instead of the human-readable console format.
    sensitive_fields:
        Keys redacted from every event dict (see :class:`SensitiveFieldsFilter`).
    """
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if sensitive_fields:
        _filter = SensitiveFieldsFilter(sensitive_fields)

        def _redact(logger: Any, method: Any, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
            return _filter.redact_deep(event_dict)

        shared_processors.insert(0, _redact)

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    renderer: Any = (
        structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer(colors=False)
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["configure_logging", "get_logger"]
