"""Observability – structlog configuration."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from resultkit.config.settings import get_settings


def _render_result_error(logger: Any, method: Any, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
    """Flatten any ``ResultError`` values so renderers see plain dicts."""
    from resultkit.kernel.types.error import ResultError

    for key, value in event_dict.items():
        if isinstance(value, ResultError):
            event_dict[key] = value.to_dict()
    return event_dict


def configure_logging(level: int | str | None = None, *, json: bool | None = None) -> None:
    """Route stdlib and structlog records through one structlog formatter.

    Arguments left as ``None`` fall back to :class:`ResultKitSettings`.
    Applications call this once at start-up; the library never does.
    """
    settings = get_settings()
    if level is None:
        level = settings.log_level
    if json is None:
        json = settings.log_json

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        _render_result_error,
    ]

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    final_processors: list[Any] = [structlog.stdlib.ProcessorFormatter.remove_processors_meta]
    if json:
        final_processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        final_processors.append(structlog.dev.ConsoleRenderer(colors=False))
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=final_processors,
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


__all__ = ["configure_logging"]
