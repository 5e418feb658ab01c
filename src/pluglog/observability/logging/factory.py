"""Observability – structlog / stdlib logging configuration."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from pluglog.observability.logging.severity import Severity


def configure_logging(level: Severity = Severity.INFO, *, json_output: bool = True) -> logging.Handler:
    """Route structlog through stdlib :mod:`logging` with one root stream handler.

    Events get ISO timestamps, the log level and the logger name, and are
    rendered as JSON (or with the console renderer when *json_output* is
    false). Returns the installed root handler.
    """
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    renderer: Any = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    final_processors: list[Any] = [structlog.stdlib.ProcessorFormatter.remove_processors_meta]
    if json_output:
        final_processors.append(structlog.processors.format_exc_info)
    final_processors.append(renderer)
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=final_processors,
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(Severity.parse(level).stdlib_level)
    return handler


__all__ = ["configure_logging"]
