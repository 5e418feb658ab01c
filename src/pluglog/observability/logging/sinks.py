"""Observability – primitive severity-filtering sinks.

These are the leaf :class:`Logger` implementations that actually emit
records, one over the stdlib :mod:`logging` module and one over structlog.
Writes below the sink's level emit nothing and return ``0``; accepted writes
return the UTF-8 byte length of the tag plus the message.
"""
from __future__ import annotations

import abc
import logging
import threading
from typing import Any

import structlog

from pluglog.kernel.utils import require_not_none
from pluglog.observability.logging.severity import Severity

_STRUCTLOG_METHODS = {
    Severity.VERBOSE: "debug",
    Severity.DEBUG: "debug",
    Severity.INFO: "info",
    Severity.WARN: "warning",
    Severity.ERROR: "error",
    Severity.ASSERT: "critical",
}


def byte_count(tag: str, msg: str) -> int:
    return len(tag.encode("utf-8")) + len(msg.encode("utf-8"))


class LevelFilteringSink(abc.ABC):
    """Base for sinks that drop writes below a configurable :class:`Severity`."""

    def __init__(self, level: Severity = Severity.INFO, *, ignore_uncaught_exceptions: bool = False) -> None:
        self._level = Severity.parse(level)
        self._ignore_uncaught = ignore_uncaught_exceptions
        self._lock = threading.Lock()

    @property
    def level(self) -> Severity:
        return self._level

    @level.setter
    def level(self, level: Severity) -> None:
        with self._lock:
            self._level = Severity.parse(level)

    def ignore_uncaught_exceptions(self) -> bool:
        return self._ignore_uncaught

    def is_loggable(self, level: Severity) -> bool:
        return level >= self._level

    def verbose(self, tag: str, msg: str, exc: BaseException | None = None) -> int:
        return self._write(Severity.VERBOSE, tag, msg, exc)

    def debug(self, tag: str, msg: str, exc: BaseException | None = None) -> int:
        return self._write(Severity.DEBUG, tag, msg, exc)

    def info(self, tag: str, msg: str, exc: BaseException | None = None) -> int:
        return self._write(Severity.INFO, tag, msg, exc)

    def warn(self, tag: str, msg: str, exc: BaseException | None = None) -> int:
        return self._write(Severity.WARN, tag, msg, exc)

    def error(self, tag: str, msg: str, exc: BaseException | None = None) -> int:
        return self._write(Severity.ERROR, tag, msg, exc)

    def _write(self, level: Severity, tag: str, msg: str, exc: BaseException | None) -> int:
        if not self.is_loggable(level):
            return 0
        return self._emit(level, tag, msg, exc)

    @abc.abstractmethod
    def _emit(self, level: Severity, tag: str, msg: str, exc: BaseException | None) -> int: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(level={self._level.name})"


class StdlibLogSink(LevelFilteringSink):
    """Emits ``"<tag>: <msg>"`` records on a stdlib :class:`logging.Logger`.

    Parameters
    ----------
    level:
        Minimum severity this sink accepts.
    logger:
        Target logger; a name or a :class:`logging.Logger`. Defaults to ``"pluglog"``.
    """

    def __init__(
        self,
        level: Severity = Severity.INFO,
        logger: logging.Logger | str | None = None,
        *,
        ignore_uncaught_exceptions: bool = False,
    ) -> None:
        super().__init__(level, ignore_uncaught_exceptions=ignore_uncaught_exceptions)
        if logger is None or isinstance(logger, str):
            logger = logging.getLogger(logger or "pluglog")
        self._logger = logger

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def _emit(self, level: Severity, tag: str, msg: str, exc: BaseException | None) -> int:
        stdlib_level = level.stdlib_level
        if not self._logger.isEnabledFor(stdlib_level):
            return 0
        self._logger.log(stdlib_level, "%s: %s", tag, msg, exc_info=exc)
        return byte_count(tag, msg)


class StructlogLogSink(LevelFilteringSink):
    """Emits events on a structlog logger with the tag bound as ``tag``.

    Parameters
    ----------
    level:
        Minimum severity this sink accepts.
    logger:
        A structlog (bound) logger or a logger name passed to
        :func:`structlog.get_logger`. Defaults to ``"pluglog"``.
    """

    def __init__(
        self,
        level: Severity = Severity.INFO,
        logger: Any = None,
        *,
        ignore_uncaught_exceptions: bool = False,
    ) -> None:
        super().__init__(level, ignore_uncaught_exceptions=ignore_uncaught_exceptions)
        if logger is None or isinstance(logger, str):
            logger = structlog.get_logger(logger or "pluglog")
        self._logger = require_not_none(logger, "logger must not be None", parameter="logger")

    @property
    def logger(self) -> Any:
        return self._logger

    def _emit(self, level: Severity, tag: str, msg: str, exc: BaseException | None) -> int:
        if not self._is_enabled_for(max(level.stdlib_level, logging.DEBUG)):
            return 0
        fields: dict[str, Any] = {"tag": tag, "severity": level.name}
        if exc is not None:
            fields["exc_info"] = exc
        getattr(self._logger, _STRUCTLOG_METHODS[level])(msg, **fields)
        return byte_count(tag, msg)

    def _is_enabled_for(self, stdlib_level: int) -> bool:
        # filtering bound loggers expose is_enabled_for, stdlib ones isEnabledFor;
        # VERBOSE is emitted through debug(), so it is checked at DEBUG
        check = getattr(self._logger, "is_enabled_for", None) or getattr(self._logger, "isEnabledFor", None)
        return True if check is None else bool(check(stdlib_level))


__all__ = ["LevelFilteringSink", "StdlibLogSink", "StructlogLogSink", "byte_count"]
