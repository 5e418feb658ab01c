"""Observability – LoggerWrapper."""
from __future__ import annotations

from pluglog.kernel.utils import require_not_none
from pluglog.observability.logging.protocol import Logger
from pluglog.observability.logging.severity import Severity


class LoggerWrapper:
    """Delegates every :class:`Logger` operation to a wrapped base logger.

    Subclass it to decorate a logger while overriding only the operations
    that change.
    """

    def __init__(self, base_logger: Logger) -> None:
        self._base_logger = require_not_none(base_logger, "base_logger must not be None", parameter="base_logger")

    @property
    def base_logger(self) -> Logger:
        return self._base_logger

    @property
    def level(self) -> Severity:
        return self._base_logger.level

    @level.setter
    def level(self, level: Severity) -> None:
        self._base_logger.level = level

    def ignore_uncaught_exceptions(self) -> bool:
        return self._base_logger.ignore_uncaught_exceptions()

    def is_loggable(self, level: Severity) -> bool:
        return self._base_logger.is_loggable(level)

    def verbose(self, tag: str, msg: str, exc: BaseException | None = None) -> int:
        return self._base_logger.verbose(tag, msg, exc)

    def debug(self, tag: str, msg: str, exc: BaseException | None = None) -> int:
        return self._base_logger.debug(tag, msg, exc)

    def info(self, tag: str, msg: str, exc: BaseException | None = None) -> int:
        return self._base_logger.info(tag, msg, exc)

    def warn(self, tag: str, msg: str, exc: BaseException | None = None) -> int:
        return self._base_logger.warn(tag, msg, exc)

    def error(self, tag: str, msg: str, exc: BaseException | None = None) -> int:
        return self._base_logger.error(tag, msg, exc)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._base_logger!r})"


__all__ = ["LoggerWrapper"]
