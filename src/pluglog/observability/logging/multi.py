"""Observability – MultiLogger (fan-out).

A set of loggers that behaves as one logger: writes are broadcast to every
member that accepts the severity, and byte counts are summed.

Members are kept in insertion order; callers that need a specific fan-out
order should add members in that order.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSet
from typing import Callable

from pluglog.observability.logging.protocol import Logger
from pluglog.observability.logging.severity import Severity


class MultiLogger(MutableSet[Logger]):
    """A :class:`Logger` that broadcasts to a set of member loggers.

    * ``level`` is the most verbose member level (``ASSERT`` when empty);
      setting it updates every member.
    * ``ignore_uncaught_exceptions()`` is ``True`` only if every member agrees.
    * each write skips members whose ``is_loggable`` rejects that severity.
    """

    def __init__(self, loggers: Iterable[Logger] = ()) -> None:
        self._members: dict[Logger, None] = dict.fromkeys(loggers)

    # ------------------------------------------------------------------
    # MutableSet interface
    # ------------------------------------------------------------------

    def __contains__(self, logger: object) -> bool:
        return logger in self._members

    def __iter__(self) -> Iterator[Logger]:
        return iter(list(self._members))

    def __len__(self) -> int:
        return len(self._members)

    def add(self, logger: Logger) -> None:
        self._members[logger] = None

    def discard(self, logger: Logger) -> None:
        self._members.pop(logger, None)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._members)!r})"

    # compared and hashed by identity so a MultiLogger can itself be a member
    __hash__ = object.__hash__
    __eq__ = object.__eq__

    # ------------------------------------------------------------------
    # Logger interface
    # ------------------------------------------------------------------

    @property
    def level(self) -> Severity:
        return min((logger.level for logger in self), default=Severity.ASSERT)

    @level.setter
    def level(self, level: Severity) -> None:
        for logger in self:
            logger.level = level

    def ignore_uncaught_exceptions(self) -> bool:
        return all(logger.ignore_uncaught_exceptions() for logger in self)

    def is_loggable(self, level: Severity) -> bool:
        return level >= self.level

    def verbose(self, tag: str, msg: str, exc: BaseException | None = None) -> int:
        return self._broadcast(Severity.VERBOSE, lambda logger: logger.verbose(tag, msg, exc))

    def debug(self, tag: str, msg: str, exc: BaseException | None = None) -> int:
        return self._broadcast(Severity.DEBUG, lambda logger: logger.debug(tag, msg, exc))

    def info(self, tag: str, msg: str, exc: BaseException | None = None) -> int:
        return self._broadcast(Severity.INFO, lambda logger: logger.info(tag, msg, exc))

    def warn(self, tag: str, msg: str, exc: BaseException | None = None) -> int:
        return self._broadcast(Severity.WARN, lambda logger: logger.warn(tag, msg, exc))

    def error(self, tag: str, msg: str, exc: BaseException | None = None) -> int:
        return self._broadcast(Severity.ERROR, lambda logger: logger.error(tag, msg, exc))

    def _broadcast(self, level: Severity, write: Callable[[Logger], int]) -> int:
        written = 0
        for logger in self:
            if logger.is_loggable(level):
                written += write(logger)
        return written


__all__ = ["MultiLogger"]
