"""Observability – Logger protocol.

Every logging component in this package (primitive sinks, wrappers, the
fan-out :class:`MultiLogger`) satisfies this protocol, so they nest freely.
Write methods return the number of bytes written; ``0`` means nothing was
emitted.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from pluglog.observability.logging.severity import Severity


@runtime_checkable
class Logger(Protocol):
    """Minimal leveled logger with Android-style tag/message writes."""

    @property
    def level(self) -> Severity: ...

    @level.setter
    def level(self, level: Severity) -> None: ...

    def ignore_uncaught_exceptions(self) -> bool: ...
    def is_loggable(self, level: Severity) -> bool: ...

    def verbose(self, tag: str, msg: str, exc: BaseException | None = None) -> int: ...
    def debug(self, tag: str, msg: str, exc: BaseException | None = None) -> int: ...
    def info(self, tag: str, msg: str, exc: BaseException | None = None) -> int: ...
    def warn(self, tag: str, msg: str, exc: BaseException | None = None) -> int: ...
    def error(self, tag: str, msg: str, exc: BaseException | None = None) -> int: ...


__all__ = ["Logger"]
