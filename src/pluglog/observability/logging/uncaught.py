"""Observability – uncaught-error handler chain.

Python has two process-wide slots for uncaught errors: :data:`sys.excepthook`
(main thread) and :data:`threading.excepthook` (other threads). The chain
takes both slots once and fans every uncaught error out to an ordered list of
handlers, then always hands it to the hooks that were installed before it.
A handler can observe an error but can never stop it from reaching those
previous hooks.
"""
from __future__ import annotations

import dataclasses
import logging
import sys
import threading
from types import TracebackType
from typing import Any, Callable

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class UncaughtError:
    """An error that escaped to the top of a thread."""

    exc_type: type[BaseException]
    exc_value: BaseException | None
    exc_traceback: TracebackType | None
    thread: threading.Thread | None = None

    @property
    def thread_name(self) -> str:
        thread = self.thread or threading.current_thread()
        return thread.name


UncaughtErrorHandler = Callable[[UncaughtError], None]


class UncaughtErrorHandlerChain:
    """Ordered fan-out of uncaught errors ending in the previously installed hooks."""

    def __init__(self) -> None:
        self._handlers: list[UncaughtErrorHandler] = []
        self._lock = threading.RLock()
        self._installed = False
        self._previous_excepthook: Callable[..., Any] | None = None
        self._previous_threading_excepthook: Callable[..., Any] | None = None

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    @property
    def handlers(self) -> tuple[UncaughtErrorHandler, ...]:
        return tuple(self._handlers)

    @property
    def installed(self) -> bool:
        return self._installed

    def add(self, handler: UncaughtErrorHandler) -> "UncaughtErrorHandlerChain":
        """Append *handler* (fluent API)."""
        with self._lock:
            self._handlers.append(handler)
        return self

    def remove(self, handler: UncaughtErrorHandler) -> None:
        with self._lock:
            if handler in self._handlers:
                self._handlers.remove(handler)

    # ------------------------------------------------------------------
    # Process hooks
    # ------------------------------------------------------------------

    def install(self) -> None:
        """Take over :data:`sys.excepthook` and :data:`threading.excepthook`.

        The hooks present at this moment become the end of the chain.
        Installing twice is a no-op.
        """
        with self._lock:
            if self._installed:
                return
            self._previous_excepthook = sys.excepthook
            self._previous_threading_excepthook = threading.excepthook
            sys.excepthook = self._excepthook
            threading.excepthook = self._threading_excepthook
            self._installed = True
            logger.debug("uncaught_chain.installed")

    def uninstall(self) -> None:
        """Restore the previous hooks if this chain still owns the slots."""
        with self._lock:
            if not self._installed:
                return
            if sys.excepthook == self._excepthook:
                sys.excepthook = self._previous_excepthook or sys.__excepthook__
            if threading.excepthook == self._threading_excepthook:
                threading.excepthook = self._previous_threading_excepthook or threading.__excepthook__
            self._installed = False
            logger.debug("uncaught_chain.uninstalled")

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def dispatch(self, error: UncaughtError) -> None:
        """Run every handler; a failing handler is logged and skipped."""
        for handler in self.handlers:
            try:
                handler(error)
            except Exception:  # noqa: BLE001
                logger.warning("uncaught_chain.handler_failed handler=%r", handler, exc_info=True)

    def _excepthook(
        self,
        exc_type: type[BaseException],
        exc_value: BaseException,
        exc_traceback: TracebackType | None,
    ) -> None:
        try:
            self.dispatch(UncaughtError(exc_type, exc_value, exc_traceback, threading.current_thread()))
        finally:
            previous = self._previous_excepthook or sys.__excepthook__
            previous(exc_type, exc_value, exc_traceback)

    def _threading_excepthook(self, args: Any) -> None:
        try:
            self.dispatch(UncaughtError(args.exc_type, args.exc_value, args.exc_traceback, args.thread))
        finally:
            previous = self._previous_threading_excepthook or threading.__excepthook__
            previous(args)


_default_chain: UncaughtErrorHandlerChain | None = None
_default_chain_lock = threading.Lock()


def default_chain() -> UncaughtErrorHandlerChain:
    """Return the process-wide chain, creating it on first use."""
    global _default_chain
    with _default_chain_lock:
        if _default_chain is None:
            _default_chain = UncaughtErrorHandlerChain()
        return _default_chain


__all__ = ["UncaughtError", "UncaughtErrorHandler", "UncaughtErrorHandlerChain", "default_chain"]
