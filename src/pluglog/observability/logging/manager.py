"""Observability – LogManager, the level-keyed logger cache.

:class:`LogManager` is a :class:`PluginCache` whose plugin is a
:class:`FormattingLogger` and whose params are a :class:`Severity`. Asking
for the same level again returns the same logger; asking for a different
level retires it and builds a new one::

    log = LogManager.instance().get(Severity.DEBUG)
    if log.is_loggable(Severity.WARN):
        log.warn("Low memory")

Tag and message formats set on the manager apply to the active logger right
away and to every logger it builds later.

The manager also registers on the process :class:`UncaughtErrorHandlerChain`:
errors that escape a thread are logged through the active logger (unless it
ignores them or does not accept ``ERROR``) and then always reach the hooks
that were installed before.
"""
from __future__ import annotations

import logging
import os
import threading
from typing import Any, Callable, ClassVar

from pluglog.config.settings import SINK_STDLIB, LogSettings
from pluglog.kernel.plugin import PluginCache
from pluglog.observability.logging.formatting import FormattingLogger
from pluglog.observability.logging.placeholders import FormatSpec
from pluglog.observability.logging.protocol import Logger
from pluglog.observability.logging.severity import Severity
from pluglog.observability.logging.sinks import StdlibLogSink, StructlogLogSink
from pluglog.observability.logging.uncaught import (
    UncaughtError,
    UncaughtErrorHandlerChain,
    default_chain,
)

logger = logging.getLogger(__name__)

UNCAUGHT_TAG = "Uncaught"

SinkFactory = Callable[[Severity, LogSettings], Logger]


def default_sink_factory(level: Severity, settings: LogSettings) -> Logger:
    """Build the primitive sink selected by ``settings.sink``."""
    if settings.sink == SINK_STDLIB:
        return StdlibLogSink(
            level,
            settings.logger_name,
            ignore_uncaught_exceptions=settings.ignore_uncaught_exceptions,
        )
    return StructlogLogSink(
        level,
        settings.logger_name,
        ignore_uncaught_exceptions=settings.ignore_uncaught_exceptions,
    )


class LogManager(PluginCache[FormattingLogger, Severity]):
    """Process-wide cache of one :class:`FormattingLogger` per requested level.

    Parameters
    ----------
    settings:
        Logger name, sink kind, application id. Defaults to :class:`LogSettings`.
    sink_factory:
        Builds the primitive sink wrapped by each new logger.
    chain:
        Uncaught-error chain to register on. Defaults to the process chain,
        which is installed on construction.
    """

    _instance: ClassVar[LogManager | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(
        self,
        settings: LogSettings | None = None,
        *,
        sink_factory: SinkFactory | None = None,
        chain: UncaughtErrorHandlerChain | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings or LogSettings()
        self._sink_factory = sink_factory or default_sink_factory
        self._tag_format: FormatSpec | None = None
        self._msg_format: FormatSpec | None = None
        self._chain = chain or default_chain()
        self._chain.add(self.uncaught_exception)
        self._chain.install()

    # ------------------------------------------------------------------
    # Singleton
    # ------------------------------------------------------------------

    @classmethod
    def instance(cls, settings: LogSettings | None = None) -> LogManager:
        """Return the process-wide manager, creating it exactly once.

        *settings* only applies to the call that creates the instance.
        """
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls(settings)
                logger.debug("log_manager.created")
            return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Close and forget the process-wide manager."""
        with cls._instance_lock:
            if cls._instance is not None:
                cls._instance.close()
            cls._instance = None

    def close(self) -> None:
        """Stop receiving uncaught errors."""
        self._chain.remove(self.uncaught_exception)

    # ------------------------------------------------------------------
    # Plugin cache
    # ------------------------------------------------------------------

    @property
    def settings(self) -> LogSettings:
        return self._settings

    def get(self, level: Severity | int | str) -> FormattingLogger:  # type: ignore[override]
        """Return the formatting logger for *level* (a member, value or name)."""
        return super().get(Severity.parse(level))

    def make_plugin(self, params: Severity) -> FormattingLogger:
        formatting_logger = FormattingLogger(self._sink_factory(params, self._settings))
        tag_format, msg_format = self._tag_format, self._msg_format
        if tag_format is not None:
            formatting_logger.set_tag_format(tag_format.format, *tag_format.args)
        if msg_format is not None:
            formatting_logger.set_msg_format(msg_format.format, *msg_format.args)
        return formatting_logger

    def is_dirty(self, plugin: FormattingLogger, old_params: Severity, params: Severity) -> bool:
        return old_params != params

    # ------------------------------------------------------------------
    # Formats
    # ------------------------------------------------------------------

    @property
    def tag_format(self) -> FormatSpec | None:
        return self._tag_format

    @property
    def msg_format(self) -> FormatSpec | None:
        return self._msg_format

    def set_tag_format(self, format: str, *args: Any) -> None:  # noqa: A002
        """Set the tag template for the active logger and every later one."""
        with self._lock:
            self._tag_format = FormatSpec(format, args)
            active = self.active_plugin
            if active is not None:
                active.set_tag_format(format, *args)

    def set_msg_format(self, format: str, *args: Any) -> None:  # noqa: A002
        """Set the message template for the active logger and every later one."""
        with self._lock:
            self._msg_format = FormatSpec(format, args)
            active = self.active_plugin
            if active is not None:
                active.set_msg_format(format, *args)

    # ------------------------------------------------------------------
    # Uncaught errors
    # ------------------------------------------------------------------

    def uncaught_exception(self, error: UncaughtError) -> None:
        """Log *error* through the active logger's base logger.

        Nothing is raised from here; the chain forwards the error to the
        previous hooks whatever happens.
        """
        active = self.active_plugin
        if active is None or not active.is_loggable(Severity.ERROR) or active.ignore_uncaught_exceptions():
            return
        msg = (
            f"FATAL EXCEPTION: {error.thread_name}\n"
            f"Process: {self._settings.application_id}, PID: {os.getpid()}"
        )
        try:
            active.base_logger.error(UNCAUGHT_TAG, msg, error.exc_value)
        except Exception:  # noqa: BLE001
            logger.warning("log_manager.uncaught_log_failed", exc_info=True)


__all__ = ["LogManager", "SinkFactory", "UNCAUGHT_TAG", "default_sink_factory"]
