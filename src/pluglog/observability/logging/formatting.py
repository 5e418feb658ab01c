"""Observability – FormattingLogger.

A :class:`LoggerWrapper` that rewrites the tag and message of every write
from two :class:`FormatSpec` templates before handing them to the base
logger. Templates may reference the call site (class, file, method, line)
through :class:`Placeholder` tokens.

Usage::

    logger = FormattingLogger(StdlibLogSink(Severity.DEBUG))
    logger.set_tag_format("%s", Placeholder.SIMPLE_CLASS_NAME)
    logger.set_msg_format("%s:%d %s", Placeholder.METHOD_NAME,
                          Placeholder.LINE_NUMBER, Placeholder.SUPPLIED)
    logger.debug("cache warmed")            # message only
    logger.warn("Billing", "card declined")  # supplied tag + message
    logger.error("charge failed", exc)       # message + error

Caller-supplied tag or message text only reaches the output through a
``Placeholder.SUPPLIED`` argument. With the formats above, the ``"Billing"``
tag is dropped because the tag format does not contain ``SUPPLIED``.
"""
from __future__ import annotations

from typing import Any

from pluglog.observability.logging.callsite import CallSiteResolver, FrameCallSiteResolver
from pluglog.observability.logging.placeholders import FormatSpec, Placeholder
from pluglog.observability.logging.protocol import Logger
from pluglog.observability.logging.severity import Severity
from pluglog.observability.logging.wrapper import LoggerWrapper

MAX_TAG_LENGTH = 23

DEFAULT_TAG_FORMAT = FormatSpec("%s", (Placeholder.SUPPLIED,))
DEFAULT_MSG_FORMAT = FormatSpec(
    "%s(%s:%d) %s",
    (Placeholder.METHOD_NAME, Placeholder.FILE_NAME, Placeholder.LINE_NUMBER, Placeholder.SUPPLIED),
)

_EMPTY = ""
_WRITE_METHODS = {
    Severity.VERBOSE: "verbose",
    Severity.DEBUG: "debug",
    Severity.INFO: "info",
    Severity.WARN: "warn",
    Severity.ERROR: "error",
}


class FormattingLogger(LoggerWrapper):
    """Formats tag and message from call-site templates, then delegates.

    Each write method accepts ``(msg)``, ``(msg, exc)``, ``(tag, msg)`` or
    ``(tag, msg, exc)``. The tag is truncated to :data:`MAX_TAG_LENGTH`
    characters; the message is not limited.

    Parameters
    ----------
    base_logger:
        Logger that receives the formatted tag and message.
    resolver:
        Call-site resolver. Defaults to a :class:`FrameCallSiteResolver`.
    """

    def __init__(self, base_logger: Logger, *, resolver: CallSiteResolver | None = None) -> None:
        super().__init__(base_logger)
        self._resolver: CallSiteResolver = resolver or FrameCallSiteResolver()
        self._tag_format = DEFAULT_TAG_FORMAT
        self._msg_format = DEFAULT_MSG_FORMAT

    # ------------------------------------------------------------------
    # Formats
    # ------------------------------------------------------------------

    @property
    def tag_format(self) -> FormatSpec:
        return self._tag_format

    @property
    def msg_format(self) -> FormatSpec:
        return self._msg_format

    def set_tag_format(self, format: str, *args: Any) -> None:  # noqa: A002
        """Set the tag template; *args* mix literals and :class:`Placeholder` tokens."""
        self._tag_format = FormatSpec(format, args)

    def set_msg_format(self, format: str, *args: Any) -> None:  # noqa: A002
        """Set the message template; *args* mix literals and :class:`Placeholder` tokens."""
        self._msg_format = FormatSpec(format, args)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def verbose(self, tag: str, msg: str | BaseException | None = None, exc: BaseException | None = None) -> int:
        return self._write(Severity.VERBOSE, tag, msg, exc)

    def debug(self, tag: str, msg: str | BaseException | None = None, exc: BaseException | None = None) -> int:
        return self._write(Severity.DEBUG, tag, msg, exc)

    def info(self, tag: str, msg: str | BaseException | None = None, exc: BaseException | None = None) -> int:
        return self._write(Severity.INFO, tag, msg, exc)

    def warn(self, tag: str, msg: str | BaseException | None = None, exc: BaseException | None = None) -> int:
        return self._write(Severity.WARN, tag, msg, exc)

    def error(self, tag: str, msg: str | BaseException | None = None, exc: BaseException | None = None) -> int:
        return self._write(Severity.ERROR, tag, msg, exc)

    def _write(
        self,
        level: Severity,
        tag: str,
        msg: str | BaseException | None,
        exc: BaseException | None,
    ) -> int:
        tag, text, exc = _split_args(tag, msg, exc)
        call_site = self._resolver.resolve(exc=exc)
        tag_format, msg_format = self._tag_format, self._msg_format
        write = getattr(self.base_logger, _WRITE_METHODS[level])
        return write(
            tag_format.render(call_site, tag, MAX_TAG_LENGTH),
            msg_format.render(call_site, text),
            exc,
        )


def _split_args(
    tag: str,
    msg: str | BaseException | None,
    exc: BaseException | None,
) -> tuple[str, str, BaseException | None]:
    """Normalise the short ``(msg)`` / ``(msg, exc)`` forms to ``(tag, msg, exc)``."""
    if msg is None:
        return _EMPTY, str(tag), exc
    if isinstance(msg, BaseException) and exc is None:
        return _EMPTY, str(tag), msg
    return str(tag), str(msg), exc


__all__ = ["DEFAULT_MSG_FORMAT", "DEFAULT_TAG_FORMAT", "FormattingLogger", "MAX_TAG_LENGTH"]
