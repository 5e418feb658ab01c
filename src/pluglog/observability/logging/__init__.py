"""Observability – leveled loggers, call-site formatting and the log manager."""
from pluglog.observability.logging.callsite import CallSite, CallSiteResolver, FrameCallSiteResolver
from pluglog.observability.logging.factory import configure_logging
from pluglog.observability.logging.formatting import FormattingLogger, MAX_TAG_LENGTH
from pluglog.observability.logging.manager import LogManager
from pluglog.observability.logging.multi import MultiLogger
from pluglog.observability.logging.placeholders import FormatSpec, Placeholder
from pluglog.observability.logging.protocol import Logger
from pluglog.observability.logging.severity import Severity
from pluglog.observability.logging.sinks import StdlibLogSink, StructlogLogSink
from pluglog.observability.logging.uncaught import UncaughtError, UncaughtErrorHandlerChain
from pluglog.observability.logging.wrapper import LoggerWrapper

__all__ = [
    "CallSite",
    "CallSiteResolver",
    "FormatSpec",
    "FormattingLogger",
    "FrameCallSiteResolver",
    "LogManager",
    "Logger",
    "LoggerWrapper",
    "MAX_TAG_LENGTH",
    "MultiLogger",
    "Placeholder",
    "Severity",
    "StdlibLogSink",
    "StructlogLogSink",
    "UncaughtError",
    "UncaughtErrorHandlerChain",
    "configure_logging",
]
