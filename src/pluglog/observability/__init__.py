"""Observability – leveled, call-site aware logging."""

from pluglog.observability.logging import FormattingLogger, Logger, LogManager, MultiLogger, Severity

__all__ = ["FormattingLogger", "LogManager", "Logger", "MultiLogger", "Severity"]
