"""Unit tests for LoggerWrapper."""

from __future__ import annotations

import pytest

from pluglog.kernel.errors import MissingParameterError
from pluglog.observability.logging import Logger, LoggerWrapper, Severity
from pluglog.testing import RecordingLogger


class ShoutingLogger(LoggerWrapper):
    def info(self, tag: str, msg: str, exc: BaseException | None = None) -> int:
        return super().info(tag, msg.upper(), exc)


class TestLoggerWrapper:
    def test_rejects_missing_base(self) -> None:
        with pytest.raises(MissingParameterError):
            LoggerWrapper(None)  # type: ignore[arg-type]

    def test_satisfies_logger_protocol(self) -> None:
        assert isinstance(LoggerWrapper(RecordingLogger()), Logger)

    def test_write_methods_delegate(self) -> None:
        base = RecordingLogger(bytes_per_write=4)
        wrapper = LoggerWrapper(base)
        err = RuntimeError("boom")
        assert wrapper.verbose("t", "v") == 4
        assert wrapper.debug("t", "d") == 4
        assert wrapper.info("t", "i") == 4
        assert wrapper.warn("t", "w") == 4
        assert wrapper.error("t", "e", err) == 4
        assert [c.level for c in base.calls] == list(Severity)[:5]
        assert base.last.exc is err

    def test_level_reads_and_writes_base(self) -> None:
        base = RecordingLogger(Severity.WARN)
        wrapper = LoggerWrapper(base)
        assert wrapper.level is Severity.WARN
        wrapper.level = Severity.DEBUG
        assert base.level is Severity.DEBUG
        assert wrapper.is_loggable(Severity.DEBUG)
        assert not wrapper.is_loggable(Severity.VERBOSE)

    def test_ignore_uncaught_delegates(self) -> None:
        assert LoggerWrapper(RecordingLogger(ignore_uncaught=True)).ignore_uncaught_exceptions() is True
        assert LoggerWrapper(RecordingLogger()).ignore_uncaught_exceptions() is False

    def test_subclass_overrides_single_operation(self) -> None:
        base = RecordingLogger()
        logger = ShoutingLogger(base)
        logger.info("t", "quiet")
        logger.warn("t", "quiet")
        assert base.messages == ["QUIET", "quiet"]

    def test_wrappers_nest(self) -> None:
        base = RecordingLogger(bytes_per_write=2)
        nested = LoggerWrapper(ShoutingLogger(base))
        assert nested.info("t", "x") == 2
        assert base.messages == ["X"]
