"""Config settings – LogSettings for the level-keyed log manager."""
from __future__ import annotations

import dataclasses
import os
import sys
from typing import ClassVar

from pluglog.config.settings.base import Settings
from pluglog.config.validation import InvalidSettingValueError

SINK_STRUCTLOG = "structlog"
SINK_STDLIB = "stdlib"
_SINKS = frozenset({SINK_STRUCTLOG, SINK_STDLIB})


def _default_application_id() -> str:
    script = sys.argv[0] if sys.argv and sys.argv[0] else ""
    return os.path.basename(script) or "python"


@dataclasses.dataclass
class LogSettings(Settings):
    """Settings read by :class:`~pluglog.observability.logging.LogManager`.

    Environment variables use the ``PLUGLOG_`` prefix, e.g. ``PLUGLOG_SINK=stdlib``.
    """

    _prefix: ClassVar[str] = "PLUGLOG"

    logger_name: str = "pluglog"
    application_id: str = ""
    sink: str = SINK_STRUCTLOG
    ignore_uncaught_exceptions: bool = False

    def _validate(self) -> None:
        self.sink = self.sink.lower()
        if self.sink not in _SINKS:
            raise InvalidSettingValueError("sink", self.sink, f"expected one of {sorted(_SINKS)}")
        if not self.application_id:
            self.application_id = _default_application_id()


__all__ = ["LogSettings", "SINK_STDLIB", "SINK_STRUCTLOG"]
