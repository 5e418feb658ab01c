"""Testing fakes – in-memory doubles for logging ports."""
from pluglog.testing.fakes.logger import LogCall, RecordingLogger

__all__ = ["LogCall", "RecordingLogger"]
