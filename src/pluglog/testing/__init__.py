"""Testing utilities – fakes for pluglog consumers' test suites."""
from pluglog.testing.fakes import LogCall, RecordingLogger

__all__ = ["LogCall", "RecordingLogger"]
