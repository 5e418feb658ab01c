"""conftest.py for benchmarks.

Provides recording loggers so benchmarks measure formatting and caching
cost without any real log I/O.
"""

from __future__ import annotations

import pytest

from pluglog.observability.logging import FormattingLogger, Severity
from pluglog.testing import RecordingLogger


class _BoundedCalls(list):
    """A list that only ever keeps the most recent item."""

    def append(self, item) -> None:
        self[:] = [item]


@pytest.fixture()
def recording_logger():
    """In-memory base logger that accepts every severity.

    Only the most recent call is kept so long benchmark runs do not grow
    memory.
    """
    logger = RecordingLogger(Severity.VERBOSE)
    logger.calls = _BoundedCalls()
    return logger


@pytest.fixture()
def formatting_logger(recording_logger):
    """FormattingLogger over ``recording_logger`` with the default formats.

    Usage inside a benchmark::

        def test_something(benchmark, formatting_logger):
            benchmark(formatting_logger.info, "tick")
    """
    return FormattingLogger(recording_logger)
