"""Observability – Severity levels."""
from __future__ import annotations

import logging
from enum import IntEnum

from pluglog.kernel.errors import InvalidSeverityError
from pluglog.kernel.utils import build_lookup_map, enum_value_of, require_not_none

VERBOSE_STDLIB_LEVEL = 5


class Severity(IntEnum):
    """Ordered log severity; a lower value is more verbose."""

    VERBOSE = 2
    DEBUG = 3
    INFO = 4
    WARN = 5
    ERROR = 6
    ASSERT = 7

    @property
    def stdlib_level(self) -> int:
        """The matching :mod:`logging` level number."""
        return _STDLIB_LEVELS[self]

    @classmethod
    def parse(cls, value: Severity | int | str) -> Severity:
        """Coerce a member, a numeric value or a case-insensitive name."""
        require_not_none(value, "level must not be None", parameter="level")
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().upper()
            member = enum_value_of(cls, _ALIASES.get(name, name))
            if member is None:
                raise InvalidSeverityError(value)
            return member
        if isinstance(value, int) and not isinstance(value, bool):
            member = _BY_VALUE.get(value)
            if member is None:
                raise InvalidSeverityError(value)
            return member
        raise InvalidSeverityError(value)


_STDLIB_LEVELS: dict[Severity, int] = {
    Severity.VERBOSE: VERBOSE_STDLIB_LEVEL,
    Severity.DEBUG: logging.DEBUG,
    Severity.INFO: logging.INFO,
    Severity.WARN: logging.WARNING,
    Severity.ERROR: logging.ERROR,
    Severity.ASSERT: logging.CRITICAL,
}
_BY_VALUE = build_lookup_map(Severity, key=lambda member: member.value)
_ALIASES = {"WARNING": "WARN", "CRITICAL": "ASSERT", "TRACE": "VERBOSE"}

logging.addLevelName(VERBOSE_STDLIB_LEVEL, "VERBOSE")


__all__ = ["Severity", "VERBOSE_STDLIB_LEVEL"]
