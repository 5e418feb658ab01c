"""Kernel utils – null-safety helpers."""
from __future__ import annotations

from typing import TypeVar

from pluglog.kernel.errors import MissingParameterError

T = TypeVar("T")


def require_not_none(obj: T | None, message: str = "value must not be None", *, parameter: str | None = None) -> T:
    """Return *obj*, or raise :class:`MissingParameterError` when it is ``None``."""
    if obj is None:
        raise MissingParameterError(message, parameter=parameter)
    return obj


__all__ = ["require_not_none"]
