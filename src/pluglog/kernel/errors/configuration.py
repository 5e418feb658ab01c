"""Configuration-misuse errors, raised immediately and never recovered."""

from __future__ import annotations

from typing import Any

from pluglog.kernel.errors.base import BaseError


class ConfigurationError(BaseError):
    """A component was configured or called with unusable input."""

    default_code = "configuration_error"


class MissingParameterError(ConfigurationError, ValueError):
    """A required parameter was ``None``."""

    default_code = "missing_parameter"

    def __init__(
        self,
        message: str = "parameter must not be None",
        *,
        parameter: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.parameter = parameter


class InvalidSeverityError(ConfigurationError, ValueError):
    """A value could not be interpreted as a :class:`Severity`."""

    default_code = "invalid_severity"

    def __init__(self, value: object) -> None:
        super().__init__(f"{value!r} is not a valid severity", detail={"value": repr(value)})
        self.value = value


__all__ = ["ConfigurationError", "InvalidSeverityError", "MissingParameterError"]
