"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    └── ConfigurationError          (configuration.py)
        ├── MissingParameterError
        ├── InvalidSeverityError
        └── ConfigError             (pluglog.config.validation)
            ├── MissingRequiredSettingError
            └── InvalidSettingValueError
"""

from pluglog.kernel.errors.base import BaseError
from pluglog.kernel.errors.configuration import (
    ConfigurationError,
    InvalidSeverityError,
    MissingParameterError,
)

__all__ = [
    "BaseError",
    "ConfigurationError",
    "InvalidSeverityError",
    "MissingParameterError",
]
