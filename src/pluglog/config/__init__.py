"""Config – settings and loaders."""

from pluglog.config.settings import EnvSettingsLoader, LogSettings, Settings, SettingsLoader
from pluglog.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LogSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
