"""Config settings – environment-based configuration."""
from pluglog.config.settings.base import Settings
from pluglog.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from pluglog.config.settings.log_settings import SINK_STDLIB, SINK_STRUCTLOG, LogSettings

__all__ = ["EnvSettingsLoader", "LogSettings", "SINK_STDLIB", "SINK_STRUCTLOG", "Settings", "SettingsLoader"]
