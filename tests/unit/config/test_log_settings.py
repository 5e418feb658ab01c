"""Unit tests for LogSettings and EnvSettingsLoader."""

from __future__ import annotations

import dataclasses
import sys

import pytest

from pluglog.config import (
    ConfigError,
    EnvSettingsLoader,
    InvalidSettingValueError,
    LogSettings,
    MissingRequiredSettingError,
    Settings,
)


@dataclasses.dataclass
class _RequiredSettings(Settings):
    _prefix = "DEMO"

    endpoint: str
    retries: int = 3
    tags: list = dataclasses.field(default_factory=list)


class TestLogSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "argv", ["/usr/bin/worker.py"])
        settings = LogSettings()
        assert settings.logger_name == "pluglog"
        assert settings.sink == "structlog"
        assert settings.ignore_uncaught_exceptions is False
        assert settings.application_id == "worker.py"

    def test_application_id_falls_back_to_python(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "argv", [""])
        assert LogSettings().application_id == "python"

    def test_sink_is_normalised(self) -> None:
        assert LogSettings(sink="STDLIB").sink == "stdlib"

    def test_unknown_sink_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as info:
            LogSettings(sink="syslog")
        assert info.value.setting_name == "sink"
        assert isinstance(info.value, ConfigError)


class TestEnvSettingsLoader:
    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PLUGLOG_SINK", "stdlib")
        monkeypatch.setenv("PLUGLOG_APPLICATION_ID", "billing")
        monkeypatch.setenv("PLUGLOG_IGNORE_UNCAUGHT_EXCEPTIONS", "yes")
        settings = EnvSettingsLoader().load(LogSettings)
        assert settings.sink == "stdlib"
        assert settings.application_id == "billing"
        assert settings.ignore_uncaught_exceptions is True

    def test_explicit_environ_mapping(self) -> None:
        loader = EnvSettingsLoader({"PLUGLOG_LOGGER_NAME": "audit", "PLUGLOG_APPLICATION_ID": "svc"})
        settings = loader.load(LogSettings)
        assert settings.logger_name == "audit"
        assert settings.application_id == "svc"

    def test_invalid_sink_from_environment(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"PLUGLOG_SINK": "kafka"}).load(LogSettings)

    def test_missing_required_setting(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as info:
            EnvSettingsLoader({}).load(_RequiredSettings)
        assert info.value.setting_name == "DEMO_ENDPOINT"

    def test_coerces_int_and_list(self) -> None:
        settings = EnvSettingsLoader(
            {"DEMO_ENDPOINT": "http://x", "DEMO_RETRIES": "7", "DEMO_TAGS": "a, b,,c"}
        ).load(_RequiredSettings)
        assert settings.retries == 7
        assert settings.tags == ["a", "b", "c"]

    def test_bad_int_is_invalid_value(self) -> None:
        with pytest.raises(InvalidSettingValueError) as info:
            EnvSettingsLoader({"DEMO_ENDPOINT": "x", "DEMO_RETRIES": "many"}).load(_RequiredSettings)
        assert info.value.setting_name == "DEMO_RETRIES"
        assert info.value.value == "many"
