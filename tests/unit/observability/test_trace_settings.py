"""Unit tests for TraceSettings (NETTRACE_* environment)."""

from __future__ import annotations

import pytest

from nettrace.config.settings import EnvSettingsLoader
from nettrace.config.validation import ConfigError, InvalidSettingValueError
from nettrace.observability.logging import EventLogger, MemorySink, TraceSettings, Verbosity


class TestTraceSettings:
    def test_defaults(self) -> None:
        settings = TraceSettings()
        assert settings.label == "nettrace"
        assert settings.verbosity_level is Verbosity.INFO

    def test_invalid_verbosity_rejected_at_construction(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            TraceSettings(verbosity="chatty")

    def test_loaded_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NETTRACE_LABEL", "api")
        monkeypatch.setenv("NETTRACE_VERBOSITY", "DEBUG")
        settings = EnvSettingsLoader().load(TraceSettings)
        sink = MemorySink()
        EventLogger.from_settings(settings, sink).log("evt", {"k": "v"}, context_id=1)
        assert sink.text == "\n[1] api.evt\n\n  Arguments:\n    - k: v\n"

    def test_bad_environment_value_is_config_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NETTRACE_VERBOSITY", "verbose")
        with pytest.raises(ConfigError):
            EnvSettingsLoader().load(TraceSettings)

    def test_invalid_verbosity_names_the_variable(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            TraceSettings.from_env({"NETTRACE_VERBOSITY": "verbose"})
        assert exc_info.value.setting_name == "NETTRACE_VERBOSITY"
        assert exc_info.value.to_dict()["detail"]["value"] == "'verbose'"
