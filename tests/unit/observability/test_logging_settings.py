"""Unit tests for LoggingSettings."""

from __future__ import annotations

import logging

import pytest

from safe_result.kernel.errors import InvalidSettingError
from safe_result.observability.logging import LoggingSettings


class TestLoggingSettings:
    def test_defaults(self) -> None:
        settings = LoggingSettings()
        assert settings.log_level == "WARNING"
        assert settings.level == logging.WARNING
        assert settings.json_logs is True

    def test_level_is_normalised(self) -> None:
        assert LoggingSettings(log_level="debug").log_level == "DEBUG"

    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(InvalidSettingError) as info:
            LoggingSettings(log_level="LOUD")
        assert info.value.name == "SAFE_RESULT_LOG_LEVEL"

    def test_is_frozen(self) -> None:
        with pytest.raises(AttributeError):
            LoggingSettings().json_logs = False  # type: ignore[misc]


class TestFromEnv:
    def test_empty_environment_gives_defaults(self) -> None:
        assert LoggingSettings.from_env({}) == LoggingSettings()

    def test_reads_variables(self) -> None:
        settings = LoggingSettings.from_env(
            {"SAFE_RESULT_LOG_LEVEL": " info ", "SAFE_RESULT_JSON_LOGS": "off"}
        )
        assert settings.level == logging.INFO
        assert settings.json_logs is False

    @pytest.mark.parametrize("flag", ["1", "true", "Yes", "ON"])
    def test_truthy_flags(self, flag: str) -> None:
        assert LoggingSettings.from_env({"SAFE_RESULT_JSON_LOGS": flag}).json_logs is True

    def test_bad_flag_rejected(self) -> None:
        with pytest.raises(InvalidSettingError) as info:
            LoggingSettings.from_env({"SAFE_RESULT_JSON_LOGS": "maybe"})
        assert info.value.value == "maybe"

    def test_defaults_to_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SAFE_RESULT_LOG_LEVEL", "ERROR")
        monkeypatch.delenv("SAFE_RESULT_JSON_LOGS", raising=False)
        assert LoggingSettings.from_env().level == logging.ERROR
