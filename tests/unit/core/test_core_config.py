"""Unit tests for settings and the exception hierarchy."""

import pytest

from sysutil.core.config import Settings, get_settings
from sysutil.core.exceptions import (
    ConfigurationError,
    NumberFormatError,
    PropertiesParseError,
    SysUtilError,
)


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for field in Settings.model_fields:
            monkeypatch.delenv(f"SYSUTIL_{field.upper()}", raising=False)

        settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.log_json is False
        assert settings.resource_package is None
        assert settings.resource_base_dir is None
        assert settings.properties_encoding == "latin-1"
        assert settings.properties_files == []
        assert settings.properties_action == "REPLACE"

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SYSUTIL_RESOURCE_PACKAGE", "myapp.conf")
        monkeypatch.setenv("SYSUTIL_PROPERTIES_FILES", '["a.properties", "b.properties"]')
        monkeypatch.setenv("SYSUTIL_PROPERTIES_ACTION", "preserve")

        settings = Settings(_env_file=None)

        assert settings.resource_package == "myapp.conf"
        assert settings.properties_files == ["a.properties", "b.properties"]
        assert settings.properties_action == "PRESERVE"

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()


class TestExceptions:
    def test_all_errors_share_base(self) -> None:
        assert issubclass(NumberFormatError, SysUtilError)
        assert issubclass(PropertiesParseError, SysUtilError)
        assert issubclass(ConfigurationError, SysUtilError)

    def test_number_format_error_attributes(self) -> None:
        error = NumberFormatError("buffer.length", "9x", "bad suffix")

        assert error.label == "buffer.length"
        assert error.value == "9x"
        assert error.reason == "bad suffix"
        assert str(error) == "buffer.length: bad suffix: '9x'"

    def test_parse_error_lists_resources(self) -> None:
        cause = ValueError("bad escape")
        error = PropertiesParseError({"a.properties": cause, "b.properties": cause})

        assert error.failures["a.properties"] is cause
        assert "a.properties, b.properties" in str(error)
