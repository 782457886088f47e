"""
Unit tests for settings loading.

Tests YAML config files, environment overrides, validation and caching.
"""

import logging

import pytest

from clf2tab.config import Settings, get_settings, load_config_file
from clf2tab.exceptions import SettingsError


class TestSettings:
    """Tests for the Settings dataclass."""

    def test_defaults(self):
        settings = Settings()
        assert settings.skip_validation is False
        assert settings.encoding == "utf-8"
        assert settings.log_level == "WARNING"
        assert settings.validate() == []

    def test_from_dict(self):
        settings = Settings.from_dict(
            {
                "validation": {"skip": True},
                "input": {"encoding": "latin-1"},
                "logging": {"level": "debug"},
            }
        )
        assert settings.skip_validation is True
        assert settings.encoding == "latin-1"
        assert settings.log_level == "DEBUG"
        assert settings.logging_level == logging.DEBUG

    def test_from_dict_missing_sections(self):
        assert Settings.from_dict({}) == Settings()

    def test_to_dict_round_trips(self):
        settings = Settings(skip_validation=True, log_level="INFO")
        assert Settings.from_dict(settings.to_dict()) == settings

    def test_invalid_log_level(self):
        errors = Settings(log_level="LOUD").validate()
        assert len(errors) == 1
        assert "logging.level" in errors[0]

    def test_unknown_encoding(self):
        errors = Settings(encoding="nosuchcodec").validate()
        assert errors == ["input.encoding is not a known codec: 'nosuchcodec'"]

    @pytest.mark.parametrize("section", ["validation", "input", "logging"])
    def test_section_must_be_mapping(self, section):
        """A scalar where a section belongs is a configuration error."""
        with pytest.raises(SettingsError, match=f"{section} must be a mapping"):
            Settings.from_dict({section: "oops"})

    def test_with_overrides_ignores_none(self):
        settings = Settings(skip_validation=True)
        updated = settings.with_overrides(skip_validation=None, encoding="ascii")
        assert updated.skip_validation is True
        assert updated.encoding == "ascii"


class TestFromEnv:
    """Tests for environment variable overrides."""

    def test_env_values(self, clean_settings, monkeypatch):
        monkeypatch.setenv("CLF2TAB_SKIP_VALIDATION", "true")
        monkeypatch.setenv("CLF2TAB_LOG_LEVEL", "info")
        settings = Settings.from_env()
        assert settings.skip_validation is True
        assert settings.log_level == "INFO"

    def test_unset_env_keeps_base(self, clean_settings):
        base = Settings(skip_validation=True, encoding="latin-1")
        assert Settings.from_env(base=base) == base

    @pytest.mark.parametrize("value", ["0", "false", "no", "whatever"])
    def test_false_spellings(self, clean_settings, monkeypatch, value):
        monkeypatch.setenv("CLF2TAB_SKIP_VALIDATION", value)
        assert Settings.from_env(base=Settings(skip_validation=True)).skip_validation is False


class TestGetSettings:
    """Tests for get_settings with config files."""

    def test_without_config(self, clean_settings):
        assert get_settings() == Settings()

    def test_yaml_file(self, clean_settings, tmp_path):
        config = tmp_path / "clf2tab.yaml"
        config.write_text("validation:\n  skip: true\nlogging:\n  level: ERROR\n")
        settings = get_settings(str(config))
        assert settings.skip_validation is True
        assert settings.log_level == "ERROR"

    def test_env_overrides_file(self, clean_settings, monkeypatch, tmp_path):
        config = tmp_path / "clf2tab.yaml"
        config.write_text("validation:\n  skip: true\n")
        monkeypatch.setenv("CLF2TAB_SKIP_VALIDATION", "false")
        assert get_settings(str(config)).skip_validation is False

    def test_result_is_cached(self, clean_settings):
        assert get_settings() is get_settings()

    def test_invalid_settings_raise(self, clean_settings, tmp_path):
        config = tmp_path / "bad.yaml"
        config.write_text("logging:\n  level: SHOUTING\n")
        with pytest.raises(SettingsError) as exc_info:
            get_settings(str(config))
        assert "bad.yaml" in str(exc_info.value)

    def test_missing_file(self, clean_settings, tmp_path):
        with pytest.raises(FileNotFoundError):
            get_settings(str(tmp_path / "missing.yaml"))


class TestLoadConfigFile:
    """Tests for the YAML loader."""

    def test_empty_file(self, tmp_path):
        config = tmp_path / "empty.yaml"
        config.write_text("")
        assert load_config_file(config) == {}

    def test_non_mapping(self, tmp_path):
        config = tmp_path / "list.yaml"
        config.write_text("- a\n- b\n")
        with pytest.raises(SettingsError):
            load_config_file(config)

    def test_invalid_yaml(self, tmp_path):
        config = tmp_path / "broken.yaml"
        config.write_text("validation: [unclosed\n")
        with pytest.raises(SettingsError):
            load_config_file(config)
