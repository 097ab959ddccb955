# tests/unit/config/test_settings.py — v2
"""Tests for config/settings.py — typed Settings and bound validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from multihasher.config.settings import ConfigurationError, Settings, load_settings


class TestSettingsDefaults:
    def test_default_bounds(self):
        s = Settings(_env_file=None)
        assert s.max_levels == 1000
        assert s.max_repetitions == 100_000

    def test_default_inputs(self):
        s = Settings(_env_file=None)
        assert s.default_levels == "1"
        assert s.default_repetitions == "1"
        assert s.default_encoding == "512-Bit"

    def test_default_logging(self):
        s = Settings(_env_file=None)
        assert s.log_level == "INFO"
        assert s.log_format == "text"
        assert s.log_file is None


class TestSettingsValidation:
    def test_levels_above_hard_limit(self):
        with pytest.raises(ConfigurationError, match="MAX_LEVELS"):
            Settings(_env_file=None, max_levels=1001)

    def test_repetitions_below_one(self):
        with pytest.raises(ConfigurationError, match="MAX_REPETITIONS"):
            Settings(_env_file=None, max_repetitions=0)

    def test_both_errors_reported(self):
        with pytest.raises(ConfigurationError, match="MAX_LEVELS.*MAX_REPETITIONS"):
            Settings(_env_file=None, max_levels=0, max_repetitions=200_000)

    def test_negative_retention(self):
        with pytest.raises(ValueError, match="log_retention"):
            Settings(_env_file=None, log_retention=-1)

    def test_invalid_encoding(self):
        with pytest.raises(ValueError):
            Settings(_env_file=None, default_encoding="128-Bit")


class TestSettingsSources:
    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("MULTIHASHER_MAX_LEVELS", "50")
        monkeypatch.setenv("MULTIHASHER_LOG_FORMAT", "json")
        s = Settings(_env_file=None)
        assert s.max_levels == 50
        assert s.log_format == "json"

    def test_env_file(self, tmp_path: Path):
        env = tmp_path / ".env"
        env.write_text("MULTIHASHER_DEFAULT_REPETITIONS=1K\n", encoding="utf-8")
        s = Settings(_env_file=env)
        assert s.default_repetitions == "1K"


class TestLoadSettings:
    def test_overrides(self):
        s = load_settings(_env_file=None, max_repetitions=10)
        assert s.max_repetitions == 10
