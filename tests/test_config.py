"""Tests for settings loading."""

from pathlib import Path

import pytest

from github_summary.config import DEFAULT_API_URL, load_settings
from github_summary.errors import ConfigError

_VARS = (
    "GITHUB_SUMMARY_API_URL",
    "GITHUB_SUMMARY_TOKEN_FILE",
    "GITHUB_SUMMARY_TIMEOUT",
    "GITHUB_SUMMARY_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings(env_file=None)
        assert settings.api_url == DEFAULT_API_URL
        assert settings.token_file == Path("github_token.txt")
        assert settings.timeout == 30.0
        assert settings.log_level == "WARNING"

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("GITHUB_SUMMARY_API_URL", "https://ghe.example.com/api/v3/")
        monkeypatch.setenv("GITHUB_SUMMARY_TOKEN_FILE", "/tmp/tok")
        monkeypatch.setenv("GITHUB_SUMMARY_TIMEOUT", "5")
        monkeypatch.setenv("GITHUB_SUMMARY_LOG_LEVEL", "debug")
        settings = load_settings(env_file=None)
        assert settings.api_url == "https://ghe.example.com/api/v3"
        assert settings.token_file == Path("/tmp/tok")
        assert settings.timeout == 5.0
        assert settings.log_level == "DEBUG"

    def test_empty_values_use_defaults(self, monkeypatch):
        monkeypatch.setenv("GITHUB_SUMMARY_TIMEOUT", "")
        assert load_settings(env_file=None).timeout == 30.0

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("GITHUB_SUMMARY_TIMEOUT=7\nUNRELATED=1\n")
        assert load_settings(env_file=str(env_file)).timeout == 7.0

    def test_environment_beats_env_file(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("GITHUB_SUMMARY_TIMEOUT=7\n")
        monkeypatch.setenv("GITHUB_SUMMARY_TIMEOUT", "9")
        assert load_settings(env_file=str(env_file)).timeout == 9.0

    @pytest.mark.parametrize(
        "name, value",
        [
            ("GITHUB_SUMMARY_TIMEOUT", "0"),
            ("GITHUB_SUMMARY_TIMEOUT", "soon"),
            ("GITHUB_SUMMARY_API_URL", "api.github.com"),
            ("GITHUB_SUMMARY_LOG_LEVEL", "LOUD"),
        ],
    )
    def test_invalid_values(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)
        with pytest.raises(ConfigError, match=name):
            load_settings(env_file=None)
