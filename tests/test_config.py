"""Tests for config.py."""

import pytest

from url_status_checker.config import DEFAULT_USER_AGENT, CheckerConfig


class TestCheckerConfig:
    def test_defaults(self):
        config = CheckerConfig()
        assert config.timeout == 30.0
        assert config.verify_ssl is True
        assert config.user_agent == DEFAULT_USER_AGENT

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("URL_STATUS_TIMEOUT", "2.5")
        monkeypatch.setenv("URL_STATUS_VERIFY_SSL", "False")
        monkeypatch.setenv("URL_STATUS_USER_AGENT", "status-bot/1.0")

        config = CheckerConfig.from_env()

        assert config.timeout == 2.5
        assert config.verify_ssl is False
        assert config.user_agent == "status-bot/1.0"

    def test_from_env_defaults(self, monkeypatch):
        for name in ("URL_STATUS_TIMEOUT", "URL_STATUS_VERIFY_SSL", "URL_STATUS_USER_AGENT"):
            monkeypatch.delenv(name, raising=False)
        assert CheckerConfig.from_env() == CheckerConfig()

    def test_verify_ssl_only_disabled_by_false(self, monkeypatch):
        monkeypatch.setenv("URL_STATUS_VERIFY_SSL", "no")
        assert CheckerConfig.from_env().verify_ssl is True

    def test_bad_timeout(self, monkeypatch):
        monkeypatch.setenv("URL_STATUS_TIMEOUT", "abc")
        with pytest.raises(ValueError, match="URL_STATUS_TIMEOUT must be a number"):
            CheckerConfig.from_env()
