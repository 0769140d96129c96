"""
Unit tests for environment-driven configuration.
"""

import logging

import pytest

import config
from config import AppConfig, configure_logging, get_config


ENV_NAMES = [
    "SUPABASE_URL",
    "SUPABASE_ANON_KEY",
    "NEXT_PUBLIC_SUPABASE_URL",
    "NEXT_PUBLIC_SUPABASE_ANON_KEY",
    "MOCK_ROSTER_DELAY_SECONDS",
    "MOCK_SESSIONS_DELAY_SECONDS",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    # Never pick up a developer's .env
    monkeypatch.setattr(config, "load_dotenv", lambda override=False: False)


class TestGetConfig:
    """Tests for get_config."""

    def test_defaults_are_demo_mode(self):
        cfg = get_config()
        assert cfg.demo_mode
        assert cfg.supabase_url is None
        assert cfg.roster_delay_seconds == config.DEFAULT_ROSTER_DELAY_SECONDS
        assert cfg.sessions_delay_seconds == config.DEFAULT_SESSIONS_DELAY_SECONDS
        assert cfg.log_level == "INFO"

    def test_live_when_both_keys_set(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://abc.supabase.co")
        monkeypatch.setenv("SUPABASE_ANON_KEY", "anon")
        cfg = get_config()
        assert not cfg.demo_mode
        assert cfg.supabase_host == "abc.supabase.co"

    def test_one_key_missing_is_demo(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://abc.supabase.co")
        assert get_config().demo_mode

    def test_blank_values_are_unset(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "   ")
        monkeypatch.setenv("SUPABASE_ANON_KEY", "anon")
        assert get_config().demo_mode

    def test_next_public_fallbacks(self, monkeypatch):
        monkeypatch.setenv("NEXT_PUBLIC_SUPABASE_URL", "https://web.supabase.co")
        monkeypatch.setenv("NEXT_PUBLIC_SUPABASE_ANON_KEY", "web-anon")
        cfg = get_config()
        assert cfg.supabase_url == "https://web.supabase.co"
        assert cfg.supabase_anon_key == "web-anon"

    def test_delays_from_env(self, monkeypatch):
        monkeypatch.setenv("MOCK_ROSTER_DELAY_SECONDS", "0")
        monkeypatch.setenv("MOCK_SESSIONS_DELAY_SECONDS", "0.25")
        cfg = get_config()
        assert cfg.roster_delay_seconds == 0
        assert cfg.sessions_delay_seconds == 0.25

    @pytest.mark.parametrize("raw", ["soon", "-1"])
    def test_bad_delay_falls_back(self, monkeypatch, raw):
        monkeypatch.setenv("MOCK_ROSTER_DELAY_SECONDS", raw)
        assert get_config().roster_delay_seconds == config.DEFAULT_ROSTER_DELAY_SECONDS

    def test_log_level_upper_cased(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert get_config().log_level == "DEBUG"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_passes_level_to_basic_config(self, monkeypatch):
        seen = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: seen.update(kw))
        configure_logging(AppConfig(supabase_url=None, supabase_anon_key=None, log_level="WARNING"))
        assert seen["level"] == logging.WARNING

    def test_unknown_level_defaults_to_info(self, monkeypatch):
        seen = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: seen.update(kw))
        configure_logging(AppConfig(supabase_url=None, supabase_anon_key=None, log_level="CHATTY"))
        assert seen["level"] == logging.INFO
