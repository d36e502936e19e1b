"""Tests for Settings.from_env."""

import pytest

from config import DEFAULT_WEBHOOK_URL, Settings

ENV_VARS = ("PORT", "FRONTEND_URL", "WEBHOOK_URL", "ENVIRONMENT", "WEBHOOK_TIMEOUT")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


def test_defaults():
    settings = Settings.from_env()
    assert settings.port == 5000
    assert settings.frontend_url == "http://localhost:5173"
    assert settings.webhook_url == DEFAULT_WEBHOOK_URL
    assert settings.production is False
    assert settings.webhook_timeout == 30.0


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("FRONTEND_URL", "https://chat.example.com")
    monkeypatch.setenv("WEBHOOK_URL", "https://hooks.example.com/chat")
    monkeypatch.setenv("ENVIRONMENT", "Production")
    monkeypatch.setenv("WEBHOOK_TIMEOUT", "12.5")

    settings = Settings.from_env()
    assert settings.port == 8080
    assert settings.frontend_url == "https://chat.example.com"
    assert settings.webhook_url == "https://hooks.example.com/chat"
    assert settings.production is True
    assert settings.webhook_timeout == 12.5


def test_non_production_environment(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "staging")
    assert Settings.from_env().production is False


def test_bad_port_fails_fast(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    with pytest.raises(ValueError):
        Settings.from_env()


def test_settings_are_immutable():
    settings = Settings()
    with pytest.raises(AttributeError):
        settings.port = 1
