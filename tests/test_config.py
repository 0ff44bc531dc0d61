from __future__ import annotations

import logging

import pytest

from gemini_relay.common.config import DEFAULT_API_BASE, DEFAULT_MODEL, Settings, get_settings
from gemini_relay.common.errors import ConfigError
from gemini_relay.common.logging_setup import resolve_level


def test_missing_api_key_is_config_error() -> None:
    with pytest.raises(ConfigError):
        Settings.from_env()


def test_blank_api_key_is_config_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "   ")
    with pytest.raises(ConfigError):
        Settings.from_env()


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "secret")
    s = Settings.from_env()
    assert s.api_key == "secret"
    assert s.model == DEFAULT_MODEL
    assert s.api_base == DEFAULT_API_BASE
    assert s.timeout == 30.0
    assert s.port == 3000
    assert s.generate_url == f"{DEFAULT_API_BASE}/models/{DEFAULT_MODEL}:generateContent"
    assert "secret" not in repr(s)


def test_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "secret")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-pro")
    monkeypatch.setenv("GEMINI_TIMEOUT", "12.5")
    monkeypatch.setenv("PORT", "8080")
    s = Settings.from_env()
    assert s.model == "gemini-pro"
    assert s.timeout == 12.5
    assert s.port == 8080


@pytest.mark.parametrize("name,value", [("PORT", "eighty"), ("GEMINI_TIMEOUT", "0")])
def test_bad_numbers_are_config_errors(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "secret")
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigError):
        Settings.from_env()


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "secret")
    assert get_settings() is get_settings()


def test_resolve_level() -> None:
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(logging.WARNING) == logging.WARNING
    assert resolve_level("nonsense") == logging.INFO
