"""Tests for environment-driven settings."""

from __future__ import annotations

from attraction_webhook.core.config import Settings

# pylint: disable=missing-function-docstring


def test_port_defaults_to_3000(monkeypatch) -> None:
    monkeypatch.delenv("PORT", raising=False)
    assert Settings(_env_file=None).PORT == 3000


def test_values_are_read_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("ATTRACTIONS_API_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("MAX_REPLY_ITEMS", "0")
    settings = Settings(_env_file=None)
    assert settings.PORT == 8080
    assert settings.ATTRACTIONS_API_TIMEOUT_SECONDS == 2.5
    assert settings.MAX_REPLY_ITEMS == 0


def test_timeout_defaults_to_fifteen_seconds(monkeypatch) -> None:
    monkeypatch.delenv("ATTRACTIONS_API_TIMEOUT_SECONDS", raising=False)
    assert Settings(_env_file=None).ATTRACTIONS_API_TIMEOUT_SECONDS == 15.0
