"""Unit tests for environment-driven configuration helpers."""

from __future__ import annotations

from datetime import timedelta

import pytest

from authservice.core.config import (
    BaseConfig,
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    env_bool,
    env_seconds,
    get_config,
)


@pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
def test_env_bool_truthy(monkeypatch, raw):
    monkeypatch.setenv("FLAG", raw)
    assert env_bool("FLAG") is True


def test_env_bool_default_and_falsy(monkeypatch):
    monkeypatch.delenv("FLAG", raising=False)
    assert env_bool("FLAG", True) is True
    monkeypatch.setenv("FLAG", "nope")
    assert env_bool("FLAG", True) is False


def test_env_seconds(monkeypatch):
    monkeypatch.delenv("TTL", raising=False)
    assert env_seconds("TTL", 60) == timedelta(seconds=60)
    monkeypatch.setenv("TTL", "120")
    assert env_seconds("TTL", 60) == timedelta(seconds=120)
    monkeypatch.setenv("TTL", "0")
    with pytest.raises(ValueError):
        env_seconds("TTL", 60)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("testing", TestingConfig),
        ("production", ProductionConfig),
        ("development", DevelopmentConfig),
        ("unknown", DevelopmentConfig),
    ],
)
def test_get_config_selects_by_app_env(monkeypatch, name, expected):
    monkeypatch.setenv("APP_ENV", name)
    assert get_config() is expected


def test_token_and_cookie_defaults():
    assert BaseConfig.JWT_ACCESS_TOKEN_EXPIRES == timedelta(hours=1)
    assert BaseConfig.JWT_REFRESH_TOKEN_EXPIRES == timedelta(days=365)
    assert BaseConfig.ACCESS_TOKEN_COOKIE == "accessToken"
    assert BaseConfig.REFRESH_TOKEN_COOKIE == "refreshToken"
