from __future__ import annotations

from datetime import timedelta

import pytest
from ideadrop.core.config import (
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    env_bool,
    env_int,
    get_config,
)
from ideadrop.factory import create_app


def test_get_config_selects_by_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    assert get_config() is ProductionConfig
    monkeypatch.setenv("APP_ENV", "unknown")
    assert get_config() is DevelopmentConfig


def test_env_helpers(monkeypatch):
    monkeypatch.setenv("FLAG", "Yes")
    monkeypatch.setenv("NUM", "oops")
    assert env_bool("FLAG") is True
    assert env_bool("MISSING_FLAG", default=True) is True
    assert env_int("NUM", 3) == 3


def test_token_lifetimes():
    assert TestingConfig.ACCESS_TOKEN_TTL == timedelta(minutes=1)
    assert TestingConfig.REFRESH_TOKEN_TTL == timedelta(days=30)
    assert TestingConfig.JWT_ACCESS_TOKEN_EXPIRES == TestingConfig.ACCESS_TOKEN_TTL


def test_cookie_policy_per_environment():
    assert (DevelopmentConfig.REFRESH_COOKIE_SECURE, DevelopmentConfig.REFRESH_COOKIE_SAMESITE) == (
        False,
        "Lax",
    )
    assert (ProductionConfig.REFRESH_COOKIE_SECURE, ProductionConfig.REFRESH_COOKIE_SAMESITE) == (
        True,
        "None",
    )
    assert ProductionConfig.ERROR_INCLUDE_STACK is False


def test_missing_secret_is_fatal():
    class NoSecret(TestingConfig):
        JWT_SECRET_KEY = None

    with pytest.raises(RuntimeError, match="JWT_SECRET"):
        create_app(NoSecret)
