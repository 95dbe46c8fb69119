"""Per-environment settings, chosen by the ``APP_ENV`` variable."""

from __future__ import annotations

import os
from collections.abc import Mapping
from datetime import timedelta
from typing import Final

from dotenv import load_dotenv

ENV_VAR: Final[str] = "APP_ENV"

_TRUTHY = frozenset({"1", "true", "yes", "y", "on"})

# A missing .env file is fine
load_dotenv()


def env_bool(name: str, default: bool = False) -> bool:
    """Read ``name`` as a flag; unset variables give ``default``."""
    raw = os.getenv(name)
    return default if raw is None else raw.strip().lower() in _TRUTHY


def env_int(name: str, default: int) -> int:
    """Read ``name`` as an integer; unset or unparsable values give ``default``."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _engine_options(uri: str, timeout: int) -> dict:
    # sqlite3 names the lock wait ``timeout``; network drivers use ``connect_timeout``
    key = "timeout" if uri.startswith("sqlite") else "connect_timeout"
    return {"pool_pre_ping": True, "connect_args": {key: timeout}}


class BaseConfig:
    """Settings shared by every environment.

    Auth
        ``JWT_SECRET_KEY`` signs both token kinds and has no default here; the
        app refuses to start without it. Access tokens live
        ``ACCESS_TOKEN_TTL`` (one minute) and refresh tokens
        ``REFRESH_TOKEN_TTL`` (thirty days).
    Refresh cookie
        ``REFRESH_COOKIE_NAME``, ``REFRESH_COOKIE_SECURE`` and
        ``REFRESH_COOKIE_SAMESITE`` apply both when the cookie is set and when
        it is cleared.
    Errors
        ``ERROR_INCLUDE_STACK`` adds a ``stack`` list to JSON error bodies.
    """

    APP_ENV = "development"
    APP_VERSION = os.getenv("APP_VERSION", "dev")
    API_BASE_PREFIX = "/api"

    SECRET_KEY = os.getenv("SECRET_KEY", "CHANGE_ME")
    JWT_SECRET_KEY: str | None = os.getenv("JWT_SECRET")
    JWT_ALGORITHM = "HS256"
    JWT_TOKEN_LOCATION = ["headers"]

    ACCESS_TOKEN_TTL = timedelta(minutes=1)
    REFRESH_TOKEN_TTL = timedelta(days=30)
    JWT_ACCESS_TOKEN_EXPIRES = ACCESS_TOKEN_TTL
    JWT_REFRESH_TOKEN_EXPIRES = REFRESH_TOKEN_TTL

    REFRESH_COOKIE_NAME = "refreshToken"
    REFRESH_COOKIE_SECURE = False
    REFRESH_COOKIE_SAMESITE = "Lax"

    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///./ideadrop.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = env_bool("SQLALCHEMY_ECHO")
    SQLALCHEMY_ENGINE_OPTIONS = _engine_options(
        SQLALCHEMY_DATABASE_URI, env_int("DB_CONNECT_TIMEOUT", 10)
    )

    ERROR_INCLUDE_STACK = True
    PROPAGATE_EXCEPTIONS = False

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000")
    CORS_MAX_AGE = 600
    USE_PROXYFIX = env_bool("USE_PROXYFIX")

    DEBUG = False
    TESTING = False


class DevelopmentConfig(BaseConfig):
    """Local development. Signs tokens with a throwaway secret when none is set."""

    DEBUG = env_bool("FLASK_DEBUG", True)
    JWT_SECRET_KEY = os.getenv("JWT_SECRET", "dev-only-jwt-secret")


class TestingConfig(BaseConfig):
    """Test runs: in-memory SQLite unless ``TEST_DATABASE_URL`` is set."""

    APP_ENV = "testing"
    TESTING = True
    JWT_SECRET_KEY = "testing-jwt-secret-with-enough-length"
    SQLALCHEMY_DATABASE_URI = os.getenv("TEST_DATABASE_URL", "sqlite:///:memory:")
    SQLALCHEMY_ENGINE_OPTIONS: dict = {}
    SQLALCHEMY_ECHO = False
    LOG_LEVEL = "WARNING"


class ProductionConfig(BaseConfig):
    """Deployed behind TLS, serving a SPA on another origin.

    The refresh cookie therefore has to be ``Secure`` with ``SameSite=None``,
    and error bodies never carry a stack.
    """

    APP_ENV = "production"
    ERROR_INCLUDE_STACK = False
    REFRESH_COOKIE_SECURE = True
    REFRESH_COOKIE_SAMESITE = "None"
    USE_PROXYFIX = env_bool("USE_PROXYFIX", True)


CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config() -> type[BaseConfig]:
    """Return the class named by ``APP_ENV``, defaulting to development."""
    name = os.getenv(ENV_VAR, "development").strip().lower()
    return CONFIG_MAP.get(name, DevelopmentConfig)
