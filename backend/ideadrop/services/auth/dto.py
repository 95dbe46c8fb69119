"""Values passed between the auth routes and :class:`AuthService`."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from ideadrop.services._shared.ids import UserId


@dataclass(frozen=True, slots=True)
class RegisterIn:
    # Raw request values; the service decides whether they are usable
    name: Any
    email: Any
    password: Any


@dataclass(frozen=True, slots=True)
class LoginIn:
    email: Any
    password: Any


@dataclass(frozen=True, slots=True)
class RefreshIn:
    """``refresh_token`` is the cookie value, ``None`` when the cookie is absent."""

    refresh_token: str | None


@dataclass(frozen=True, slots=True)
class UserPublicOut:
    """The user as clients see it. There is no password hash field."""

    id: UserId
    name: str
    email: str


@dataclass(frozen=True, slots=True)
class AuthSessionOut:
    """
    Tokens handed back after register, login or refresh.

    ``refresh_token`` goes into the cookie. It is ``None`` after a refresh,
    which leaves the existing cookie in place.
    """

    access_token: str
    refresh_token: str | None
    user: UserPublicOut


@dataclass(frozen=True, slots=True)
class AuthTokenConfig:
    access_expires: timedelta
    refresh_expires: timedelta
