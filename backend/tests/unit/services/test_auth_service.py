# tests/unit/services/test_auth_service.py
from __future__ import annotations

from datetime import timedelta

import pytest
from freezegun import freeze_time
from ideadrop.models.user import User
from ideadrop.services._shared.errors import (
    AuthenticationError,
    DuplicateEmailError,
    InvalidCredentialsError,
    InvalidTokenError,
    ValidationFailedError,
)
from ideadrop.services._shared.ports.token_provider import StubTokenProvider
from ideadrop.services.auth.dto import (
    AuthSessionOut,
    AuthTokenConfig,
    LoginIn,
    RefreshIn,
    RegisterIn,
)
from ideadrop.services.auth.service import AuthService
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from tests.factories.user import UserFactory


# ------------------------------ Fixtures ---------------------------------- #
@pytest.fixture()
def service() -> AuthService:
    """Build an AuthService wired to the deterministic token stub."""
    return AuthService(
        token_provider=StubTokenProvider(),
        token_cfg=AuthTokenConfig(
            access_expires=timedelta(minutes=1),
            refresh_expires=timedelta(days=30),
        ),
    )


# ------------------------------ Register ---------------------------------- #
def test_register_creates_user_and_issues_pair(service, session):
    out = service.register(RegisterIn(name="Ada", email="Ada@Example.com", password="pw"))

    assert isinstance(out, AuthSessionOut)
    assert out.access_token.startswith("access.")
    assert out.refresh_token is not None and out.refresh_token.startswith("refresh.")
    assert out.user.email == "ada@example.com"
    assert out.user.name == "Ada"

    stored = session.execute(select(User).filter_by(email="ada@example.com")).scalar_one()
    assert stored.id == out.user.id
    assert stored.password_hash != "pw"
    assert service.tokens.decode(out.access_token)["sub"] == str(out.user.id)


@pytest.mark.parametrize(
    "payload",
    [
        {"name": None, "email": "a@b.c", "password": "pw"},
        {"name": "Ada", "email": "", "password": "pw"},
        {"name": "Ada", "email": "a@b.c", "password": "   "},
        {"name": 42, "email": "a@b.c", "password": "pw"},
    ],
)
def test_register_requires_all_fields(service, session, payload):
    with pytest.raises(ValidationFailedError, match="All fields are required"):
        service.register(RegisterIn(**payload))


def test_register_duplicate_email(service, session):
    UserFactory(email="taken@example.com")

    with pytest.raises(DuplicateEmailError, match="User already exists"):
        service.register(RegisterIn(name="Other", email="TAKEN@example.com", password="pw"))


def test_register_duplicate_race_maps_store_rejection(service, session, monkeypatch):
    """A unique-constraint violation that slips past the pre-check is a duplicate."""
    UserFactory(email="race@example.com")
    # Simulate the concurrent winner: the pre-check sees nothing
    monkeypatch.setattr(
        "ideadrop.repositories.user.UserRepository.exists_by_email",
        lambda self, email: False,
    )

    with pytest.raises(DuplicateEmailError) as info:
        service.register(RegisterIn(name="Late", email="race@example.com", password="pw"))
    assert isinstance(info.value.__cause__, IntegrityError)


# -------------------------------- Login ----------------------------------- #
def test_login_issues_pair(service, session):
    user = UserFactory(email="login@example.com", password="right")

    out = service.login(LoginIn(email="LOGIN@example.com", password="right"))

    assert out.user.id == user.id
    assert out.refresh_token is not None
    assert service.tokens.decode(out.access_token)["type"] == "access"
    assert service.tokens.decode(out.refresh_token)["type"] == "refresh"


def test_login_failures_are_indistinguishable(service, session):
    UserFactory(email="known@example.com", password="right")

    with pytest.raises(InvalidCredentialsError) as unknown:
        service.login(LoginIn(email="ghost@example.com", password="right"))
    with pytest.raises(InvalidCredentialsError) as wrong:
        service.login(LoginIn(email="known@example.com", password="nope"))

    assert str(unknown.value) == str(wrong.value) == "Invalid Credentials"


def test_login_requires_fields(service, session):
    with pytest.raises(ValidationFailedError, match="Email and Password are required"):
        service.login(LoginIn(email="a@b.c", password=None))


# ------------------------------- Refresh ---------------------------------- #
def test_refresh_issues_new_access_token_only(service, session):
    user = UserFactory(password="pw")
    pair = service.login(LoginIn(email=user.email, password="pw"))

    out = service.refresh(RefreshIn(refresh_token=pair.refresh_token))

    assert out.refresh_token is None
    assert out.access_token != pair.access_token
    assert service.tokens.decode(out.access_token)["sub"] == str(user.id)
    assert out.user.id == user.id


def test_refresh_without_cookie(service, session):
    with pytest.raises(AuthenticationError):
        service.refresh(RefreshIn(refresh_token=None))


def test_refresh_with_garbage_token(service, session):
    with pytest.raises(InvalidTokenError):
        service.refresh(RefreshIn(refresh_token="not-a-token"))


def test_refresh_rejects_access_token(service, session):
    user = UserFactory(password="pw")
    pair = service.login(LoginIn(email=user.email, password="pw"))

    with pytest.raises(InvalidTokenError):
        service.refresh(RefreshIn(refresh_token=pair.access_token))


def test_refresh_after_expiry(service, session):
    user = UserFactory(password="pw")
    with freeze_time("2026-01-01 00:00:00"):
        pair = service.login(LoginIn(email=user.email, password="pw"))
    with freeze_time("2026-02-01 00:00:00"):
        with pytest.raises(InvalidTokenError):
            service.refresh(RefreshIn(refresh_token=pair.refresh_token))


def test_refresh_fails_if_user_deleted(service, session):
    user = UserFactory(password="pw")
    pair = service.login(LoginIn(email=user.email, password="pw"))

    session.delete(user)
    session.commit()

    with pytest.raises(AuthenticationError):
        service.refresh(RefreshIn(refresh_token=pair.refresh_token))
