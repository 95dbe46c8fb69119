# ideadrop/services/auth/service.py
from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any

from sqlalchemy.exc import IntegrityError

from ideadrop.models.user import User
from ideadrop.repositories.user import UserRepository
from ideadrop.services._shared.base import BaseService
from ideadrop.services._shared.errors import (
    AuthenticationError,
    DuplicateEmailError,
    InvalidCredentialsError,
    InvalidTokenError,
    ValidationFailedError,
    violates,
)
from ideadrop.services._shared.ids import UserId, parse_entity_id
from ideadrop.services._shared.ports.token_provider import TokenProvider
from ideadrop.services.auth.dto import (
    AuthSessionOut,
    AuthTokenConfig,
    LoginIn,
    RefreshIn,
    RegisterIn,
    UserPublicOut,
)

logger = logging.getLogger(__name__)

# Flask-JWT-Extended writes this into the ``type`` claim of refresh tokens
REFRESH_TOKEN_TYPE = "refresh"

# Unique-constraint markers: PostgreSQL reports the name, SQLite the column
_EMAIL_UNIQUE_MARKERS = ("uq_users_email", "users.email")


def _present(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _public(user: User) -> UserPublicOut:
    return UserPublicOut(id=UserId(user.id), name=user.name, email=user.email)


class AuthService(BaseService):
    """
    Authentication lifecycle service (register / login / refresh).

    Tokens are stateless: nothing is persisted per session, so logout is a
    purely client-side concern handled by the HTTP layer (cookie removal).
    """

    def __init__(self, *, token_provider: TokenProvider, token_cfg: AuthTokenConfig | None = None) -> None:
        super().__init__()
        self.tokens = token_provider
        self.cfg = token_cfg or AuthTokenConfig(timedelta(minutes=1), timedelta(days=30))

    def register(self, dto: RegisterIn) -> AuthSessionOut:
        """
        Create a user and open a session for it.

        :param dto: Registration input.
        :returns: Token pair plus public user fields.
        :raises ValidationFailedError: If name, email or password is missing.
        :raises DuplicateEmailError: If the email is already registered,
            including when a concurrent registration wins the race.
        """
        if not (_present(dto.name) and _present(dto.email) and _present(dto.password)):
            raise ValidationFailedError("All fields are required")

        try:
            with self.rw_uow() as uow:
                repo: UserRepository = uow.users
                if repo.exists_by_email(dto.email):
                    raise DuplicateEmailError()
                user = User(name=dto.name, email=dto.email)
                user.password = dto.password
                repo.add(user)
                public = _public(user)
        except IntegrityError as exc:
            if any(violates(exc, marker) for marker in _EMAIL_UNIQUE_MARKERS):
                logger.info("Registration lost a duplicate-email race")
                raise DuplicateEmailError() from exc
            raise

        logger.info("User registered", extra={"user_id": public.id})
        return self._open_session(public)

    def login(self, dto: LoginIn) -> AuthSessionOut:
        """
        Authenticate credentials and issue a fresh token pair.

        An unknown email and a wrong password raise the same error.

        :param dto: Login input.
        :returns: Token pair plus public user fields.
        :raises ValidationFailedError: If email or password is missing.
        :raises InvalidCredentialsError: If credentials do not match.
        """
        if not (_present(dto.email) and _present(dto.password)):
            raise ValidationFailedError("Email and Password are required")

        with self.ro_uow() as uow:
            repo: UserRepository = uow.users
            user = repo.authenticate(dto.email, dto.password)
            if user is None:
                logger.info("Login rejected")
                raise InvalidCredentialsError()
            public = _public(user)

        logger.info("User logged in", extra={"user_id": public.id})
        return self._open_session(public)

    def refresh(self, dto: RefreshIn) -> AuthSessionOut:
        """
        Mint a new access token from a refresh token.

        The refresh token is neither rotated nor re-issued. Unlike the access
        guard, this flow re-checks that the user still exists.

        :param dto: Refresh input (cookie value).
        :returns: New access token plus public user fields.
        :raises AuthenticationError: If the cookie is absent or the user is gone.
        :raises InvalidTokenError: If the token is malformed, badly signed,
            expired, or not a refresh token.
        """
        token = dto.refresh_token
        if not token:
            raise AuthenticationError("Not authorized, no refresh token")

        claims = self.tokens.decode(token)
        if claims.get("type") != REFRESH_TOKEN_TYPE:
            raise InvalidTokenError("Wrong token type: refresh token required")

        user_id = parse_entity_id(claims.get("sub"))
        if user_id is None:
            raise InvalidTokenError("Invalid token subject")

        with self.ro_uow() as uow:
            repo: UserRepository = uow.users
            user = repo.get(user_id)
            if user is None:
                raise AuthenticationError("Not authorized, user not found")
            public = _public(user)

        access = self.tokens.create_access_token(
            identity=public.id,
            expires_delta=self.cfg.access_expires,
        )
        logger.info("Access token refreshed", extra={"user_id": public.id})
        return AuthSessionOut(access_token=access, refresh_token=None, user=public)

    def _open_session(self, user: UserPublicOut) -> AuthSessionOut:
        access = self.tokens.create_access_token(
            identity=user.id,
            expires_delta=self.cfg.access_expires,
        )
        refresh = self.tokens.create_refresh_token(
            identity=user.id,
            expires_delta=self.cfg.refresh_expires,
        )
        return AuthSessionOut(access_token=access, refresh_token=refresh, user=user)
