"""Flask-JWT-Extended behind the :class:`TokenProvider` port."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any

import flask_jwt_extended as fjwt
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

from ideadrop.services._shared.errors import InvalidTokenError

logger = logging.getLogger(__name__)


class JWTTokenProvider:
    """
    Signs with the current app's ``JWT_SECRET_KEY``; needs an app context.

    Identities are stringified before signing because PyJWT rejects a
    non-string ``sub`` when decoding.
    """

    def create_access_token(self, *, identity: int | str, expires_delta: timedelta | None = None) -> str:
        return fjwt.create_access_token(identity=str(identity), expires_delta=expires_delta)

    def create_refresh_token(self, *, identity: int | str, expires_delta: timedelta | None = None) -> str:
        return fjwt.create_refresh_token(identity=str(identity), expires_delta=expires_delta)

    def decode(self, token: str) -> dict[str, Any]:
        """:raises InvalidTokenError: If the signature, expiry or format is wrong."""
        try:
            return fjwt.decode_token(token)
        except (PyJWTError, JWTExtendedException) as exc:
            logger.info("Token rejected: %s", type(exc).__name__)
            raise InvalidTokenError(str(exc) or "Invalid token") from exc
