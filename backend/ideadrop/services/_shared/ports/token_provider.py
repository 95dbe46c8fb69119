"""What the auth service needs from a JWT library."""

from __future__ import annotations

import itertools
from datetime import UTC, datetime, timedelta
from typing import Any, Protocol

from ideadrop.services._shared.errors import InvalidTokenError


class TokenProvider(Protocol):
    """Issues and reads signed tokens.

    Claims returned by :meth:`decode` include ``sub`` (the user id as a
    string), ``type`` (``"access"`` or ``"refresh"``) and ``exp``.
    """

    def create_access_token(
        self, *, identity: int | str, expires_delta: timedelta | None = None
    ) -> str: ...

    def create_refresh_token(
        self, *, identity: int | str, expires_delta: timedelta | None = None
    ) -> str: ...

    def decode(self, token: str) -> dict[str, Any]:
        """:raises InvalidTokenError: For unknown or expired tokens."""
        ...


class StubTokenProvider:
    """In-memory provider for service tests; tokens read ``<type>.<sub>.<n>``."""

    ACCESS_TTL = timedelta(minutes=1)
    REFRESH_TTL = timedelta(days=30)

    def __init__(self) -> None:
        self._counter = itertools.count(1)
        self._claims: dict[str, dict[str, Any]] = {}

    def _issue(self, kind: str, identity: int | str, ttl: timedelta) -> str:
        token = f"{kind}.{identity}.{next(self._counter)}"
        expires = datetime.now(tz=UTC) + ttl
        self._claims[token] = {"sub": str(identity), "type": kind, "exp": int(expires.timestamp())}
        return token

    def create_access_token(self, *, identity, expires_delta=None) -> str:
        return self._issue("access", identity, expires_delta or self.ACCESS_TTL)

    def create_refresh_token(self, *, identity, expires_delta=None) -> str:
        return self._issue("refresh", identity, expires_delta or self.REFRESH_TTL)

    def decode(self, token: str) -> dict[str, Any]:
        claims = self._claims.get(token)
        if claims is None:
            raise InvalidTokenError("Unknown token")
        if claims["exp"] <= datetime.now(tz=UTC).timestamp():
            raise InvalidTokenError("Token has expired")
        return claims
