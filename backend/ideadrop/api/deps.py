"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Response, current_app, jsonify, request
from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request

from ideadrop.core.errors import Unauthorized
from ideadrop.core.logger import current_request_id
from ideadrop.services._shared.base import ServiceContext
from ideadrop.services._shared.ids import UserId, parse_entity_id

F = TypeVar("F", bound=Callable[..., Any])


def require_auth(func: F) -> F:
    """Ensure the request carries a valid JWT access token.

    Only ``Authorization: Bearer <token>`` is read. The embedded user id is
    trusted as-is; the user row is not re-fetched.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        verify_jwt_in_request(optional=False)
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def current_actor_id() -> UserId:
    """Return the user id carried by the verified access token."""

    user_id = parse_entity_id(get_jwt_identity())
    if user_id is None:
        raise Unauthorized("Not authorized, token failed")
    return UserId(user_id)


def service_context(*, authenticated: bool = False) -> ServiceContext:
    """Build the request-scoped service context."""

    actor_id = current_actor_id() if authenticated else None
    return ServiceContext(actor_id=actor_id, request_id=current_request_id())


def json_body() -> dict[str, Any]:
    """Return the request fields as a mapping.

    JSON objects and urlencoded or multipart forms are both accepted; any
    other body yields an empty mapping.
    """

    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        return payload
    return request.form.to_dict()


def json_response(payload: Any, *, status: int = 200) -> Response:
    resp = jsonify(payload)
    resp.status_code = status
    return resp


def timing(func: F) -> F:
    """Log how long the view took, at debug level."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        started = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            took = round((time.perf_counter() - started) * 1000, 2)
            current_app.logger.debug(
                "%s took %sms", request.endpoint, took, extra={"elapsed_ms": took}
            )

    return wrapper  # type: ignore[return-value]
