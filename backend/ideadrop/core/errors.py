"""JSON error responses for every failure path of the API.

All bodies share one shape::

    {"message", "code", "status", "path", "request_id", "stack"?}

``stack`` is present only while ``ERROR_INCLUDE_STACK`` is enabled.
"""

from __future__ import annotations

import logging
import traceback
from http import HTTPStatus
from typing import Any

from flask import Flask, Response, current_app, jsonify, request
from marshmallow import ValidationError as MarshmallowValidationError
from sqlalchemy.exc import OperationalError
from werkzeug.exceptions import HTTPException

from ideadrop.core.logger import current_request_id
from ideadrop.services._shared.errors import (
    AuthenticationError,
    AuthorizationError,
    DuplicateEmailError,
    InvalidCredentialsError,
    NotFoundError,
    ServiceError,
    ValidationFailedError,
)

log = logging.getLogger(__name__)

# Most specific first: InvalidCredentialsError must win over its siblings
SERVICE_ERROR_STATUS: tuple[tuple[type[ServiceError], HTTPStatus, str], ...] = (
    (ValidationFailedError, HTTPStatus.BAD_REQUEST, "validation_error"),
    (DuplicateEmailError, HTTPStatus.BAD_REQUEST, "duplicate_email"),
    (InvalidCredentialsError, HTTPStatus.UNAUTHORIZED, "invalid_credentials"),
    (AuthenticationError, HTTPStatus.UNAUTHORIZED, "unauthorized"),
    (AuthorizationError, HTTPStatus.FORBIDDEN, "forbidden"),
    (NotFoundError, HTTPStatus.NOT_FOUND, "not_found"),
)


def _code_for(status: int) -> str:
    """``HTTPStatus.METHOD_NOT_ALLOWED`` becomes ``"method_not_allowed"``."""
    try:
        return HTTPStatus(status).name.lower()
    except ValueError:
        return "error"


def error_response(
    status: int,
    message: str,
    *,
    code: str | None = None,
    exc: BaseException | None = None,
) -> Response:
    """Render the shared error body with ``status``.

    :param status: HTTP status code.
    :param message: Client-safe summary.
    :param code: Stable identifier; derived from ``status`` when omitted.
    :param exc: Exception whose traceback fills ``stack`` when enabled.
    """
    body: dict[str, Any] = {
        "message": message,
        "code": code or _code_for(status),
        "status": int(status),
        "path": request.path,
        "request_id": current_request_id(),
    }
    if exc is not None and current_app.config.get("ERROR_INCLUDE_STACK", False):
        body["stack"] = [
            line.rstrip("\n")
            for line in traceback.format_exception(type(exc), exc, exc.__traceback__)
        ]
    resp = jsonify(body)
    resp.status_code = int(status)
    return resp


class APIError(Exception):
    """Error raised directly by the HTTP layer with a fixed status."""

    status = HTTPStatus.BAD_REQUEST

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class Unauthorized(APIError):
    status = HTTPStatus.UNAUTHORIZED


def _status_of(err: ServiceError) -> tuple[HTTPStatus, str]:
    for kind, status, code in SERVICE_ERROR_STATUS:
        if isinstance(err, kind):
            return status, code
    return HTTPStatus.BAD_REQUEST, "bad_request"


def _register_jwt_callbacks() -> None:
    from ideadrop.core.extensions import jwt

    @jwt.unauthorized_loader
    def _missing_token(reason: str) -> Response:
        log.warning("JWT missing: %s", reason)
        return error_response(HTTPStatus.UNAUTHORIZED, "Not authorized, no token")

    @jwt.invalid_token_loader
    def _invalid_token(reason: str) -> Response:
        log.warning("JWT rejected: %s", reason)
        return error_response(HTTPStatus.UNAUTHORIZED, "Not authorized, token failed")

    @jwt.expired_token_loader
    def _expired_token(jwt_header: dict[str, Any], jwt_payload: dict[str, Any]) -> Response:
        log.warning("JWT expired", extra={"user_id": jwt_payload.get("sub")})
        return error_response(HTTPStatus.UNAUTHORIZED, "Not authorized, token expired")


def init_app(app: Flask) -> None:
    """Install the handlers; 5xx are logged as errors with a traceback."""

    _register_jwt_callbacks()

    @app.errorhandler(APIError)
    def _api_error(err: APIError):
        log.warning("APIError status=%s msg=%s", int(err.status), err.message)
        return error_response(err.status, err.message, code=err.code, exc=err)

    @app.errorhandler(ServiceError)
    def _service_error(err: ServiceError):
        status, code = _status_of(err)
        log.warning("%s -> %s: %s", type(err).__name__, int(status), err)
        return error_response(status, str(err), code=code, exc=err)

    @app.errorhandler(MarshmallowValidationError)
    def _schema_error(err: MarshmallowValidationError):
        log.warning("Schema rejected payload: %s", err.messages)
        return error_response(
            HTTPStatus.BAD_REQUEST, "Invalid request payload", code="validation_error", exc=err
        )

    @app.errorhandler(HTTPException)
    def _http_error(err: HTTPException):
        status = err.code or HTTPStatus.INTERNAL_SERVER_ERROR
        if status == HTTPStatus.NOT_FOUND:
            message = f"Not Found - {request.path}"
        else:
            message = (err.description or HTTPStatus(status).phrase).strip()
        (log.error if status >= 500 else log.warning)("HTTP %s: %s", status, message)
        return error_response(status, message, exc=err)

    @app.errorhandler(OperationalError)
    def _store_unavailable(err: OperationalError):
        log.error("Database unavailable", exc_info=True)
        return error_response(
            HTTPStatus.SERVICE_UNAVAILABLE, "Service temporarily unavailable", exc=err
        )

    @app.errorhandler(Exception)
    def _unexpected(err: Exception):
        log.error("Unhandled exception", exc_info=True)
        return error_response(HTTPStatus.INTERNAL_SERVER_ERROR, "Unexpected error", exc=err)
