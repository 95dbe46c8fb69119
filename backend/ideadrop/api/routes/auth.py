"""Authentication endpoints: register, login, logout, refresh."""

from __future__ import annotations

from flask import Blueprint, Response, current_app, request

from ideadrop.api.deps import json_body, json_response, timing
from ideadrop.infra.jwt.flask_jwt_token_provider import JWTTokenProvider
from ideadrop.schemas import AuthSessionSchema, LoginSchema, RegisterSchema
from ideadrop.services.auth.dto import AuthSessionOut, AuthTokenConfig, RefreshIn
from ideadrop.services.auth.service import AuthService

bp = Blueprint("auth", __name__)

register_schema = RegisterSchema()
login_schema = LoginSchema()
session_schema = AuthSessionSchema()


def _auth_service() -> AuthService:
    cfg = current_app.config
    return AuthService(
        token_provider=JWTTokenProvider(),
        token_cfg=AuthTokenConfig(
            access_expires=cfg["ACCESS_TOKEN_TTL"],
            refresh_expires=cfg["REFRESH_TOKEN_TTL"],
        ),
    )


def _cookie_options() -> dict:
    """Attributes shared by setting and clearing the refresh cookie."""

    cfg = current_app.config
    return {
        "httponly": True,
        "secure": bool(cfg.get("REFRESH_COOKIE_SECURE", False)),
        "samesite": cfg.get("REFRESH_COOKIE_SAMESITE", "Lax"),
        "path": "/",
    }


def _session_response(session: AuthSessionOut, *, status: int) -> Response:
    response = json_response(session_schema.dump(session), status=status)
    if session.refresh_token is not None:
        response.set_cookie(
            current_app.config["REFRESH_COOKIE_NAME"],
            session.refresh_token,
            max_age=int(current_app.config["REFRESH_TOKEN_TTL"].total_seconds()),
            **_cookie_options(),
        )
    return response


@bp.post("/register")
@timing
def register():
    """Create an account, set the refresh cookie and return an access token."""

    dto = register_schema.load(json_body())
    session = _auth_service().register(dto)
    return _session_response(session, status=201)


@bp.post("/login")
@timing
def login():
    """Authenticate credentials, set the refresh cookie and return an access token."""

    dto = login_schema.load(json_body())
    session = _auth_service().login(dto)
    return _session_response(session, status=201)


@bp.post("/logout")
@timing
def logout():
    """Clear the refresh cookie. Already-issued tokens stay valid until expiry."""

    response = json_response({"message": "Logged out successfully"})
    response.delete_cookie(current_app.config["REFRESH_COOKIE_NAME"], **_cookie_options())
    return response


@bp.post("/refresh")
@timing
def refresh():
    """Mint a new access token from the refresh cookie (never the body)."""

    token = request.cookies.get(current_app.config["REFRESH_COOKIE_NAME"])
    session = _auth_service().refresh(RefreshIn(refresh_token=token))
    return _session_response(session, status=200)
