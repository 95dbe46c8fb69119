"""Authentication-related Marshmallow schemas.

Input schemas accept any value shape; the auth service decides whether a
field is usable so that every missing-field case yields the same message.
"""

from __future__ import annotations

from typing import Any

from marshmallow import EXCLUDE, Schema, fields, post_load

from ideadrop.services.auth.dto import LoginIn, RegisterIn


class RegisterSchema(Schema):
    """Input payload for account registration."""

    class Meta:
        unknown = EXCLUDE

    name = fields.Raw(load_default=None)
    email = fields.Raw(load_default=None)
    password = fields.Raw(load_default=None)

    @post_load
    def to_dto(self, data: dict[str, Any], **_: Any) -> RegisterIn:
        return RegisterIn(**data)


class LoginSchema(Schema):
    """Input payload for authenticating a user."""

    class Meta:
        unknown = EXCLUDE

    email = fields.Raw(load_default=None)
    password = fields.Raw(load_default=None)

    @post_load
    def to_dto(self, data: dict[str, Any], **_: Any) -> LoginIn:
        return LoginIn(**data)


class UserPublicSchema(Schema):
    """Public user fields. The password hash is never exposed."""

    id = fields.Integer(required=True)
    name = fields.String(required=True)
    email = fields.String(required=True)


class AuthSessionSchema(Schema):
    """Response payload: bearer access token plus the user it belongs to."""

    access_token = fields.String(required=True, data_key="accessToken")
    user = fields.Nested(UserPublicSchema, required=True)
