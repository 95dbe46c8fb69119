"""Marshmallow schemas for request parsing and response rendering."""

from .auth import AuthSessionSchema, LoginSchema, RegisterSchema, UserPublicSchema
from .common import LimitQuerySchema, parse_limit
from .idea import IdeaSchema, IdeaWriteSchema

__all__ = [
    "AuthSessionSchema",
    "LoginSchema",
    "RegisterSchema",
    "UserPublicSchema",
    "LimitQuerySchema",
    "parse_limit",
    "IdeaSchema",
    "IdeaWriteSchema",
]
