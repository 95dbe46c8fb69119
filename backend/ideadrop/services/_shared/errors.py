"""
Failures raised by services and repositories.

Nothing here knows about HTTP. :mod:`ideadrop.core.errors` maps each class to
a status code and a stable ``code`` string when a request fails.
"""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError


def violates(exc: IntegrityError, constraint_name: str) -> bool:
    """
    Tell whether ``exc`` was raised by the constraint ``constraint_name``.

    PostgreSQL names the constraint in its message while SQLite only lists the
    columns (``UNIQUE constraint failed: users.email``), so either marker
    works.
    """
    message = str(exc.orig).lower() if exc.orig else ""
    return constraint_name.lower() in message


class ServiceError(Exception):
    """Root of the hierarchy. Subclasses override :attr:`default_message`."""

    default_message = "Service error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class ValidationFailedError(ServiceError):
    default_message = "Validation failed"


class DuplicateEmailError(ServiceError):
    default_message = "User already exists"


class InvalidCredentialsError(ServiceError):
    """Login failed. Unknown emails and wrong passwords read the same."""

    default_message = "Invalid Credentials"


class AuthenticationError(ServiceError):
    default_message = "Not authorized"


class InvalidTokenError(AuthenticationError):
    """A token failed decoding or verification."""

    default_message = "Invalid token"


class AuthorizationError(ServiceError):
    """The actor is known but may not touch the resource."""

    default_message = "Forbidden"


class NotFoundError(ServiceError):
    """
    No row exists for ``key``.

    :param entity: Entity name used in the message, e.g. ``"Idea"``.
    :param key: Identifier that was looked up.
    """

    def __init__(self, entity: str, key: str | int | None = None) -> None:
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} Not Found")
