"""Accounts that own ideas."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

from sqlalchemy import String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates
from werkzeug.security import check_password_hash, generate_password_hash

from ideadrop.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin

if TYPE_CHECKING:
    from .idea import Idea


def normalize_email(value: str) -> str:
    """Stored form of an email: trimmed and lowercased."""
    return value.strip().lower()


class User(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    A registered author.

    ``email`` is unique after normalization. The plain password is never
    stored: assign to :attr:`password` and only its werkzeug hash is kept.
    """

    __tablename__ = "users"
    __table_args__ = (UniqueConstraint("email", name="uq_users_email"),)

    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(256), nullable=False)

    ideas: Mapped[list[Idea]] = relationship(back_populates="owner", passive_deletes=True)

    @property
    def password(self) -> NoReturn:  # pragma: no cover
        raise AttributeError("Password is write-only.")

    @password.setter
    def password(self, raw: str) -> None:
        if not isinstance(raw, str) or not raw:
            raise ValueError("Password must be a non-empty string.")
        self.password_hash = generate_password_hash(raw)

    def verify_password(self, raw: str) -> bool:
        return bool(self.password_hash) and check_password_hash(self.password_hash, raw)

    @validates("email")
    def _normalize_email(self, key: str, value: str) -> str:
        if not isinstance(value, str) or not value:
            raise ValueError("Email is required.")
        return normalize_email(value)

    @validates("name")
    def _normalize_name(self, key: str, value: str) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("Name is required.")
        return value.strip()
