"""Idea model: a user-authored record with an immutable owner."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import JSON, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from ideadrop.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin

if TYPE_CHECKING:
    from .user import User


class Idea(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    Idea authored by a single user.

    Fields
    ------
    title, summary, description : str
        Free text, stored exactly as submitted.
    tags : list[str]
        Ordered tag list (may be empty).
    user_id : int
        Owning user. Set once at creation and never reassigned.
    """

    __tablename__ = "ideas"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    summary: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    owner: Mapped[User] = relationship(back_populates="ideas")

    @validates("user_id")
    def _freeze_owner(self, key: str, value: int) -> int:
        current = self.user_id
        if current is not None and current != value:
            raise ValueError("Idea owner cannot be changed.")
        return value
