"""Idea repository."""

from __future__ import annotations

from sqlalchemy import select

from ideadrop.models.idea import Idea
from ideadrop.repositories.base import BaseRepository


class IdeaRepository(BaseRepository[Idea]):
    """Persistence for :class:`Idea`. The owner column is never editable."""

    model = Idea
    editable_fields = frozenset({"title", "summary", "description", "tags"})

    def list_newest_first(self, limit: int | None = None) -> list[Idea]:
        """Return ideas by creation time, newest first.

        Ideas created in the same instant come out by descending id.

        :param limit: Maximum number of rows, ``None`` for all of them.
        :type limit: int | None
        :rtype: list[Idea]
        """
        stmt = select(Idea).order_by(Idea.created_at.desc(), Idea.id.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.session.scalars(stmt))
