"""ORM → DTO conversion for ideas. Call inside a UoW block."""

from __future__ import annotations

from ideadrop.models.idea import Idea
from ideadrop.services._shared.ids import IdeaId, UserId
from ideadrop.services.ideas.dto import IdeaOut


def to_idea_out(idea: Idea) -> IdeaOut:
    return IdeaOut(
        id=IdeaId(idea.id),
        title=idea.title,
        summary=idea.summary,
        description=idea.description,
        tags=tuple(idea.tags or ()),
        user_id=UserId(idea.user_id),
        created_at=idea.created_at,
        updated_at=idea.updated_at,
    )
