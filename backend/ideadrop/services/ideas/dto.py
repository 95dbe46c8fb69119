# ideadrop/services/ideas/dto.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from ideadrop.services._shared.ids import IdeaId, UserId
from ideadrop.services.ideas.tags import TagInput, UnrecognizedTags

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class IdeaWriteIn:
    """
    Full-replacement payload shared by create and update.

    Text fields carry whatever the client sent; the service checks them.

    :param title: Idea title.
    :param summary: Short summary.
    :param description: Long-form description.
    :param tags: Classified tag input (see :mod:`ideadrop.services.ideas.tags`).
    """

    title: Any
    summary: Any
    description: Any
    tags: TagInput = field(default_factory=UnrecognizedTags)


# --------------------------- Output DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class IdeaOut:
    """Read model for a single idea."""

    id: IdeaId
    title: str
    summary: str
    description: str
    tags: tuple[str, ...]
    user_id: UserId
    created_at: datetime
    updated_at: datetime
