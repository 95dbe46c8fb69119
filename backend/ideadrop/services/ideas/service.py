# ideadrop/services/ideas/service.py
from __future__ import annotations

import logging
from typing import Any

from ideadrop.models.idea import Idea
from ideadrop.repositories.idea import IdeaRepository
from ideadrop.services._shared.base import BaseService
from ideadrop.services._shared.errors import NotFoundError, ValidationFailedError
from ideadrop.services._shared.ids import IdeaId, parse_entity_id
from ideadrop.services.ideas._converters import to_idea_out
from ideadrop.services.ideas.dto import IdeaOut, IdeaWriteIn
from ideadrop.services.ideas.tags import normalize_tags

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Title, Summary and Description are required"


class IdeaService(BaseService):
    """
    CRUD over ideas.

    Reads are public. Writes require an actor in the context; update and
    delete also require ownership. Checks always run in this order:
    authentication, existence, ownership, then payload validation.
    """

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def list_ideas(self, *, limit: int | None = None) -> list[IdeaOut]:
        """
        Return ideas newest-created first.

        :param limit: Maximum number of ideas; ``None`` returns all of them.
        :returns: Ordered list of ideas.
        """
        with self.ro_uow() as uow:
            repo: IdeaRepository = uow.ideas
            items = [to_idea_out(idea) for idea in repo.list_newest_first(limit)]
        logger.debug("Ideas listed", extra={"limit": limit, "count": len(items)})
        return items

    def get_idea(self, raw_id: object) -> IdeaOut:
        """
        Fetch a single idea.

        :param raw_id: Client-supplied identifier (path segment).
        :raises NotFoundError: If the id is malformed or unknown.
        """
        with self.ro_uow() as uow:
            idea = self._load(uow.ideas, raw_id)
            return to_idea_out(idea)

    # ------------------------------------------------------------------ #
    # Commands
    # ------------------------------------------------------------------ #

    def create_idea(self, dto: IdeaWriteIn) -> IdeaOut:
        """
        Create an idea owned by the acting user.

        :raises AuthenticationError: Without an actor.
        :raises ValidationFailedError: If a required text field is blank.
        """
        actor_id = self.require_actor()
        fields = self._validated_fields(dto)

        with self.rw_uow() as uow:
            repo: IdeaRepository = uow.ideas
            idea = repo.add(Idea(user_id=actor_id, **fields))
            out = to_idea_out(idea)

        logger.info("Idea created", extra={"idea_id": out.id, "user_id": actor_id})
        return out

    def update_idea(self, raw_id: object, dto: IdeaWriteIn) -> IdeaOut:
        """
        Replace every editable field of an idea.

        :raises AuthenticationError: Without an actor.
        :raises NotFoundError: If the id is malformed or unknown.
        :raises AuthorizationError: If the actor is not the owner.
        :raises ValidationFailedError: If a required text field is blank.
        """
        actor_id = self.require_actor()

        with self.rw_uow() as uow:
            repo: IdeaRepository = uow.ideas
            idea = self._load(repo, raw_id)
            self.ensure_owner(actor_id, idea.user_id, msg="Not authorized to update this idea")
            repo.apply_changes(idea, self._validated_fields(dto))
            out = to_idea_out(idea)

        logger.info("Idea updated", extra={"idea_id": out.id, "user_id": actor_id})
        return out

    def delete_idea(self, raw_id: object) -> None:
        """
        Permanently delete an idea.

        :raises AuthenticationError: Without an actor.
        :raises NotFoundError: If the id is malformed or unknown.
        :raises AuthorizationError: If the actor is not the owner.
        """
        actor_id = self.require_actor()

        with self.rw_uow() as uow:
            repo: IdeaRepository = uow.ideas
            idea = self._load(repo, raw_id)
            self.ensure_owner(actor_id, idea.user_id, msg="Not authorized to delete this idea")
            idea_id = idea.id
            repo.delete(idea)

        logger.info("Idea deleted", extra={"idea_id": idea_id, "user_id": actor_id})

    # ------------------------------------------------------------------ #
    # Internals
    # ------------------------------------------------------------------ #

    @staticmethod
    def _load(repo: IdeaRepository, raw_id: object) -> Idea:
        idea_id = parse_entity_id(raw_id)
        idea = repo.get(IdeaId(idea_id)) if idea_id is not None else None
        if idea is None:
            raise NotFoundError("Idea", str(raw_id))
        return idea

    @staticmethod
    def _validated_fields(dto: IdeaWriteIn) -> dict[str, Any]:
        texts = (dto.title, dto.summary, dto.description)
        if not all(isinstance(v, str) and v.strip() for v in texts):
            raise ValidationFailedError(REQUIRED_FIELDS_MESSAGE)
        return {
            "title": dto.title,
            "summary": dto.summary,
            "description": dto.description,
            "tags": normalize_tags(dto.tags),
        }
