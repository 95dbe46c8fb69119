"""Idea endpoints."""

from __future__ import annotations

from flask import Blueprint, request

from ideadrop.api.deps import json_body, json_response, require_auth, service_context, timing
from ideadrop.schemas import IdeaSchema, IdeaWriteSchema, LimitQuerySchema
from ideadrop.services.ideas.service import IdeaService

bp = Blueprint("ideas", __name__)

idea_schema = IdeaSchema()
idea_list_schema = IdeaSchema(many=True)
idea_write_schema = IdeaWriteSchema()
limit_schema = LimitQuerySchema()


@bp.get("")
@timing
def list_ideas():
    """Return ideas newest first, optionally bounded by ``_limit``."""

    limit = limit_schema.load(request.args)["limit"]
    items = IdeaService(ctx=service_context()).list_ideas(limit=limit)
    return json_response(idea_list_schema.dump(items))


@bp.get("/<string:idea_id>")
@timing
def get_idea(idea_id: str):
    """Return a single idea. Malformed ids answer 404 like unknown ones."""

    idea = IdeaService(ctx=service_context()).get_idea(idea_id)
    return json_response(idea_schema.dump(idea))


@bp.post("")
@require_auth
@timing
def create_idea():
    """Create an idea owned by the caller."""

    dto = idea_write_schema.load(json_body())
    idea = IdeaService(ctx=service_context(authenticated=True)).create_idea(dto)
    return json_response(idea_schema.dump(idea), status=201)


@bp.put("/<string:idea_id>")
@require_auth
@timing
def update_idea(idea_id: str):
    """Replace title, summary, description and tags of an owned idea."""

    dto = idea_write_schema.load(json_body())
    idea = IdeaService(ctx=service_context(authenticated=True)).update_idea(idea_id, dto)
    return json_response(idea_schema.dump(idea))


@bp.delete("/<string:idea_id>")
@require_auth
@timing
def delete_idea(idea_id: str):
    """Delete an owned idea."""

    IdeaService(ctx=service_context(authenticated=True)).delete_idea(idea_id)
    return json_response({"message": "Idea deleted successfully"})
