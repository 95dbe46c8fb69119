"""Idea Marshmallow schemas (wire format uses ``_id`` and camelCase stamps)."""

from __future__ import annotations

from typing import Any

from marshmallow import EXCLUDE, Schema, fields, post_load

from ideadrop.services.ideas.dto import IdeaWriteIn
from ideadrop.services.ideas.tags import classify_tags


class IdeaSchema(Schema):
    """Output representation of an idea."""

    id = fields.Integer(data_key="_id")
    title = fields.String()
    summary = fields.String()
    description = fields.String()
    tags = fields.List(fields.String())
    user_id = fields.Integer(data_key="user")
    created_at = fields.DateTime(data_key="createdAt")
    updated_at = fields.DateTime(data_key="updatedAt")


class IdeaWriteSchema(Schema):
    """
    Input payload for create and full-replacement update.

    Nothing is rejected here: blank fields are reported by the service after
    the ownership check, and ``tags`` may be a string, a list or anything else.
    """

    class Meta:
        unknown = EXCLUDE

    title = fields.Raw(load_default=None)
    summary = fields.Raw(load_default=None)
    description = fields.Raw(load_default=None)
    tags = fields.Raw(load_default=None)

    @post_load
    def to_dto(self, data: dict[str, Any], **_: Any) -> IdeaWriteIn:
        return IdeaWriteIn(
            title=data["title"],
            summary=data["summary"],
            description=data["description"],
            tags=classify_tags(data["tags"]),
        )
