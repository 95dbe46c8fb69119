"""Common Marshmallow schemas shared across resources."""

from __future__ import annotations

import re
from typing import Any

from marshmallow import EXCLUDE, Schema, fields, post_load

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_limit(raw: str | None) -> int | None:
    """Read a result-count bound the way clients send it (``?_limit=5``).

    Leading digits are honoured (``"5abc"`` gives 5) and a negative bound
    counts by its magnitude (``"-2"`` gives 2). Missing, non-numeric or zero
    values mean "no limit".
    """
    if raw is None:
        return None
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    value = abs(int(match.group(1)))
    return value or None


class LimitQuerySchema(Schema):
    """Parse the optional ``_limit`` query parameter into ``limit``."""

    class Meta:
        unknown = EXCLUDE

    limit = fields.String(load_default=None, data_key="_limit")

    @post_load
    def resolve_limit(self, data: dict[str, Any], **_: Any) -> dict[str, Any]:
        return {"limit": parse_limit(data.get("limit"))}
