"""Identifier types shared by services."""

from __future__ import annotations

from typing import NewType

#: Opaque user identifier. Compare by value, never by string form.
UserId = NewType("UserId", int)

#: Opaque idea identifier.
IdeaId = NewType("IdeaId", int)

#: Largest value an ``Integer`` primary key column can hold
MAX_ENTITY_ID = 2**31 - 1


def parse_entity_id(raw: object) -> int | None:
    """
    Parse a client-supplied identifier.

    Only base-10 integers between 1 and :data:`MAX_ENTITY_ID` are well-formed
    ids; anything else yields ``None`` so callers can answer "not found"
    instead of failing.

    :param raw: Value taken from a path segment or token claim.
    :returns: The integer id, or ``None`` when malformed.
    :rtype: int | None
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str):
        text = raw.strip()
        if not text.isascii() or not text.isdigit():
            return None
        value = int(text)
    else:
        return None
    return value if 0 < value <= MAX_ENTITY_ID else None
