"""Tag input shapes and their normalization.

Clients send tags either as one comma-delimited string (``"a, b,,c"``) or as
a JSON array. Both forms, and anything unexpected, resolve through
:func:`normalize_tags` into an ordered list of strings.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

TAG_DELIMITER = ","


@dataclass(frozen=True, slots=True)
class DelimitedTags:
    """A single string holding tags separated by commas."""

    raw: str


@dataclass(frozen=True, slots=True)
class TagSequence:
    """An already-structured sequence of tags."""

    items: tuple[object, ...]


@dataclass(frozen=True, slots=True)
class UnrecognizedTags:
    """Any other shape (missing, ``null``, objects, numbers...)."""

    raw: object = None


TagInput = DelimitedTags | TagSequence | UnrecognizedTags


def classify_tags(raw: object) -> TagInput:
    """Wrap a raw request value in the matching tag variant."""
    if isinstance(raw, str):
        return DelimitedTags(raw)
    if isinstance(raw, Sequence) and not isinstance(raw, bytes | bytearray):
        return TagSequence(tuple(raw))
    return UnrecognizedTags(raw)


def _sequence_item(item: object) -> str | None:
    if isinstance(item, str):
        return item
    # Numbers are kept in their textual form; bool is excluded on purpose
    if isinstance(item, int | float) and not isinstance(item, bool):
        return str(item)
    return None


def normalize_tags(tags: TagInput) -> list[str]:
    """
    Resolve a tag input into the canonical ordered list of strings.

    * :class:`DelimitedTags`: split on commas, trim each segment, drop empties.
    * :class:`TagSequence`: strings kept as sent, numbers stringified,
      anything else dropped. Order is preserved.
    * :class:`UnrecognizedTags`: empty list.

    :param tags: Classified tag input.
    :returns: Normalized tags.
    :rtype: list[str]
    """
    if isinstance(tags, DelimitedTags):
        return [seg.strip() for seg in tags.raw.split(TAG_DELIMITER) if seg.strip()]
    if isinstance(tags, TagSequence):
        return [tag for tag in map(_sequence_item, tags.items) if tag is not None]
    return []
