"""Shared persistence helpers for the user and idea repositories.

Repositories only stage and read rows. Opening, committing and rolling back
transactions belongs to the Unit of Work in :mod:`ideadrop.uow`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar, Generic, TypeVar, cast

from sqlalchemy.orm import Session

from ideadrop.core.extensions import db

E = TypeVar("E")


class BaseRepository(Generic[E]):
    """Row access for one mapped class.

    Subclasses set :attr:`model` and, when rows may change after creation,
    :attr:`editable_fields`. Anything outside that set is rejected by
    :meth:`apply_changes`, so request payloads can never reach columns such as
    an owner id or a password hash.
    """

    model: type[E]
    editable_fields: ClassVar[frozenset[str]] = frozenset()

    def __init__(self, session: Session | None = None) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        """Session of the surrounding Unit of Work, else the Flask-scoped one."""
        if self._session is not None:
            return self._session
        return cast(Session, db.session)

    def add(self, instance: E) -> E:
        """Stage ``instance`` and flush so its primary key is assigned."""
        self.session.add(instance)
        self.session.flush()
        return instance

    def get(self, entity_id: int) -> E | None:
        """Return the row with primary key ``entity_id``, or ``None``."""
        return self.session.get(self.model, entity_id)

    def delete(self, instance: E) -> None:
        self.session.delete(instance)
        self.session.flush()

    def apply_changes(self, instance: E, changes: Mapping[str, Any]) -> E:
        """Copy ``changes`` onto ``instance`` and flush.

        :raises ValueError: If a key is not one of :attr:`editable_fields`.
        """
        rejected = sorted(set(changes) - self.editable_fields)
        if rejected:
            raise ValueError(f"{self.model.__name__} fields are not editable: {rejected}")
        for name, value in changes.items():
            setattr(instance, name, value)
        self.session.flush()
        return instance
