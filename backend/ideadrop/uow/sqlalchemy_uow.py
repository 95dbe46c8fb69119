"""SQLAlchemy Units of Work bound to ``db.session``."""

from __future__ import annotations

from contextlib import suppress
from typing import Self

from sqlalchemy import event
from sqlalchemy.exc import InvalidRequestError
from sqlalchemy.orm import Session, SessionTransaction, scoped_session

from ideadrop.core.extensions import db
from ideadrop.repositories import IdeaRepository, UserRepository
from ideadrop.uow.base import UnitOfWork


def _bind(uow: UnitOfWork, session: Session) -> None:
    uow.users = UserRepository(session=session)
    uow.ideas = IdeaRepository(session=session)


class SQLAlchemyUnitOfWork(UnitOfWork):
    """Read-write scope: commits on success, rolls back on error."""

    def __init__(self) -> None:
        self.session = db.session
        _bind(self, self.session)

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()


class SQLAlchemyReadOnlyUnitOfWork(UnitOfWork):
    """Read scope that refuses to write.

    A transaction is opened for the scope and rolled back on exit. When the
    session is already inside a transaction the scope joins it and leaves it
    as it found it. Flushing new, changed or deleted objects raises
    ``RuntimeError`` while the scope is active.
    """

    def __init__(self) -> None:
        self.session = db.session
        _bind(self, self.session)
        self._owned: SessionTransaction | None = None
        self._watched: Session | None = None

    def __enter__(self) -> Self:
        try:
            self._owned = self.session.begin()
        except InvalidRequestError:
            self._owned = None
        concrete = self.session() if isinstance(self.session, scoped_session) else self.session
        event.listen(concrete, "before_flush", self._refuse_flush)
        self._watched = concrete
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            if self._owned is not None:
                self._owned.rollback()
        finally:
            self._owned = None
            if self._watched is not None:
                with suppress(InvalidRequestError):
                    event.remove(self._watched, "before_flush", self._refuse_flush)
                self._watched = None

    def commit(self) -> None:
        raise RuntimeError("Read-only UnitOfWork does not allow commit().")

    def rollback(self) -> None:
        self.session.rollback()

    @staticmethod
    def _refuse_flush(session, flush_context, instances) -> None:
        if session.new or session.dirty or session.deleted:
            raise RuntimeError("Read-only UnitOfWork: refusing to flush pending changes.")
