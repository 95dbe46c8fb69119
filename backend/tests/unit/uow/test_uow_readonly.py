from __future__ import annotations

import pytest
from ideadrop.models.user import User
from ideadrop.uow import SQLAlchemyReadOnlyUnitOfWork
from tests.factories.user import UserFactory


def test_reads_are_allowed(session):
    user = UserFactory(email="reader@example.com")

    with SQLAlchemyReadOnlyUnitOfWork() as uow:
        found = uow.users.get_by_email("reader@example.com")
        assert found is not None and found.id == user.id


def test_flush_of_pending_objects_is_blocked(session):
    with pytest.raises(RuntimeError, match="Read-only"):
        with SQLAlchemyReadOnlyUnitOfWork() as uow:
            user = User(name="Sneaky", email="sneaky@example.com")
            user.password = "x"
            uow.users.add(user)


def test_commit_is_disallowed(session):
    with SQLAlchemyReadOnlyUnitOfWork() as uow:
        with pytest.raises(RuntimeError):
            uow.commit()


def test_guard_removed_after_exit(session):
    with SQLAlchemyReadOnlyUnitOfWork():
        pass

    user = User(name="Later", email="later@example.com")
    user.password = "x"
    session.add(user)
    session.commit()
    assert user.id is not None
