from __future__ import annotations

import pytest
from ideadrop.models.user import User, normalize_email
from sqlalchemy.exc import IntegrityError
from tests.factories.user import UserFactory


def test_email_is_normalized_on_assignment(session):
    user = User(name="Ada", email="  Ada@Example.COM ")
    user.password = "secret"
    session.add(user)
    session.commit()

    assert user.email == "ada@example.com"
    assert normalize_email(" X@Y.io") == "x@y.io"


def test_password_is_hashed_and_write_only(session):
    user = UserFactory(password="s3cret!")

    assert user.password_hash and user.password_hash != "s3cret!"
    assert user.verify_password("s3cret!") is True
    assert user.verify_password("wrong") is False
    with pytest.raises(AttributeError):
        _ = user.password


def test_empty_password_rejected():
    user = User(name="Ada", email="ada@example.com")
    with pytest.raises(ValueError):
        user.password = ""


def test_blank_name_rejected():
    with pytest.raises(ValueError):
        User(name="   ", email="ada@example.com")


def test_email_unique_constraint(session):
    UserFactory(email="dup@example.com")
    clash = User(name="Other", email="DUP@example.com")
    clash.password = "x"
    session.add(clash)
    with pytest.raises(IntegrityError):
        session.commit()
    session.rollback()
