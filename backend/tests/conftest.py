"""Pytest fixtures building an isolated application per test.

Every test gets a fresh app bound to its own in-memory SQLite database, so
committed data never leaks between cases.
"""

from __future__ import annotations

import os

import pytest
from ideadrop.core.config import TestingConfig
from ideadrop.core.extensions import db as _db  # Flask-SQLAlchemy instance
from ideadrop.factory import create_app  # application factory under test


@pytest.fixture()
def app():
    """Create a Flask application configured for testing.

    Yields
    ------
    flask.Flask
        Application with :class:`TestingConfig` applied, an active app
        context and a freshly created schema.
    """
    # Ensure env-based config does not leak into tests
    os.environ.pop("DATABASE_URL", None)
    app = create_app(TestingConfig)
    app.logger.setLevel("WARNING")
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture()
def db(app):
    """Return the database extension bound to the testing application."""
    return _db


@pytest.fixture()
def session(db):
    """Return the Flask-scoped SQLAlchemy session used by the app code."""
    return db.session


@pytest.fixture()
def client(app):
    """Return a Flask test client (cookie jar enabled)."""
    return app.test_client()


@pytest.fixture(scope="session")
def faker():
    """Provide a :class:`faker.Faker` instance seeded for deterministic tests."""
    from faker import Faker

    fk = Faker()
    Faker.seed(1337)
    return fk
