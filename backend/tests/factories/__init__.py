"""Factory Boy helpers wired to the project's SQLAlchemy session."""

from __future__ import annotations

import factory
from ideadrop.core.extensions import db


class BaseFactory(factory.alchemy.SQLAlchemyModelFactory):
    """Base class persisting objects through the Flask-scoped session.

    Objects are committed so that code running its own Unit of Work sees
    them. The session is resolved lazily, inside the test's app context.
    """

    class Meta:
        abstract = True
        sqlalchemy_session_factory = lambda: db.session  # noqa: E731
        sqlalchemy_session_persistence = "commit"
