"""Extension singletons, bound to an app by :func:`init_app`."""

from __future__ import annotations

from flask import Flask
from flask_jwt_extended import JWTManager
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import MetaData

# Stable constraint names, so Alembic diffs match across backends
NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

db: SQLAlchemy = SQLAlchemy(
    metadata=MetaData(naming_convention=NAMING_CONVENTION),
    session_options={"autoflush": False},
)
migrate = Migrate(render_as_batch=True)
jwt = JWTManager()


def init_app(app: Flask) -> None:
    """Bind the database, migrations and JWT manager to ``app``.

    :raises RuntimeError: If ``JWT_SECRET_KEY`` is empty.
    """
    if not app.config.get("JWT_SECRET_KEY"):
        raise RuntimeError("JWT_SECRET is not configured; refusing to start.")

    db.init_app(app)
    # Alembic autogenerate needs the mapped tables registered
    from ideadrop import models  # noqa: F401

    migrate.init_app(app, db)
    jwt.init_app(app)
