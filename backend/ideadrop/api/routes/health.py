"""``GET /api/health``: liveness plus a database round trip."""

from __future__ import annotations

from flask import Blueprint, current_app
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from ideadrop.api.deps import json_response, timing
from ideadrop.core.extensions import db

bp = Blueprint("health", __name__)


@bp.get("/health")
@timing
def healthcheck():
    try:
        db.session.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError:  # pragma: no cover
        current_app.logger.exception("Health check could not reach the database")
        db.session.rollback()
        database = "fail"
    return json_response(
        {"status": "ok", "db": database, "version": current_app.config.get("APP_VERSION", "dev")}
    )
