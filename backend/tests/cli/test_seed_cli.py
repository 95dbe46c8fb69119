from __future__ import annotations

from ideadrop.models.idea import Idea
from ideadrop.models.user import User
from sqlalchemy import func, select


def _counts(session) -> tuple[int, int]:
    users = session.execute(select(func.count()).select_from(User)).scalar_one()
    ideas = session.execute(select(func.count()).select_from(Idea)).scalar_one()
    return users, ideas


def test_seed_run_is_idempotent(app, session):
    runner = app.test_cli_runner()

    first = runner.invoke(args=["seed", "run"])
    assert first.exit_code == 0, first.output
    assert "users: 2 created, 0 already present" in first.output
    assert "ideas: 3 created, 0 already present" in first.output
    after_first = _counts(session)

    second = runner.invoke(args=["seed", "run"])
    assert second.exit_code == 0, second.output
    assert _counts(session) == after_first
    assert "users: 0 created, 2 already present" in second.output
    assert "ideas: 0 created, 3 already present" in second.output


def test_seeded_user_can_log_in(app, client):
    app.test_cli_runner().invoke(args=["seed", "run"])

    resp = client.post(
        "/api/auth/login", json={"email": "ada@example.com", "password": "analytical123"}
    )
    assert resp.status_code == 201


def test_seed_fresh_requires_confirmation(app):
    result = app.test_cli_runner().invoke(args=["seed", "fresh"], input="n\n")
    assert result.exit_code != 0


def test_seed_fresh_refused_in_production(app):
    app.config["APP_ENV"] = "production"

    result = app.test_cli_runner().invoke(args=["seed", "fresh", "--yes"])

    assert result.exit_code != 0
    assert "APP_ENV=production" in result.output


def test_seed_fresh_rebuilds_the_schema(app, session):
    runner = app.test_cli_runner()
    runner.invoke(args=["seed", "run"])

    result = runner.invoke(args=["seed", "fresh", "--yes"])

    assert result.exit_code == 0, result.output
    assert "users: 2 created, 0 already present" in result.output
    assert _counts(session) == (2, 3)
