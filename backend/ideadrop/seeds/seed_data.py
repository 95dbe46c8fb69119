"""Demo accounts and ideas for local runs. Seeding twice creates nothing new."""

from __future__ import annotations

import logging
from typing import Any, cast

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import select
from sqlalchemy.orm import Session

from ideadrop.models.idea import Idea
from ideadrop.models.user import User, normalize_email

LOGGER = logging.getLogger(__name__)

USER_FIXTURES: list[dict[str, str]] = [
    {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "password": "analytical123",
    },
    {
        "name": "Grace Hopper",
        "email": "grace@example.com",
        "password": "compiler1952",
    },
]

IDEA_FIXTURES: list[dict[str, Any]] = [
    {
        "owner_email": "ada@example.com",
        "title": "Recipe swap board",
        "summary": "Neighbours trade their favourite weeknight recipes.",
        "description": "A shared board where each household posts one recipe a week "
        "and picks one to cook from someone else.",
        "tags": ["food", "community"],
    },
    {
        "owner_email": "ada@example.com",
        "title": "Plant watering reminder",
        "summary": "Per-plant watering schedule with gentle nudges.",
        "description": "Track every plant with its own interval and get a single daily "
        "digest of what needs water.",
        "tags": ["home", "reminders"],
    },
    {
        "owner_email": "grace@example.com",
        "title": "Bug bounty for open data",
        "summary": "Reward people who find errors in public datasets.",
        "description": "Publish known datasets, collect error reports and pay small "
        "bounties for confirmed fixes.",
        "tags": ["data", "civic"],
    },
]


Counts = dict[str, dict[str, int]]


def _tally(counts: Counts, table: str, created: bool) -> None:
    entry = counts.setdefault(table, {"created": 0, "existing": 0})
    entry["created" if created else "existing"] += 1


def _user_by_email(session: Session, email: str) -> User | None:
    return session.scalars(select(User).where(User.email == normalize_email(email))).first()


def seed_users(database: SQLAlchemy) -> Counts:
    """Create the demo accounts that are not there yet, keyed by email."""
    LOGGER.debug("Seeding users")
    session = cast(Session, database.session)
    counts: Counts = {}
    for fixture in USER_FIXTURES:
        missing = _user_by_email(session, fixture["email"]) is None
        if missing:
            user = User(name=fixture["name"], email=fixture["email"])
            user.password = fixture["password"]
            session.add(user)
        _tally(counts, "users", missing)
    session.commit()
    return counts


def seed_ideas(database: SQLAlchemy) -> Counts:
    """Create the demo ideas, keyed by owner and title. Run after :func:`seed_users`."""
    LOGGER.debug("Seeding ideas")
    session = cast(Session, database.session)
    counts: Counts = {}
    for fixture in IDEA_FIXTURES:
        owner = _user_by_email(session, fixture["owner_email"])
        if owner is None:
            raise RuntimeError(f"Idea fixture references unknown user {fixture['owner_email']!r}")
        stmt = select(Idea.id).where(Idea.user_id == owner.id, Idea.title == fixture["title"])
        missing = session.scalar(stmt) is None
        if missing:
            fields = {k: v for k, v in fixture.items() if k != "owner_email"}
            fields["tags"] = list(fields["tags"])
            session.add(Idea(user_id=owner.id, **fields))
            session.flush()
        _tally(counts, "ideas", missing)
    session.commit()
    return counts


def run_all(database: SQLAlchemy) -> Counts:
    """Seed users, then their ideas. Returns per-table created/existing counts."""
    summary = seed_users(database)
    summary.update(seed_ideas(database))
    LOGGER.info(
        "Seed finished",
        extra={"count": sum(c["created"] for c in summary.values())},
    )
    return summary


__all__ = ["seed_users", "seed_ideas", "run_all"]
