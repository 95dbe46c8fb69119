"""``flask seed``: demo users and ideas for local development."""

from __future__ import annotations

import logging

import click
from flask import current_app
from flask.cli import AppGroup
from sqlalchemy.exc import SQLAlchemyError

from ideadrop.core.extensions import db
from ideadrop.seeds import seed_data

log = logging.getLogger(__name__)

seed_cli = AppGroup("seed", help="Load demo accounts and ideas.")


def _seed_and_report() -> None:
    try:
        summary = seed_data.run_all(db)
    except SQLAlchemyError as exc:
        db.session.rollback()
        raise click.ClickException(f"Seeding failed: {exc}") from exc
    for table, counts in summary.items():
        click.echo(f"{table}: {counts['created']} created, {counts['existing']} already present")


@seed_cli.command("run")
def run_command() -> None:
    """Add whichever demo users and ideas are missing."""
    _seed_and_report()


@seed_cli.command("fresh")
@click.option("--yes", is_flag=True, help="Do not ask before dropping the tables.")
def fresh_command(yes: bool) -> None:
    """Drop and recreate the users and ideas tables, then seed them."""
    if current_app.config.get("APP_ENV") == "production":
        raise click.UsageError("Refusing to reset the database while APP_ENV=production.")
    if not yes:
        click.confirm("Drop every user and idea and start over?", abort=True)
    log.info("Recreating schema")
    db.session.remove()
    db.drop_all()
    db.create_all()
    _seed_and_report()
