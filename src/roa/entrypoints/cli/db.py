"""`roa db`: forward-only schema commands on top of Alembic.

Notices are written to stderr; Alembic's own report goes to stdout.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from alembic import command
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import text
from sqlalchemy.exc import ArgumentError, OperationalError

from roa import config
from roa.adapters.db.engine import make_engine

from .helpers import error, sanitize_url, success, warn

if TYPE_CHECKING:
    from alembic.config import Config

URL_HINT = "  export ROA_DB_URL='sqlite+pysqlite:///roa.db'"

URL_PROBLEMS = {
    config.DatabaseUrlNotSetError: f"ROA_DB_URL is not set.\n\nFor example:\n{URL_HINT}",
    ArgumentError: "ROA_DB_URL is not a valid SQLAlchemy database URL.",
    OperationalError: (
        "The database named by ROA_DB_URL does not answer; "
        "check that it is running and that the URL is right."
    ),
}

verbose_option = click.option(
    "--verbose", "-v", is_flag=True, help="Pass --verbose through to Alembic."
)


def get_checked_url() -> str:
    """Return ``ROA_DB_URL`` once a ``SELECT 1`` has gone through.

    Raises:
        click.ClickException: If the URL is unset, malformed or unreachable.
    """
    try:
        url = config.get_db_url()
        engine = make_engine(url)
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))  # pragma: no mutate
        finally:
            engine.dispose()
    except tuple(URL_PROBLEMS) as e:
        problem = next(msg for kind, msg in URL_PROBLEMS.items() if isinstance(e, kind))
        raise click.ClickException(problem) from e
    return url


def _alembic(url: str | None = None) -> Config:
    return config.build_alembic_config(db_url=url, stdout=sys.stdout)


def schema_state(current: str | None, head: str | None) -> str:
    """Describe `current` against `head`: up to date, out of date or uninitialized."""
    if current == head:
        return "up to date"
    return "uninitialized" if current is None else "out of date"


@click.group(cls=clickx.ExtraGroup)
def db() -> None:
    """Database management commands."""


@db.command()
@verbose_option
def current(verbose: bool) -> None:
    """Show current DB revision."""
    command.current(_alembic(get_checked_url()), verbose=verbose)


@db.command()
@verbose_option
def heads(verbose: bool) -> None:
    """Show available head revisions."""
    command.heads(_alembic(), verbose=verbose)


@db.command()
@verbose_option
@click.option(
    "--indicate-current",
    "-i",
    is_flag=True,
    help="Mark the database's current revision (needs ROA_DB_URL).",
)
def history(verbose: bool, indicate_current: bool) -> None:
    """Show revision history."""
    cfg = _alembic(get_checked_url() if indicate_current else None)
    command.history(cfg, verbose=verbose, indicate_current=indicate_current)


@db.command()
@click.option("--sql", is_flag=True, help="Print the migration SQL instead of running it.")
@click.option("--force", is_flag=True, help="Skip the confirmation prompt.")
def upgrade(sql: bool, force: bool) -> None:
    """Upgrade the database to the head revision."""
    url = get_checked_url()
    if not (force or sql):
        warn("Migrating to the newest schema. Please ensure you have a backup first.")
        click.echo(f"db: {click.style(sanitize_url(url), underline=True)}")
        click.confirm("Continue?", abort=True)
    command.upgrade(_alembic(url), revision="head", sql=sql)
    success("Upgrade complete!")


@db.command()
def status() -> None:
    """Show database connection and schema status."""
    try:
        url = get_checked_url()
    except click.ClickException as e:
        error("Cannot connect to database")
        click.echo(e.format_message())
        sys.exit(1)

    success("Database reachable")
    engine = make_engine(url)
    try:
        with engine.connect() as conn:
            revision = MigrationContext.configure(conn).get_current_revision()
    finally:
        engine.dispose()
    head = ScriptDirectory.from_config(_alembic(url)).get_current_head()
    state = schema_state(revision, head)

    click.echo(f"Backend : {engine.dialect.name}")
    click.echo(f"URL     : {sanitize_url(url)}")
    click.echo(f"Schema  : {revision} ({state})" if revision else f"Schema  : {state}")
    if state != "up to date":
        warn("Run 'roa db upgrade' to update the schema.")
