"""Configuration utilities for ROA.

This module centralizes environment lookups and the programmatic Alembic
configuration used by the CLI and the composition root.
"""

import os
import sys
from importlib.resources import files
from typing import TextIO

from alembic.config import Config

DB_URL_ENVVAR = "ROA_DB_URL"  # pragma: no mutate
ALEMBIC_URL_KEY = "sqlalchemy.url"  # pragma: no mutate
ALEMBIC_SCRIPT_LOCATION_KEY = "script_location"  # pragma: no mutate


class DatabaseUrlNotSetError(Exception):
    """Raised when the ROA_DB_URL environment variable is not set."""


def get_db_url() -> str:
    """Get the database URL from the environment.

    Returns:
        The value of the `ROA_DB_URL` environment variable.

    Raises:
        DatabaseUrlNotSetError: If `ROA_DB_URL` is not set.
    """
    if not (url := os.environ.get(DB_URL_ENVVAR)):
        raise DatabaseUrlNotSetError
    return url


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Build an Alembic `Config` object for ROA's migrations.

    Args:
        db_url: SQLAlchemy database URL. May be `None` for commands that do
            not connect (e.g. ``heads``).
        stdout: Text stream Alembic writes status lines to.

    Returns:
        An `alembic.config.Config` pointing to ROA's packaged migration scripts.
    """
    cfg = Config(stdout=stdout)
    if db_url is not None:
        cfg.set_main_option(ALEMBIC_URL_KEY, db_url)
    cfg.set_main_option(
        ALEMBIC_SCRIPT_LOCATION_KEY,
        str(files("roa.adapters.db.alembic")),
    )
    return cfg
