"""Alembic environment running ROA's migrations.

The database URL comes from ``-x url=...``, then the ``sqlalchemy.url``
option, then ``ROA_DB_URL``. Column types are compared on autogenerate and
SQLite gets batch (copy-and-move) ALTERs.
"""

from alembic import context

import roa.adapters.resources.schema  # noqa: F401 # pylint: disable=unused-import
from roa import config as roa_config
from roa.adapters.db.engine import is_sqlite, make_engine
from roa.adapters.db.metadata import metadata

# pylint: disable=no-member


def database_url() -> str:
    url = context.get_x_argument(as_dictionary=True).get("url")
    url = url or context.config.get_main_option(roa_config.ALEMBIC_URL_KEY)
    return url or roa_config.get_db_url()


def migrate(**options) -> None:
    context.configure(target_metadata=metadata, compare_type=True, **options)
    with context.begin_transaction():
        context.run_migrations()


def main() -> None:
    url = database_url()
    if context.is_offline_mode():
        migrate(url=url, literal_binds=True, dialect_opts={"paramstyle": "named"})
        return
    engine = make_engine(url)
    try:
        with engine.connect() as connection:
            migrate(connection=connection, render_as_batch=is_sqlite(url))
    finally:
        engine.dispose()


main()
