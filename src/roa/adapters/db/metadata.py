"""Shared SQLAlchemy `MetaData` for ROA tables.

Constraint and index names follow a fixed convention so Alembic migrations
and `metadata.create_all()` produce identical schemas:

    - Primary key:   pk_<table>
    - Unique:        uq_<table>_<col...>
    - Index:         ix_<table>_<col...>
    - Check:         ck_<table>_<constraint_name>
"""

from sqlalchemy import MetaData

metadata = MetaData(
    naming_convention={
        "pk": "pk_%(table_name)s",
        "uq": "uq_%(table_name)s_%(column_0_N_name)s",
        "ix": "ix_%(table_name)s_%(column_0_N_label)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
    }
)
