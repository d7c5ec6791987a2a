"""Resource record schema.

Defines the ``resource_records`` table: one row per record, keyed by the
resource type name and the record id, with the record's attributes stored
as a JSON document.

| Constraint                  | Purpose                           |
|-----------------------------|-----------------------------------|
| PRIMARY KEY(kind, record_id)| one row per record of a type      |
| CHECK(length(kind) > 0)     | resource name must not be empty   |
"""

from __future__ import annotations

from sqlalchemy import CheckConstraint, Column, String, Table

from roa.adapters.db.metadata import metadata
from roa.adapters.db.sa_types import PORTABLE_JSON

__all__ = ["resource_records"]

resource_records = Table(
    "resource_records",
    metadata,
    Column(
        "kind",
        String(64),
        primary_key=True,
        nullable=False,
        comment="Resource type name (URL segment).",
    ),
    Column(
        "record_id",
        String(200),
        primary_key=True,
        nullable=False,
        comment="Record identifier, unique within its kind.",
    ),
    Column(
        "attributes",
        PORTABLE_JSON,
        nullable=False,
        comment="Record attributes, including the id and foreign keys.",
    ),
    CheckConstraint("length(kind) > 0", name="kind_not_empty"),
)
