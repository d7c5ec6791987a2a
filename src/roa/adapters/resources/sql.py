"""Implementation of ResourceRepository using SQLAlchemy."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import insert, select, update
from sqlalchemy.exc import IntegrityError

from .base import ResourceRepositoryBase
from .schema import resource_records

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection

    from roa.domain.registry import ResourceRegistry
    from roa.interfaces.id_generator import IdGenerator

logger = logging.getLogger(__name__)


class SqlAlchemyResourceRepository(ResourceRepositoryBase):
    """ResourceRepository storing records in the ``resource_records`` table.

    The repository works inside the caller's transaction; committing or
    rolling back is left to the unit of work owning `connection`.
    """

    def __init__(
        self,
        connection: Connection,
        registry: ResourceRegistry,
        id_generator: IdGenerator,
    ) -> None:
        super().__init__(registry, id_generator)
        self.connection = connection

    def _load_attributes(self, resource: str, record_id: str) -> dict[str, Any] | None:
        stmt = select(resource_records.c.attributes).where(
            resource_records.c.kind == resource,
            resource_records.c.record_id == record_id,
        )
        if (row := self.connection.execute(stmt).fetchone()) is None:
            return None
        return dict(row.attributes)

    def _store_attributes(
        self, resource: str, record_id: str, attributes: dict[str, Any]
    ) -> bool:
        key = (
            resource_records.c.kind == resource,
            resource_records.c.record_id == record_id,
        )
        try:
            result = self.connection.execute(
                update(resource_records).where(*key).values(attributes=attributes)
            )
            if result.rowcount == 0:
                self.connection.execute(
                    insert(resource_records).values(
                        kind=resource, record_id=record_id, attributes=attributes
                    )
                )
        except IntegrityError:
            logger.exception("Failed to store %s (%s)", resource, record_id)
            return False
        return True
