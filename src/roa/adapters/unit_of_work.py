"""SQLAlchemy-backed Unit of Work for ROA.

Provides a context-managed UnitOfWork that opens a SQLAlchemy Connection
and exposes a SqlAlchemyResourceRepository bound to it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from roa.adapters.resources import SqlAlchemyResourceRepository
from roa.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

    from roa.domain.registry import ResourceRegistry
    from roa.interfaces.id_generator import IdGenerator


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy-backed Unit of Work."""

    def __init__(
        self, engine: Engine, registry: ResourceRegistry, id_generator: IdGenerator
    ):
        self.engine = engine
        self.registry = registry
        self.id_generator = id_generator
        self.connection: Connection

    def __enter__(self):
        self.connection = self.engine.connect()
        self.resources = SqlAlchemyResourceRepository(
            self.connection, self.registry, self.id_generator
        )
        return super().__enter__()

    def __exit__(self, *args):
        super().__exit__(*args)
        self.connection.close()

    def commit(self):
        self.connection.commit()

    def rollback(self):
        self.connection.rollback()
