"""Resource repository adapters.

Contains an in-memory repository, suitable for tests and prototyping, and a
SQLAlchemy repository persisting records to the ``resource_records`` table.
"""

from .memory import InMemoryResourceRepository
from .sql import SqlAlchemyResourceRepository

__all__ = ["InMemoryResourceRepository", "SqlAlchemyResourceRepository"]
