"""Ports implemented by ROA adapters."""

from .id_generator import IdGenerator
from .repository import RelationLoader, ResourceRepository
from .unit_of_work import AbstractUnitOfWork

__all__ = ["AbstractUnitOfWork", "IdGenerator", "RelationLoader", "ResourceRepository"]
