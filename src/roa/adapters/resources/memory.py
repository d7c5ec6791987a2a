"""In-memory ResourceRepository implementation for testing purposes."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

from .base import ResourceRepositoryBase

if TYPE_CHECKING:
    from roa.domain.registry import ResourceRegistry
    from roa.interfaces.id_generator import IdGenerator


class InMemoryResourceRepository(ResourceRepositoryBase):
    """In-memory ResourceRepository implementation for testing purposes.

    Note: This implementation is not thread-safe and is intended
    solely for use in single-threaded test scenarios
    """

    def __init__(
        self,
        registry: ResourceRegistry,
        id_generator: IdGenerator,
        records: dict[tuple[str, str], dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(registry, id_generator)
        self.records = records if records is not None else {}

    def _load_attributes(self, resource: str, record_id: str) -> dict[str, Any] | None:
        if (attributes := self.records.get((resource, record_id))) is None:
            return None
        return copy.deepcopy(attributes)

    def _store_attributes(
        self, resource: str, record_id: str, attributes: dict[str, Any]
    ) -> bool:
        self.records[(resource, record_id)] = copy.deepcopy(attributes)
        return True
