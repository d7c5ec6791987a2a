"""Shared mechanics for resource repositories: get, relations, save."""

from __future__ import annotations

import abc
import logging
from typing import TYPE_CHECKING, Any

from roa.domain.errors import ParentCycleError
from roa.domain.resource import ResourceNode
from roa.interfaces.repository import ResourceRepository

if TYPE_CHECKING:
    from roa.domain.registry import ResourceRegistry
    from roa.interfaces.id_generator import IdGenerator

logger = logging.getLogger(__name__)


class ResourceRepositoryBase(ResourceRepository):
    """Builds nodes from stored attributes and runs their post-load step.

    Subclasses only move attribute mappings in and out of storage.
    Relations are followed through the foreign keys declared by each
    resource type and loaded with `get`, so a loaded record arrives with
    its whole ancestor chain resolved; a chain that loops back on a record
    still being loaded raises `ParentCycleError`.
    """

    def __init__(self, registry: ResourceRegistry, id_generator: IdGenerator) -> None:
        self.registry = registry
        self.id_generator = id_generator
        self._loading: set[tuple[str, str]] = set()

    def get(self, resource: str, record_id: Any) -> ResourceNode | None:
        resource_type = self.registry.get(resource)
        key = (resource, str(record_id))
        if key in self._loading:
            raise ParentCycleError(resource, record_id)
        attributes = self._load_attributes(*key)
        if attributes is None:
            logger.debug("No %s record with id %s", resource, record_id)
            return None
        node = ResourceNode(resource_type, attributes, loader=self)
        self._loading.add(key)
        try:
            self._after_load(node)
        finally:
            self._loading.discard(key)
        return node

    @staticmethod
    def _after_load(node: ResourceNode) -> None:
        node.slug.ensure(force=True)

    def fetch_relation(self, node: ResourceNode, name: str) -> ResourceNode | None:
        relation = node.resource_type.relation(name)
        foreign_id = node.attributes.get(relation.foreign_key)
        if foreign_id in (None, ""):
            return None
        logger.debug(
            "Fetching %s.%s -> %s (%s)",
            node.resource_type.name,
            name,
            relation.target,
            foreign_id,
        )
        return self.get(relation.target, foreign_id)

    def is_relation_loaded(self, node: ResourceNode, name: str) -> bool:
        return node.is_relation_populated(name)

    def save(self, node: ResourceNode) -> bool:
        resource_type = node.resource_type
        if not node.validate():
            logger.info(
                "Validation failed for %s: %s", resource_type.name, sorted(node.errors)
            )
            return False

        assigned = node.id is None
        if assigned:
            node.attributes[resource_type.id_attribute] = self.id_generator.new_id()

        if not self._store_attributes(
            resource_type.name, str(node.id), dict(node.attributes)
        ):
            if assigned:
                del node.attributes[resource_type.id_attribute]
            return False
        logger.debug("Saved %s (%s)", resource_type.name, node.id)
        return True

    @abc.abstractmethod
    def _load_attributes(self, resource: str, record_id: str) -> dict[str, Any] | None:
        """Return the stored attributes of a record, or None if absent."""

    @abc.abstractmethod
    def _store_attributes(
        self, resource: str, record_id: str, attributes: dict[str, Any]
    ) -> bool:
        """Insert or replace the attributes of a record; False on storage failure."""
