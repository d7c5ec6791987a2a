"""Storage ports for resource records.

`RelationLoader` is the narrow contract a `ResourceNode` needs to reach its
related records. `ResourceRepository` adds lookup and persistence.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from roa.domain.resource import ResourceNode


class RelationLoader(abc.ABC):
    """Fetches related records on behalf of a node."""

    @abc.abstractmethod
    def fetch_relation(self, node: ResourceNode, name: str) -> ResourceNode | None:
        """Fetch the record related to `node` through relation `name`.

        Args:
            node: The owning record.
            name: Relation name declared by the node's type.

        Returns:
            The related record (already link-resolved), or None when the
            foreign key is unset or points at a missing record.
        """

    @abc.abstractmethod
    def is_relation_loaded(self, node: ResourceNode, name: str) -> bool:
        """Return True if relation `name` is already available on `node`."""


class ResourceRepository(RelationLoader):
    """Lookup and persistence of resource records."""

    @abc.abstractmethod
    def get(self, resource: str, record_id: Any) -> ResourceNode | None:
        """Load a record by resource name and id.

        Implementations run the post-load step on the node they build, so the
        returned record and its ancestors have resolved links.

        Args:
            resource: Registered resource type name.
            record_id: Identifier of the record.

        Returns:
            The record, or None if it does not exist.

        Raises:
            UnknownResourceTypeError: If `resource` is not registered.
            ParentNotFoundError: If a stored record points at a missing parent.
        """

    @abc.abstractmethod
    def save(self, node: ResourceNode) -> bool:
        """Validate and persist `node`, assigning an id when it has none.

        Returns:
            True on success. On failure returns False; `node.has_errors()`
            tells validation failures apart from storage failures.
        """
