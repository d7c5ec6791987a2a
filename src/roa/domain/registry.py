"""Registry of resource types, keyed by resource name."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .errors import DuplicateResourceTypeError, UnknownResourceTypeError
from .resource import ResourceType


class ResourceRegistry:
    """Name → `ResourceType` lookup shared by repositories and handlers."""

    def __init__(self, resource_types: Iterable[ResourceType] = ()) -> None:
        self._types: dict[str, ResourceType] = {}
        for resource_type in resource_types:
            self.register(resource_type)

    def register(self, resource_type: ResourceType) -> ResourceType:
        """Add a resource type.

        Raises:
            DuplicateResourceTypeError: If the name is already registered.
        """
        if resource_type.name in self._types:
            raise DuplicateResourceTypeError(resource_type.name)
        self._types[resource_type.name] = resource_type
        return resource_type

    def get(self, name: str) -> ResourceType:
        """Return the resource type called `name`.

        Raises:
            UnknownResourceTypeError: If no such type is registered.
        """
        try:
            return self._types[name]
        except KeyError as e:
            raise UnknownResourceTypeError(name) from e

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __iter__(self) -> Iterator[ResourceType]:
        return iter(self._types.values())

    def __len__(self) -> int:
        return len(self._types)
