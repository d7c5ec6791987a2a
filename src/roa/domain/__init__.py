"""Domain layer: resource types, nodes, the slug resolver and the registry."""

from .registry import ResourceRegistry
from .resource import Relation, ResourceNode, ResourceType
from .slug import Slug

__all__ = ["Relation", "ResourceNode", "ResourceRegistry", "ResourceType", "Slug"]
