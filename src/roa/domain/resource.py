"""Resource types and resource nodes.

A `ResourceType` is the per-type configuration of an addressable record:
its URL segment, the relation leading to its parent, the attributes that may
be bound from request parameters and the access predicate guarding it.

A `ResourceNode` is one record of a given type. It owns its attribute values,
its validation errors and a cache of populated relations. Missing relations
are fetched through the `RelationLoader` the storage layer attached to the
node. Link handling is delegated to the node's `Slug`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeAlias

from .errors import RoaError, UnknownRelationError
from .slug import Slug

if TYPE_CHECKING:
    from roa.interfaces.repository import RelationLoader

logger = logging.getLogger(__name__)

# pylint: disable=too-many-instance-attributes

DEFAULT_SCENARIO = "default"

AccessPredicate: TypeAlias = Callable[[Mapping[str, str]], None]


class UnknownScenarioError(RoaError):
    """Raised when a node is created with a scenario its type does not declare."""

    def __init__(self, resource: str, scenario: str) -> None:
        super().__init__(f"Unknown scenario '{scenario}' for '{resource}'.")
        self.resource = resource
        self.scenario = scenario


@dataclass(frozen=True, slots=True)
class Relation:
    """A to-one relation from a record to a record of another type.

    Attributes:
        target: Name of the related resource type.
        foreign_key: Attribute of the owning record holding the related id.
    """

    target: str
    foreign_key: str


@dataclass(frozen=True)
class ResourceType:
    """Immutable configuration shared by every record of one resource type.

    Conventions:
      - `name` is the URL segment of the collection (e.g. "books").
      - `base_url` is the API root used when the type has no parent
        (e.g. "/api" or "https://example.com/v1"); trailing slashes are ignored.
      - `parent_relation` must name one of `relations`.
      - `fields` are the attributes bindable in the default scenario;
        `scenarios` overrides them per scenario name.
      - `check_access` receives the request parameters and raises
        `AuthorizationError` to deny access.
    """

    name: str
    base_url: str = ""
    parent_relation: str | None = None
    id_attribute: str = "id"
    relations: Mapping[str, Relation] = field(default_factory=dict)
    fields: tuple[str, ...] = ()
    required: tuple[str, ...] = ()
    scenarios: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    check_access: AccessPredicate | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.parent_relation is not None and (
            self.parent_relation not in self.relations
        ):
            raise UnknownRelationError(self.name, self.parent_relation)

    @property
    def collection_link(self) -> str:
        """Link to the collection of a root-level type."""
        return f"{self.base_url.rstrip('/')}/{self.name}"

    def safe_attributes(self, scenario: str = DEFAULT_SCENARIO) -> tuple[str, ...]:
        """Return the attributes that may be bound in `scenario`."""
        if scenario in self.scenarios:
            return self.scenarios[scenario]
        if scenario == DEFAULT_SCENARIO:
            return self.fields
        raise UnknownScenarioError(self.name, scenario)

    def relation(self, name: str) -> Relation:
        """Return the relation called `name`.

        Raises:
            UnknownRelationError: If the type declares no such relation.
        """
        try:
            return self.relations[name]
        except KeyError as e:
            raise UnknownRelationError(self.name, name) from e


class ResourceNode:
    """One addressable record and its slug.

    Args:
        resource_type: Configuration of the record's type.
        attributes: Initial attribute values (e.g. a stored row).
        scenario: Binding scenario used by `load`.
        loader: Collaborator used to fetch relations that are not populated.
    """

    def __init__(
        self,
        resource_type: ResourceType,
        attributes: Mapping[str, Any] | None = None,
        *,
        scenario: str = DEFAULT_SCENARIO,
        loader: RelationLoader | None = None,
    ) -> None:
        self.resource_type = resource_type
        self.attributes: dict[str, Any] = dict(attributes or {})
        self.scenario = scenario
        self.loader = loader
        self.errors: dict[str, list[str]] = {}
        self._safe_attributes = resource_type.safe_attributes(scenario)
        self._relations: dict[str, ResourceNode | None] = {}
        self.slug = Slug(self)
        self.slug.ensure()

    def __repr__(self) -> str:
        return f"ResourceNode({self.resource_type.name!r}, id={self.id!r})"

    @property
    def id(self) -> Any:
        """Value of the type's identifier attribute, None until assigned."""
        return self.attributes.get(self.resource_type.id_attribute)

    # --- binding & validation ---

    def load(self, data: Mapping[str, Any]) -> bool:
        """Bind the safe attributes found in `data`.

        Rebinding a relation's foreign key to a new value drops the cached
        related record; when that relation is the parent, the slug goes
        back to unresolved.

        Returns:
            False when `data` is empty, True otherwise.
        """
        if not data:
            return False
        for name, value in data.items():
            if name not in self._safe_attributes:
                logger.debug(
                    "Skipping unsafe attribute %r for %s", name, self.resource_type.name
                )
                continue
            if name in self.attributes and self.attributes[name] != value:
                self._forget_relations_keyed_by(name)
            self.attributes[name] = value
        return True

    def _forget_relations_keyed_by(self, foreign_key: str) -> None:
        for name, relation in self.resource_type.relations.items():
            if relation.foreign_key != foreign_key:
                continue
            self._relations.pop(name, None)
            if name == self.resource_type.parent_relation:
                logger.debug(
                    "Parent key %r of %s changed; link unresolved",
                    foreign_key,
                    self.resource_type.name,
                )
                self.slug.reset()

    def validate(self) -> bool:
        """Check required attributes, replacing any previous errors."""
        self.errors = {}
        for name in self.resource_type.required:
            if self.attributes.get(name) in (None, ""):
                self.add_error(name, f"{name} cannot be blank.")
        return not self.errors

    def add_error(self, attribute: str, message: str) -> None:
        """Record a validation error for `attribute`."""
        self.errors.setdefault(attribute, []).append(message)

    def has_errors(self) -> bool:
        """Return True if the last validation or save recorded errors."""
        return bool(self.errors)

    # --- relations ---

    def is_relation_populated(self, name: str) -> bool:
        """Return True if relation `name` is already cached on this node."""
        return name in self._relations

    def populate_relation(self, name: str, node: ResourceNode | None) -> None:
        """Cache `node` as the related record for relation `name`."""
        self.resource_type.relation(name)
        self._relations[name] = node

    def get_relation(self, name: str) -> ResourceNode | None:
        """Return the related record, fetching and caching it when needed."""
        if name not in self._relations:
            self.resource_type.relation(name)
            related = (
                self.loader.fetch_relation(self, name)
                if self.loader is not None
                else None
            )
            self._relations[name] = related
        return self._relations[name]

    # --- links & access ---

    @property
    def resource_link(self) -> str | None:
        """Link to the collection holding this record, None until resolved."""
        return self.slug.resource_link

    @property
    def self_link(self) -> str:
        """Link to this record."""
        return self.slug.self_link

    def slug_links(self) -> dict[str, str]:
        """Links to this record, its collection and every ancestor."""
        return self.slug.slug_links()

    def check_access(self, params: Mapping[str, str]) -> None:
        """Run the access predicates of this record and its ancestors."""
        self.slug.check_access(params)
