"""Slug resolution for parent-aware resource links.

A record's collection link is derived from its parent's self link when the
record's type declares a parent relation, and from the type's base URL
otherwise::

    /api/books                 collection of a root type
    /api/books/5               self link of book 5
    /api/books/5/chapters      collection of chapters under book 5
    /api/books/5/chapters/2    self link of chapter 2

Resolution happens when the slug is created (root types, or an already
populated parent) and when it is forced (post-load step, `slug_links`,
`check_access`). Once resolved the link is cached until the next forced
resolution.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .errors import ParentNotFoundError, UnresolvedLinkError

if TYPE_CHECKING:
    from .resource import ResourceNode

logger = logging.getLogger(__name__)


class Slug:
    """Link resolver owned by a single `ResourceNode`."""

    def __init__(self, node: ResourceNode) -> None:
        self._node = node
        self._resource_link: str | None = None
        self._parent: ResourceNode | None = None

    @property
    def parent(self) -> ResourceNode | None:
        """Parent record bound by the last resolution, if any."""
        return self._parent

    @property
    def is_resolved(self) -> bool:
        """True once a resource link has been computed."""
        return self._resource_link is not None

    def ensure(self, force: bool = False) -> None:
        """Resolve the resource link if it can be resolved.

        Args:
            force: Fetch the parent through its relation even when the
                relation is not populated yet.

        Raises:
            ParentNotFoundError: If the parent lookup finds no record.
        """
        resource_type = self._node.resource_type
        if resource_type.parent_relation is None:
            self._resource_link = resource_type.collection_link
        elif force or self._is_parent_loaded(resource_type.parent_relation):
            self._populate_parent(resource_type.parent_relation)

    def reset(self) -> None:
        """Forget the resolved link and parent; the next `ensure` resolves again."""
        self._resource_link = None
        self._parent = None

    def _is_parent_loaded(self, relation: str) -> bool:
        loader = self._node.loader
        if loader is None:
            return self._node.is_relation_populated(relation)
        return loader.is_relation_loaded(self._node, relation)

    def _populate_parent(self, relation: str) -> None:
        parent = self._node.get_relation(relation)
        if parent is None:
            raise ParentNotFoundError(self._node.resource_type.name, relation)
        if not parent.slug.is_resolved:
            parent.slug.ensure(force=True)
        self._parent = parent
        self._resource_link = f"{parent.self_link}/{self._node.resource_type.name}"
        logger.debug(
            "Resolved %s link %s via parent %r",
            self._node.resource_type.name,
            self._resource_link,
            relation,
        )

    @property
    def record_id(self) -> Any:
        """Value of the owner's identifier attribute."""
        return self._node.id

    @property
    def resource_link(self) -> str | None:
        """Link to the resource list, None until resolved."""
        return self._resource_link

    @property
    def self_link(self) -> str:
        """Link to the owner record.

        Raises:
            UnresolvedLinkError: If no resolution has happened yet.
        """
        if self._resource_link is None:
            raise UnresolvedLinkError(self._node.resource_type.name)
        record_id = self.record_id
        return f"{self._resource_link}/{'' if record_id is None else record_id}"

    def slug_links(self) -> dict[str, str]:
        """Return the owner's links followed by every ancestor's links.

        The owner contributes ``self`` and ``<name>_list``. Each ancestor
        contributes its ``self`` link renamed ``parent_<relation>`` followed
        by its own ``_list`` entry, nearest ancestor first. When two levels
        produce the same key the nearer level keeps it.
        """
        self.ensure(force=True)
        resource_type = self._node.resource_type
        links = {
            "self": self.self_link,
            f"{resource_type.name}_list": self._resource_link,
        }
        if self._parent is None:
            return links  # type: ignore[return-value]

        parent_links = self._parent.slug.slug_links()
        links.setdefault(
            f"parent_{resource_type.parent_relation}", parent_links.pop("self")
        )
        for key, value in parent_links.items():
            links.setdefault(key, value)
        return links  # type: ignore[return-value]

    def check_access(self, params: Mapping[str, str]) -> None:
        """Check access to the owner, then to each ancestor.

        Every level runs its own type's predicate with the same `params`.
        The first predicate that raises aborts the chain.

        Raises:
            AuthorizationError: If any predicate denies access.
            ParentNotFoundError: If a parent record is missing.
        """
        self.ensure(force=True)
        predicate = self._node.resource_type.check_access
        if predicate is not None:
            predicate(params)
        if self._parent is not None:
            self._parent.slug.check_access(params)
