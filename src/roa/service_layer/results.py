"""Results returned by action handlers to the transport boundary."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roa.domain.resource import ResourceNode


@dataclass(frozen=True)
class ActionResult:
    """Outcome of an action, ready to be rendered as an HTTP response.

    Attributes:
        status_code: HTTP status to answer with.
        resource: The record the action worked on.
        headers: Response headers (e.g. ``Location`` after a create).
        links: Slug links of `resource`, when the action exposes them.
        errors: Validation errors keyed by attribute.
    """

    status_code: int
    resource: ResourceNode
    headers: dict[str, str] = field(default_factory=dict)
    links: dict[str, str] = field(default_factory=dict)
    errors: dict[str, list[str]] = field(default_factory=dict)
