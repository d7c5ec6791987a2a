"""Module defining Commands."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from roa.domain.resource import DEFAULT_SCENARIO


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class CreateResource(Command):
    """Command to create a record of a registered resource type.

    `query_params` carry route/query values (e.g. the parent's foreign key)
    and are bound before the access check; `body_params` are bound after it.
    """

    resource: str
    query_params: Mapping[str, Any] = field(default_factory=dict)
    body_params: Mapping[str, Any] = field(default_factory=dict)
    scenario: str = DEFAULT_SCENARIO


@dataclass(frozen=True)
class ViewResource(Command):
    """Command to fetch a record together with its slug links."""

    resource: str
    record_id: str
    query_params: Mapping[str, Any] = field(default_factory=dict)
