"""Handlers for the resource actions (create, view)."""

import logging
from collections.abc import Callable

from roa.domain.errors import ResourceNotFoundError
from roa.domain.registry import ResourceRegistry
from roa.domain.resource import ResourceNode
from roa.interfaces.unit_of_work import AbstractUnitOfWork
from roa.service_layer import commands
from roa.service_layer.errors import UnknownPersistenceFailure
from roa.service_layer.results import ActionResult

logger = logging.getLogger(__name__)


def create_resource(
    cmd: commands.CreateResource,
    uow: AbstractUnitOfWork,
    registry: ResourceRegistry,
) -> ActionResult:
    """Create a record: bind query params, check access, bind body, save.

    Access is checked after the first bind so predicates and the parent
    lookup can use route/query values, and before any body value is bound
    or anything is persisted. If the body rebinds the parent key, the
    chain is checked again against the new parent before saving.

    Returns:
        201 with a ``Location`` header on success, 422 with the validation
        errors when the record is invalid.

    Raises:
        AuthorizationError: If the record or one of its ancestors denies access.
        ParentNotFoundError: If the parent named by the params is missing.
        UnknownPersistenceFailure: If the save fails without validation errors.
    """
    resource_type = registry.get(cmd.resource)

    with uow:
        node = ResourceNode(resource_type, scenario=cmd.scenario, loader=uow.resources)
        node.load(cmd.query_params)
        node.check_access(cmd.query_params)
        node.load(cmd.body_params)
        if not node.slug.is_resolved:
            # the body moved the record under another parent
            node.check_access(cmd.query_params)

        if uow.resources.save(node):
            uow.commit()
            location = node.self_link
            logger.info("Created %s at %s", resource_type.name, location)
            return ActionResult(
                status_code=201, resource=node, headers={"Location": location}
            )

        if not node.has_errors():
            raise UnknownPersistenceFailure(resource_type.name)

    return ActionResult(status_code=422, resource=node, errors=dict(node.errors))


def view_resource(
    cmd: commands.ViewResource,
    uow: AbstractUnitOfWork,
) -> ActionResult:
    """Fetch a record, check access along its chain and collect its links.

    Raises:
        ResourceNotFoundError: If the record does not exist.
        AuthorizationError: If the record or one of its ancestors denies access.
    """
    with uow:
        node = uow.resources.get(cmd.resource, cmd.record_id)
        if node is None:
            raise ResourceNotFoundError(cmd.resource, cmd.record_id)
        node.check_access(cmd.query_params)
        links = node.slug_links()

    return ActionResult(status_code=200, resource=node, links=links)


COMMAND_HANDLERS: dict[type, Callable[..., ActionResult]] = {
    commands.CreateResource: create_resource,
    commands.ViewResource: view_resource,
}
