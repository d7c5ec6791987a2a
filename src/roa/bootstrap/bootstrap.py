"""Bootstrap the message bus with handlers and unit of work."""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from roa import config
from roa.adapters.db.engine import make_engine
from roa.adapters.id_generators import ULIDGenerator
from roa.adapters.unit_of_work import SqlAlchemyUnitOfWork
from roa.service_layer.handlers import COMMAND_HANDLERS
from roa.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from roa.domain.registry import ResourceRegistry
    from roa.interfaces.id_generator import IdGenerator
    from roa.interfaces.unit_of_work import AbstractUnitOfWork
    from roa.service_layer.commands import Command


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    message_bus: MessageBus
    registry: ResourceRegistry


def build_write_uow(
    url: str, registry: ResourceRegistry, id_generator: IdGenerator
) -> AbstractUnitOfWork:
    """Build a new unit of work for write operations."""
    return SqlAlchemyUnitOfWork(make_engine(url), registry, id_generator)


def build_message_bus(
    uow: AbstractUnitOfWork,
    command_handlers: Mapping[type[Command], Callable[..., Any]],
    registry: ResourceRegistry,
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    dependencies = {"uow": uow, "registry": registry}
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }

    return MessageBus(
        uow,
        command_handlers=injected_command_handlers,
    )


def bootstrap(
    registry: ResourceRegistry, db_url: str | None = None
) -> AppContainer:
    """Bootstrap the message bus for `registry` against the configured database.

    Args:
        registry: Resource types served by the application.
        db_url: Database URL; defaults to ``ROA_DB_URL``.

    Raises:
        DatabaseUrlNotSetError: If no URL is given and ``ROA_DB_URL`` is unset.
    """
    uow = build_write_uow(db_url or config.get_db_url(), registry, ULIDGenerator())
    message_bus = build_message_bus(uow, COMMAND_HANDLERS, registry)

    return AppContainer(message_bus=message_bus, registry=registry)


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return lambda message: handler(message, **deps)
