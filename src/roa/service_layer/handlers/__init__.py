"""Service layer handlers."""

from collections.abc import Callable

from .resource_handlers import COMMAND_HANDLERS as RESOURCE_COMMAND_HANDLERS

__all__ = ["COMMAND_HANDLERS"]

COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    **RESOURCE_COMMAND_HANDLERS,
}
