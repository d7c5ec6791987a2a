"""Load a `ResourceRegistry` from a ``module:attribute`` reference."""

import importlib

import click

from roa.domain.registry import ResourceRegistry


def load_registry(reference: str) -> ResourceRegistry:
    """Import ``package.module:attribute`` and return the registry it names.

    The attribute may be a `ResourceRegistry` or a zero-argument callable
    returning one.

    Raises:
        click.BadParameter: If the reference is malformed, cannot be imported
            or does not lead to a registry.
    """
    module_name, sep, attribute = reference.partition(":")
    if not sep or not module_name or not attribute:
        raise click.BadParameter(f"Expected MODULE:ATTRIBUTE, got {reference!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(f"Cannot import {module_name!r}: {e}") from e
    try:
        target = getattr(module, attribute)
    except AttributeError as e:
        raise click.BadParameter(f"{module_name!r} has no {attribute!r}") from e

    registry = target() if callable(target) else target
    if not isinstance(registry, ResourceRegistry):
        raise click.BadParameter(f"{reference!r} is not a ResourceRegistry")
    return registry
