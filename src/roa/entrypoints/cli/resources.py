"""``roa links``: print the slug links of a stored record.

Dispatches a `ViewResource` command through the message bus, so the same
access checks as the HTTP view run along the record's ancestor chain.
Links are printed to stdout as ``name<TAB>url`` lines in slug order.
"""

from __future__ import annotations

import click

from roa.bootstrap import bootstrap
from roa.domain.errors import (
    AuthorizationError,
    LinkError,
    RegistryError,
    ResourceNotFoundError,
)
from roa.service_layer.commands import ViewResource

from .db import get_checked_url
from .helpers import error, load_registry
from .helpers.params import parse_params


@click.command()
@click.argument("resource")
@click.argument("record_id")
@click.option(
    "--registry",
    "registry_ref",
    required=True,
    envvar="ROA_REGISTRY",
    show_envvar=True,
    help="Resource registry as MODULE:ATTRIBUTE (a ResourceRegistry or a factory).",
)
@click.option(
    "-p",
    "--param",
    "params",
    multiple=True,
    callback=parse_params,
    help="Request parameter passed to access checks (NAME=VALUE). Repeatable.",
)
def links(
    resource: str, record_id: str, registry_ref: str, params: dict[str, str]
) -> None:
    """Print the links of RESOURCE record RECORD_ID and of its ancestors."""
    registry = load_registry(registry_ref)
    container = bootstrap(registry, db_url=get_checked_url())
    cmd = ViewResource(resource=resource, record_id=record_id, query_params=params)
    try:
        result = container.message_bus.handle(cmd)
    except (ResourceNotFoundError, RegistryError) as e:
        error(str(e))
        raise click.exceptions.Exit(2) from e
    except AuthorizationError as e:
        error(f"Access denied: {e}")
        raise click.exceptions.Exit(3) from e
    except LinkError as e:
        error(str(e))
        raise click.exceptions.Exit(4) from e

    for name, url in result.links.items():
        click.echo(f"{name}\t{url}")
