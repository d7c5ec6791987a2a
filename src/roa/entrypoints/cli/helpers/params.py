"""Click callback for repeatable ``-p NAME=VALUE`` request parameters.

Each occurrence of the option is one pair; values are taken verbatim after
the first ``=`` and may contain spaces, commas or further ``=`` signs.
"""

import click


def split_pair(item: str) -> tuple[str, str]:
    """Split ``NAME=VALUE`` on the first ``=``, stripping the name.

    Raises:
        click.BadParameter: If there is no ``=`` or the name is empty.
    """
    name, sep, value = item.partition("=")
    if not sep:
        raise click.BadParameter(f"Expected NAME=VALUE, got {item!r}")
    if not (name := name.strip()):
        raise click.BadParameter(f"Missing name in {item!r}")
    return name, value


def parse_params(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: tuple[str, ...] | None,
) -> dict[str, str]:
    """Collect repeated NAME=VALUE options into a dict; later names win."""
    return dict(split_pair(item) for item in value or ())
