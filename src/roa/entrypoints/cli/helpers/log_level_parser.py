"""Click callback for repeatable ``NAME=LEVEL`` logger-level options.

Levels may be given by repeating the option or as a single comma/space
separated string (as read from an environment variable).
"""

import logging
import re

import click

from .params import split_pair

DEFAULT_LIB_LEVELS = {"sqlalchemy": logging.WARNING, "alembic": logging.WARNING}


def _normalize_items(value: str | list[str] | tuple[str, ...] | None) -> list[str]:
    """Split the option value(s) on commas and whitespace, dropping empties."""
    if value is None:
        return []
    values = [value] if isinstance(value, str) else list(value)
    items: list[str] = []
    for v in values:
        items.extend(s for s in re.split(r"[,\s]+", v) if s)
    return items


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Parse NAME=LEVEL pairs into a logger-name → numeric-level dict.

    Starts from DEFAULT_LIB_LEVELS; later pairs override earlier ones.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        name, level_str = split_pair(item)
        level_str = level_str.strip()
        if not isinstance(lvl := getattr(logging, level_str.upper(), None), int):
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name] = lvl
    return levels
