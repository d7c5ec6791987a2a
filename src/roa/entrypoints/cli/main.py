"""ROA CLI entry point.

Defines the top-level ``roa`` command (via Click-Extra), configures logging
from its options and registers the subcommands:

- ``roa db``: forward-only database management (upgrade/current/heads/history/status).
- ``roa links``: print a stored record's slug links.

Examples
    $ roa --version
    $ roa db upgrade
    $ roa links chapters 2 --registry myapp.resources:REGISTRY
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from roa import __version__
from roa.logging import config_console_handler, config_flight_recorder, log_startup

from .db import db as db_group
from .helpers.log_level_parser import parse_log_level
from .resources import links as links_command

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """ROA command-line interface.

    Manage the resource store and inspect the hierarchical links of stored
    records: every record's link is built from its parent's, and access
    checks cascade from a record up to its root.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Increase the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Decrease the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (DEBUG console output with logger names and paths).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path of the flight-recorder log file.",
    default=Path(user_log_dir("roa", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="ROA_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last log records at DEBUG granularity in memory and write them "
        "to --log-path when a WARNING/ERROR occurs (or on exit with --force-flush)."
    ),
    default=True,
    envvar="ROA_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush",
    is_flag=True,
    help="Always write the flight-recorder buffer to --log-path on exit.",
    default=False,
    envvar="ROA_FORCE_FLUSH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set the minimum level of specific loggers (NAME=LEVEL). Repeatable "
        "(e.g. -L sqlalchemy=INFO -L alembic=WARNING) or via ROA_LOGGER_LEVELS."
    ),
    default=("sqlalchemy=WARNING", "alembic=WARNING"),
    envvar="ROA_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def roa(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """ROA command-line interface."""

    # 0) effective console verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) console + optional flight recorder
    handlers: list[Handler] = [
        config_console_handler(
            level=level, debug_mode=debug, color=ctx.color is not False
        )
    ]
    if flight_recorder:
        handlers.append(
            config_flight_recorder(path=log_path, flush_on_close=force_flush)
        )

    # 2) root logger captures everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 3) per-logger overrides
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path if flight_recorder else None,
        flight_recorder=flight_recorder,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


roa.add_command(db_group)
roa.add_command(links_command)
