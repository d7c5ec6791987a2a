"""Logging helpers for the ROA CLI.

Console output goes through Rich; an optional "flight recorder" keeps recent
records in memory at DEBUG granularity and dumps them to a file when a
WARNING or worse is logged. Records from libraries (SQLAlchemy, Alembic, ...)
get a short ``[library]`` prefix on the console.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

import alembic
import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "roa"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Set `record.prefix` to ``[top-level-logger]`` for non-ROA records.

    ROA records get an empty prefix. Never filters anything out.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == PROJECT_PREFIX or record.name.startswith(
            f"{PROJECT_PREFIX}."
        ):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.split('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler writing to stderr.

    Args:
        level: Minimum level for console output (DEBUG when `debug_mode`).
        debug_mode: Show timestamps, logger names and source paths.
        color: Enable color output.

    Returns:
        RichHandler: Handler to attach to the root logger.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    if debug_mode:
        handler.setFormatter(
            logging.Formatter(fmt="%(asctime)s %(name)s: %(message)s")
        )
    else:
        handler.setFormatter(logging.Formatter(fmt="%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Configure an in-memory buffer of log records backed by `path`.

    Args:
        path: File the buffer is written to when flushed.
        capacity: Number of records kept in memory.
        flush_level: Records at or above this level trigger a flush.
        flush_on_close: Also flush when the handler is closed.

    Returns:
        MemoryHandler: Buffering handler with a FileHandler target.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d:%(threadName)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line startup summary and DEBUG-level diagnostics.

    Args:
        logger: Logger used to emit startup messages.
        app_version: Application version string.
        level: Effective console logging level.
        handlers: Handlers attached to the root logger.
        log_path: Flight-recorder output file, or None.
        flight_recorder: Whether the flight recorder is enabled.
        logger_levels: Per-logger level overrides.
    """
    logger.info(
        "ROA %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("SQLAlchemy: %s", sqlalchemy.__version__)
    logger.debug("Alembic: %s", alembic.__version__)
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_recorder:
        logger.debug("Flight recorder: path=%s", log_path or "<none>")
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
    )
