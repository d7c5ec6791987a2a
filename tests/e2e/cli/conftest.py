"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` command that emits log messages, fixtures to
register it, a CliRunner with an isolated filesystem, and a migrated SQLite
database seeded with the sample books → chapters → pages records.
"""

import logging

import click
import pytest
from click.testing import CliRunner
from sqlalchemy import insert

from roa.adapters.resources.schema import resource_records
from roa.entrypoints.cli.main import roa
from tests.fixtures.resources import SEED_RECORDS

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit representative log messages for CLI/flight-recorder tests."""
    logger = logging.getLogger("roa.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and its internal sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command on `roa` for the duration of a test."""
    roa.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(roa, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside the runner's isolated filesystem."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def seeded_db_url(sqlite_engine_file, sqlite_url, monkeypatch) -> str:
    """Migrated SQLite database holding SEED_RECORDS, exported as ROA_DB_URL."""
    with sqlite_engine_file.begin() as cxn:
        cxn.execute(
            insert(resource_records),
            [
                {"kind": kind, "record_id": record_id, "attributes": attributes}
                for (kind, record_id), attributes in SEED_RECORDS.items()
            ],
        )
    monkeypatch.setenv("ROA_DB_URL", sqlite_url)
    return sqlite_url
