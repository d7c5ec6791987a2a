"""Pytest fixtures for service layer handler unit tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import pytest

from .fakes import bootstrap_test_bus

if TYPE_CHECKING:
    from roa.service_layer.messagebus import MessageBus

# pylint: disable=redefined-outer-name


@pytest.fixture
def bus_params():
    """Default bus parameters. Tests can override this fixture"""
    return {}


@pytest.fixture
def make_test_bus(registry, bus_params) -> Callable[..., MessageBus]:
    """Factory to create a message bus with an in-memory UoW for testing.

    Keyword arguments override `bus_params` (e.g. a custom `registry`).
    """

    def _make(**overrides):
        params = {"registry": registry, **bus_params, **overrides}
        return bootstrap_test_bus(**params)

    return _make
