"""Pytest fixtures for all tests."""

import pytest

from config import SimulationConfig
from navigation.heading import Heading
from navigation.plateau import Plateau
from navigation.rover import Rover


@pytest.fixture(autouse=True)
def fresh_logger(monkeypatch):
    """Each test starts without a process logger."""
    monkeypatch.setattr("internal.logging._logger", None)


@pytest.fixture
def plateau():
    """Create the 5x5 test plateau."""
    return Plateau(5, 5)


@pytest.fixture
def rover(plateau):
    """Create a rover at the origin facing north."""
    return Rover(0, 0, Heading.NORTH, plateau)


@pytest.fixture
def sim_config():
    """Create test simulation config."""
    return SimulationConfig(plateau_max_x=7, plateau_max_y=3)
