"""Shared fixtures for the simulation tests."""

import pytest

from swarmfield.configuration.config import Config
from swarmfield.main.simulation import Simulation
from swarmfield.main.world import RecordingWorld


@pytest.fixture
def default_config() -> Config:
    """Configuration with every default and a fixed seed."""
    return Config(new_data={"environment": {"random_seed": 1234}})


@pytest.fixture
def crowded_config() -> Config:
    """Small arena so actors start inside each other's notice radius."""
    return Config(
        new_data={
            "environment": {
                "random_seed": 99,
                "arena": {"half_extents": [60, 40], "attractor": [60, 50], "ring_size": 24},
            }
        }
    )


@pytest.fixture
def world() -> RecordingWorld:
    return RecordingWorld()


@pytest.fixture
def simulation(default_config: Config, world: RecordingWorld) -> Simulation:
    """Simulation whose world is already set."""
    sim = Simulation(default_config)
    sim.set_world(world)
    return sim
