"""Simulation orchestration: world boundary, simulation and headless environment."""

from swarmfield.main.world import RecordingWorld, World
from swarmfield.main.simulation import Simulation, SimulationError, Simulator
from swarmfield.main.environment import Environment

__all__ = [
    "Environment",
    "RecordingWorld",
    "Simulation",
    "SimulationError",
    "Simulator",
    "World",
]
