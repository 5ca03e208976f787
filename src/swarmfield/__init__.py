"""
Swarmfield package entrypoint, re-exporting the main simulation components.
"""

from swarmfield.configuration import Config
from swarmfield.entities import Actor, Entity, EntityFactory, StaticObstacle
from swarmfield.main import Environment, RecordingWorld, Simulation, SimulationError, Simulator, World

__all__ = [
    "Actor",
    "Config",
    "Entity",
    "EntityFactory",
    "Environment",
    "RecordingWorld",
    "Simulation",
    "SimulationError",
    "Simulator",
    "StaticObstacle",
    "World",
]
