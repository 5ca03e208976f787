"""Entities: the emitter base class, actors, static obstacles and their factory."""

from swarmfield.entities.base import Entity
from swarmfield.entities.agents import Actor
from swarmfield.entities.objects import StaticObstacle
from swarmfield.entities.entity_factory import EntityFactory

__all__ = [
    "Actor",
    "Entity",
    "EntityFactory",
    "StaticObstacle",
]
