# ------------------------------------------------------------------------------
#  Swarmfield
#  Copyright (c) 2025 Fabio Oddi
#
#  This file is part of Swarmfield, released under the BSD 3-Clause License.
#  You may use, modify, and redistribute this file according to the terms of the
#  license. Attribution is required if this code is used in other works.
# ------------------------------------------------------------------------------

"""Entity factory helper to create actors/obstacles by type."""

from __future__ import annotations

from swarmfield.entities.agents import Actor
from swarmfield.entities.objects import StaticObstacle
from swarmfield.util.logging_util import get_logger

logger = get_logger("entity")


class EntityFactory:
    """Entity factory."""

    @staticmethod
    def create_entity(entity_type: str, config_elem: dict, _id: int = 0):
        """Create entity from type string (``actor_*`` or ``static_*``)."""
        kind = entity_type.split("_", 1)[0]
        if kind == "actor":
            entity = Actor(entity_type, config_elem, _id)
        elif kind == "static":
            entity = StaticObstacle(entity_type, config_elem, _id)
        else:
            raise ValueError(f"Invalid entity type: {entity_type}")
        logger.info("Created entity %s (id=%s)", entity.get_name(), _id)
        return entity
