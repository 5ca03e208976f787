# ------------------------------------------------------------------------------
#  Swarmfield
#  Copyright (c) 2025 Fabio Oddi
#
#  This file is part of Swarmfield, released under the BSD 3-Clause License.
#  You may use, modify, and redistribute this file according to the terms of the
#  license. Attribution is required if this code is used in other works.
# ------------------------------------------------------------------------------

"""Static obstacle."""

from __future__ import annotations

from swarmfield.entities.base import Entity


class StaticObstacle(Entity):
    """Immovable position-only emitter."""

    def __init__(self, entity_type: str, config_elem: dict, _id: int = 0):
        """Initialize the instance."""
        super().__init__(entity_type, config_elem, _id)
        position = config_elem.get("position")
        if position is None or len(position) != 2:
            raise ValueError(f"{self.get_name()} requires an [x, y] position")
        self._position = (float(position[0]), float(position[1]))

    @property
    def position(self) -> tuple[float, float]:
        """Return the fixed position."""
        return self._position
