# ------------------------------------------------------------------------------
#  Swarmfield
#  Copyright (c) 2025 Fabio Oddi
#
#  This file is part of Swarmfield, released under the BSD 3-Clause License.
#  You may use, modify, and redistribute this file according to the terms of the
#  license. Attribution is required if this code is used in other works.
# ------------------------------------------------------------------------------

"""Movable actor steered by the superposed attraction/repulsion field."""

from __future__ import annotations

from typing import Optional

from swarmfield.entities.base import Entity
from swarmfield.models.fields import (
    ATTRACTING_POWER,
    MIN_DISTANCE,
    NOTICE_RADIUS,
    REPULSION_SCALING,
    attraction_field,
    repulsion_field,
)
from swarmfield.models.utility_functions import (
    angle_between,
    clamp_turn,
    heading_to_vector,
    vector_to_heading,
)
from swarmfield.util.logging_util import get_logger

logger = get_logger("actor")


class Actor(Entity):
    """Movable emitter with a heading, one attractor and a list of repulsors.

    ``heading`` is never wrapped after a turn; ``target_heading`` is always in
    [0, 360). Repulsors are appended during setup and frozen with
    ``lock_repulsors()`` before the first tick.
    """

    def __init__(self, entity_type: str, config_elem: dict, _id: int = 0):
        """Initialize the instance."""
        super().__init__(entity_type, config_elem, _id)
        position = config_elem.get("position", (0.0, 0.0))
        self.position = (float(position[0]), float(position[1]))
        self.heading = float(config_elem.get("heading", 0.0))
        self.target_heading = 0.0
        self.notice_radius = float(config_elem.get("notice_radius", NOTICE_RADIUS))
        self.repulsion_scaling = float(config_elem.get("repulsion_scaling", REPULSION_SCALING))
        self.attracting_power = float(config_elem.get("attracting_power", ATTRACTING_POWER))
        self.min_distance = float(config_elem.get("min_distance", MIN_DISTANCE))
        self._attractor: Optional[Entity] = None
        self._repulsors: list[Entity] = []
        self._repulsors_locked = False

    # ------------------------------------------------------------------
    # Relationships
    # ------------------------------------------------------------------
    def set_attractor(self, emitter: Entity):
        """Set the attractor, replacing any previous one."""
        self._attractor = emitter

    def get_attractor(self) -> Optional[Entity]:
        """Return the attractor."""
        return self._attractor

    def add_repulsor(self, emitter: Entity):
        """Append a repulsor."""
        if self._repulsors_locked:
            raise RuntimeError(f"{self.get_name()} repulsors are locked")
        self._repulsors.append(emitter)

    def lock_repulsors(self):
        """Freeze the repulsor list."""
        self._repulsors_locked = True

    def get_repulsors(self) -> tuple[Entity, ...]:
        """Return the repulsors in insertion order."""
        return tuple(self._repulsors)

    # ------------------------------------------------------------------
    # Steering
    # ------------------------------------------------------------------
    def net_force(self) -> tuple[float, float]:
        """Return attraction plus every repulsion, probed at the current position."""
        if self._attractor is None:
            raise RuntimeError(f"{self.get_name()} has no attractor")
        fx, fy = attraction_field(
            self._attractor.get_position(),
            self.position,
            power=self.attracting_power,
            min_distance=self.min_distance,
        )
        for r in self._repulsors:
            rfx, rfy = repulsion_field(
                r.get_position(),
                self.position,
                notice_radius=self.notice_radius,
                scaling=self.repulsion_scaling,
                min_distance=self.min_distance,
            )
            fx += rfx
            fy += rfy
        return fx, fy

    def plan_ahead(self) -> float:
        """Recompute and return the target heading."""
        self.target_heading = vector_to_heading(*self.net_force())
        return self.target_heading

    def steer(self, dt: float, max_degrees_per_second: float) -> float:
        """Turn toward the target heading by at most the allowed amount; return the turn."""
        delta = clamp_turn(angle_between(self.heading, self.target_heading), max_degrees_per_second * dt)
        self.heading += delta
        return delta

    def advance(self, distance: float):
        """Move ``distance`` units along the current heading."""
        dx, dy = heading_to_vector(self.heading)
        self.position = (self.position[0] + dx * distance, self.position[1] + dy * distance)

    def step(self, dt: float, speed: float, max_degrees_per_second: float):
        """Plan, turn and move for one tick of ``dt`` seconds."""
        self.plan_ahead()
        delta = self.steer(dt, max_degrees_per_second)
        self.advance(speed * dt)
        logger.debug(
            "%s step target=%.2f turn=%.2f heading=%.2f position=(%.3f, %.3f)",
            self.get_name(),
            self.target_heading,
            delta,
            self.heading,
            self.position[0],
            self.position[1],
        )

    def to_dict(self) -> dict:
        """Serialize the actor state."""
        attractor = self._attractor.get_name() if self._attractor is not None else None
        return {
            "name": self.get_name(),
            "position": {"x": self.position[0], "y": self.position[1]},
            "heading": self.heading,
            "target_heading": self.target_heading,
            "attractor": attractor,
            "repulsors": len(self._repulsors),
        }
