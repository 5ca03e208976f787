# ------------------------------------------------------------------------------
#  Swarmfield
#  Copyright (c) 2025 Fabio Oddi
#
#  This file is part of Swarmfield, released under the BSD 3-Clause License.
#  You may use, modify, and redistribute this file according to the terms of the
#  license. Attribution is required if this code is used in other works.
# ------------------------------------------------------------------------------

"""Simulation: builds the obstacle ring and the actor population, then ticks it."""

from __future__ import annotations

import math
import random
from typing import Optional

import numpy as np

from swarmfield.configuration.config import Config
from swarmfield.configuration.plugin_registry import get_attractor_strategy
from swarmfield.entities import Actor, EntityFactory, StaticObstacle
from swarmfield.main.world import World
from swarmfield.util.logging_util import get_logger

logger = get_logger("simulation")


class SimulationError(RuntimeError):
    """Raised when the simulation lifecycle is used out of order."""


class Simulator:
    """Contract driven by the presentation layer."""

    def set_world(self, world: World) -> None:
        raise NotImplementedError

    def tick(self, elapsed_seconds: float) -> None:
        raise NotImplementedError


class Simulation(Simulator):
    """Owns the actors and advances them once per tick.

    Actors are updated in creation order and each one probes the *current*
    positions of the others, so actors later in the list already see the
    moves made earlier in the same tick.
    """

    def __init__(self, config: Optional[Config] = None, random_generator: Optional[random.Random] = None):
        """Initialize the instance."""
        self.config = config if config is not None else Config()
        if random_generator is None:
            seed = self.config.environment.get("random_seed")
            if seed is None:
                seed = random.SystemRandom().randrange(2**32)
                logger.info("No random_seed configured, drew %s", seed)
            random_generator = random.Random(seed)
            self.random_seed = seed
        else:
            self.random_seed = None
        self.random_generator = random_generator
        self.world: Optional[World] = None
        self.actors: list[Actor] = []
        self.statics: list[StaticObstacle] = []
        self.attractor_point: Optional[StaticObstacle] = None
        self.tick_count = 0
        self.elapsed = 0.0

        actors_cfg = self.config.actors
        self.speed = actors_cfg["base_speed"] * actors_cfg["speed_scale"]
        self.max_degrees_per_second = actors_cfg["base_turn_rate"] * actors_cfg["speed_scale"]

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------
    def set_world(self, world: World) -> None:
        """Build the topology once and report every spawned entity to ``world``.

        Nothing is committed to the simulation until every spawn callback has
        returned, so a failing ``world`` leaves it unset and retryable.
        """
        if self.world is not None:
            raise SimulationError("set_world may only be called once per simulation")
        arena = self.config.arena
        cx, cy = arena["half_extents"]

        attractor_point = EntityFactory.create_entity(
            "static_attractor", {"position": arena["attractor"]}, 0
        )
        statics = self._build_ring(cx, cy, arena["ring_size"])
        for st in statics:
            world.static_spawned(st)

        actors = self._build_actors(cx, cy, statics)
        mode = self.config.actors["attractor_mode"]
        get_attractor_strategy(mode)(actors, attractor_point)
        for i, a in enumerate(actors):
            for j, aa in enumerate(actors):
                if i != j:
                    a.add_repulsor(aa)
            a.lock_repulsors()

        for a in actors:
            world.actor_spawned(a)

        self.attractor_point = attractor_point
        self.statics = statics
        self.actors = actors
        self.world = world
        logger.info(
            "World set: %d statics, %d actors, attractor_mode=%s, seed=%s",
            len(self.statics),
            len(self.actors),
            mode,
            self.random_seed,
        )

    def _build_ring(self, cx: float, cy: float, count: int) -> list[StaticObstacle]:
        """Return ``count`` obstacles evenly spaced on a circle of radius hypot(cx, cy)."""
        radius = math.hypot(cx, cy)
        angles = np.arange(count) * (2.0 * math.pi / count)
        xs = cx + radius * np.sin(angles)
        ys = cy + radius * np.cos(angles)
        return [
            EntityFactory.create_entity("static_ring", {"position": [float(x), float(y)]}, i)
            for i, (x, y) in enumerate(zip(xs, ys))
        ]

    def _build_actors(self, cx: float, cy: float, statics: list[StaticObstacle]) -> list[Actor]:
        """Create actors at random integer positions and headings, repelled by the ring."""
        rng = self.random_generator
        field = self.config.field
        actors = []
        for i in range(self.config.actors["number"]):
            config_elem = {
                "position": [rng.randrange(int(cx * 2 + 1)), rng.randrange(int(cy * 2 + 1))],
                "heading": rng.randrange(360),
                "notice_radius": field["notice_radius"],
                "repulsion_scaling": field["repulsion_scaling"],
                "attracting_power": field["attracting_power"],
                "min_distance": field["min_distance"],
            }
            a = EntityFactory.create_entity("actor_swarm", config_elem, i)
            for st in statics:
                a.add_repulsor(st)
            actors.append(a)
        return actors

    # ------------------------------------------------------------------
    # Runtime
    # ------------------------------------------------------------------
    def tick(self, elapsed_seconds: float) -> None:
        """Advance every actor by ``elapsed_seconds``."""
        if self.world is None:
            raise SimulationError("tick called before set_world")
        if elapsed_seconds < 0:
            raise ValueError(f"elapsed_seconds must be >= 0, got {elapsed_seconds}")
        for a in self.actors:
            a.step(elapsed_seconds, self.speed, self.max_degrees_per_second)
        self.tick_count += 1
        self.elapsed += elapsed_seconds

    def positions(self) -> np.ndarray:
        """Return an (n_actors, 2) array of actor positions."""
        return np.array([a.get_position() for a in self.actors], dtype=float).reshape(-1, 2)

    def headings(self) -> np.ndarray:
        """Return an (n_actors,) array of actor headings."""
        return np.array([a.heading for a in self.actors], dtype=float)
