# ------------------------------------------------------------------------------
#  Swarmfield
#  Copyright (c) 2025 Fabio Oddi
#
#  This file is part of Swarmfield, released under the BSD 3-Clause License.
#  You may use, modify, and redistribute this file according to the terms of the
#  license. Attribution is required if this code is used in other works.
# ------------------------------------------------------------------------------

"""Environment: headless fixed-step driver for a simulation run."""
from __future__ import annotations

import psutil, time
from typing import Optional

from swarmfield.configuration.config import Config
from swarmfield.main.simulation import Simulation
from swarmfield.main.world import RecordingWorld, World
from swarmfield.util.logging_util import get_logger

logger = get_logger("environment")


class Environment:
    """Run ``time_limit`` simulated seconds at ``ticks_per_second``."""

    def __init__(self, config_elem: Config, world: Optional[World] = None):
        """Initialize the instance."""
        self.config = config_elem
        self.world = world if world is not None else RecordingWorld()
        self.ticks_per_second = int(config_elem.environment["ticks_per_second"])
        self.time_limit = float(config_elem.environment["time_limit"])
        self.simulation: Optional[Simulation] = None

    @property
    def ticks_limit(self) -> int:
        """Return the number of ticks in a run."""
        return int(round(self.time_limit * self.ticks_per_second))

    def start(self) -> Simulation:
        """Build the simulation, run every tick and return it."""
        self.simulation = Simulation(self.config)
        self.simulation.set_world(self.world)
        dt = 1.0 / self.ticks_per_second
        logger.info(
            "Running %d ticks (dt=%.5f s, time_limit=%s s)", self.ticks_limit, dt, self.time_limit
        )
        wall_start = time.perf_counter()
        for tick in range(1, self.ticks_limit + 1):
            self.simulation.tick(dt)
            if tick % self.ticks_per_second == 0:
                logger.info(
                    "t=%.1fs centroid=%s",
                    self.simulation.elapsed,
                    self.simulation.positions().mean(axis=0).round(2).tolist(),
                )
        self._log_resource_usage(time.perf_counter() - wall_start)
        return self.simulation

    def _log_resource_usage(self, wall_seconds: float):
        """Log run duration and this process' CPU time and memory."""
        proc = psutil.Process()
        cpu = proc.cpu_times()
        rss_mb = proc.memory_info().rss / (1024 * 1024)
        logger.info(
            "Run finished: %d ticks in %.3f s wall, cpu user=%.3f s system=%.3f s, rss=%.1f MiB",
            self.simulation.tick_count if self.simulation else 0,
            wall_seconds,
            cpu.user,
            cpu.system,
            rss_mb,
        )
