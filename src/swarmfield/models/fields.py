# ------------------------------------------------------------------------------
#  Swarmfield
#  Copyright (c) 2025 Fabio Oddi
#
#  This file is part of Swarmfield, released under the BSD 3-Clause License.
#  You may use, modify, and redistribute this file according to the terms of the
#  license. Attribution is required if this code is used in other works.
# ------------------------------------------------------------------------------

"""
Force fields probed by actors.

Both fields take the position of the emitting source and the position being
probed and return a 2D force vector ``(fx, fy)``:

- repulsion pushes the probe away from the source, fades to zero at the
  notice radius and contributes nothing beyond it;
- attraction pulls the probe toward the source with an inverse-distance scale.

A probe sitting on its source (distance <= ``min_distance``) receives no force
from that source.
"""

from __future__ import annotations

import math

from swarmfield.util.logging_util import get_logger

logger = get_logger("fields")

NOTICE_RADIUS = 150.0
REPULSION_SCALING = 0.2
ATTRACTING_POWER = 10.0
MIN_DISTANCE = 1e-9

Point = tuple[float, float]


def repulsion_field(
    source: Point,
    probe: Point,
    notice_radius: float = NOTICE_RADIUS,
    scaling: float = REPULSION_SCALING,
    min_distance: float = MIN_DISTANCE,
) -> Point:
    """Return the force pushing ``probe`` away from ``source``."""
    dx = probe[0] - source[0]
    dy = probe[1] - source[1]
    distance = math.hypot(dx, dy)
    if distance > notice_radius:
        return 0.0, 0.0
    if distance <= min_distance:
        logger.debug("Repulsion source coincides with probe at %s", probe)
        return 0.0, 0.0
    scalar_norm = (notice_radius / distance - 1) * scaling
    return dx * scalar_norm, dy * scalar_norm


def attraction_field(
    source: Point,
    probe: Point,
    power: float = ATTRACTING_POWER,
    min_distance: float = MIN_DISTANCE,
) -> Point:
    """Return the force pulling ``probe`` toward ``source``."""
    dx = source[0] - probe[0]
    dy = source[1] - probe[1]
    distance = math.hypot(dx, dy)
    if distance <= min_distance:
        logger.debug("Attraction source coincides with probe at %s", probe)
        return 0.0, 0.0
    scalar_norm = power / distance
    return dx * scalar_norm, dy * scalar_norm
