# ------------------------------------------------------------------------------
#  Swarmfield
#  Copyright (c) 2025 Fabio Oddi
#
#  This file is part of Swarmfield, released under the BSD 3-Clause License.
#  You may use, modify, and redistribute this file according to the terms of the
#  license. Attribution is required if this code is used in other works.
# ------------------------------------------------------------------------------

"""Heading helpers. Headings are compass degrees: 0 is up, clockwise positive."""

from __future__ import annotations

import math


def normalize_heading(angle: float) -> float:
    """Wrap ``angle`` into [0, 360)."""
    while angle < 0:
        angle += 360
    while angle >= 360:
        angle -= 360
    return angle


def angle_between(a1: float, a2: float) -> float:
    """Return the signed shortest turn from ``a1`` to ``a2`` in (-180, 180]."""
    res = a2 - a1 + 180
    while res > 360:
        res -= 360
    while res <= 0:
        res += 360
    return res - 180


def clamp_turn(delta: float, max_delta: float) -> float:
    """Clamp ``delta`` into [-max_delta, max_delta]."""
    if delta > max_delta:
        return max_delta
    if delta < -max_delta:
        return -max_delta
    return delta


def vector_to_heading(fx: float, fy: float) -> float:
    """Convert a force vector into a compass heading in [0, 360)."""
    return normalize_heading(math.degrees(math.atan2(fy, fx)) + 90)


def heading_to_vector(heading: float) -> tuple[float, float]:
    """Return the unit step for ``heading``; 0 degrees moves toward -y."""
    rad = math.radians(heading)
    return math.sin(rad), -math.cos(rad)
