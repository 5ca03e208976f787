# ------------------------------------------------------------------------------
#  Swarmfield
#  Copyright (c) 2025 Fabio Oddi
#
#  This file is part of Swarmfield, released under the BSD 3-Clause License.
#  You may use, modify, and redistribute this file according to the terms of the
#  license. Attribution is required if this code is used in other works.
# ------------------------------------------------------------------------------

"""World boundary: the sink notified once per spawned entity."""

from __future__ import annotations

from swarmfield.util.logging_util import get_logger

logger = get_logger("world")


class World:
    """Callback contract consumed by the simulation during setup.

    Implementations must return promptly; the return value is ignored.
    """

    def actor_spawned(self, actor) -> None:
        raise NotImplementedError

    def static_spawned(self, static) -> None:
        raise NotImplementedError


class RecordingWorld(World):
    """Headless world that keeps spawned entities in notification order."""

    def __init__(self):
        """Initialize the instance."""
        self.actors: list = []
        self.statics: list = []

    def actor_spawned(self, actor) -> None:
        """Record a spawned actor."""
        self.actors.append(actor)
        logger.debug("Actor spawned: %s", actor.get_name())

    def static_spawned(self, static) -> None:
        """Record a spawned static obstacle."""
        self.statics.append(static)
        logger.debug("Static spawned: %s at %s", static.get_name(), static.get_position())
