# ------------------------------------------------------------------------------
#  Swarmfield
#  Copyright (c) 2025 Fabio Oddi
#
#  This file is part of Swarmfield, released under the BSD 3-Clause License.
#  You may use, modify, and redistribute this file according to the terms of the
#  license. Attribution is required if this code is used in other works.
# ------------------------------------------------------------------------------

"""Built-in attractor strategies."""

from __future__ import annotations

from swarmfield.configuration.plugin_registry import register_attractor_strategy
from swarmfield.util.logging_util import get_logger

logger = get_logger("attractors")


def link_peer_chain(actors: list, _fixed_point) -> None:
    """Attract actor ``i`` to actor ``i - 1``; the first actor follows the last."""
    for i, actor in enumerate(actors):
        actor.set_attractor(actors[i - 1])


def link_fixed_point(actors: list, fixed_point) -> None:
    """Attract every actor to the shared fixed point.

    The peer chain is assigned first and then replaced, so the chain never
    influences motion; only the fixed point does.
    """
    link_peer_chain(actors, fixed_point)
    for actor in actors:
        actor.set_attractor(fixed_point)
    logger.debug("Peer chain overridden by fixed point %s for %d actors", fixed_point.get_position(), len(actors))


register_attractor_strategy("peer_chain", link_peer_chain)
register_attractor_strategy("fixed_point", link_fixed_point)
