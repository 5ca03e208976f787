# ------------------------------------------------------------------------------
#  Swarmfield
#  Copyright (c) 2025 Fabio Oddi
#
#  This file is part of Swarmfield, released under the BSD 3-Clause License.
#  You may use, modify, and redistribute this file according to the terms of the
#  license. Attribution is required if this code is used in other works.
# ------------------------------------------------------------------------------

"""Registry of attractor-linking strategies used during topology setup."""

from __future__ import annotations

from collections.abc import Callable

from swarmfield.util.logging_util import get_logger

logger = get_logger("plugin_registry")

# A strategy receives the ordered actor list and the fixed attractor point and
# assigns exactly one attractor to every actor.
AttractorStrategy = Callable[[list, object], None]

_ATTRACTOR_STRATEGIES: dict[str, AttractorStrategy] = {}


def register_attractor_strategy(name: str, strategy: AttractorStrategy) -> AttractorStrategy:
    """Register ``strategy`` under ``name``, replacing any previous entry."""
    if name in _ATTRACTOR_STRATEGIES:
        logger.warning("Attractor strategy '%s' re-registered", name)
    _ATTRACTOR_STRATEGIES[name] = strategy
    return strategy


def get_attractor_strategy(name: str) -> AttractorStrategy:
    """Return the strategy registered under ``name``."""
    try:
        return _ATTRACTOR_STRATEGIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown attractor strategy '{name}', registered: {sorted(_ATTRACTOR_STRATEGIES)}"
        ) from None


def available_attractor_strategies() -> set[str]:
    """Return the names of every registered strategy."""
    return set(_ATTRACTOR_STRATEGIES)
