"""Configuration helpers (Config, attractor strategy registry)."""

from swarmfield.configuration.config import Config  # noqa: F401
from swarmfield.configuration.plugin_registry import *  # noqa: F401,F403
