"""Shared utility modules (logging)."""

from swarmfield.util.logging_util import *  # noqa: F401,F403
