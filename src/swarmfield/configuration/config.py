# ------------------------------------------------------------------------------
#  Swarmfield
#  Copyright (c) 2025 Fabio Oddi
#
#  This file is part of Swarmfield, released under the BSD 3-Clause License.
#  You may use, modify, and redistribute this file according to the terms of the
#  license. Attribution is required if this code is used in other works.
# ------------------------------------------------------------------------------

"""JSON configuration loading, defaults and validation."""

from __future__ import annotations

import json

import swarmfield.models  # noqa: F401  # ensure built-in strategies register themselves
from swarmfield.configuration.plugin_registry import available_attractor_strategies
from swarmfield.util.logging_util import get_logger

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

DEFAULT_ENVIRONMENT = {
    "ticks_per_second": 60,
    "time_limit": 10,
    "random_seed": 0,
}
DEFAULT_ARENA = {
    "half_extents": [500.0, 220.0],
    "attractor": [500.0, 300.0],
    "ring_size": 100,
}
DEFAULT_FIELD = {
    "notice_radius": 150.0,
    "repulsion_scaling": 0.2,
    "attracting_power": 10.0,
    "min_distance": 1e-9,
}
DEFAULT_ACTORS = {
    "number": 6,
    "base_speed": 90.0,
    "base_turn_rate": 120.0,
    "speed_scale": 2.0,
    "attractor_mode": "fixed_point",
}

logger = get_logger("config")


def _clone_config_obj(obj):
    """Return an independent deep copy of JSON-compatible config data."""
    return json.loads(json.dumps(obj))


def _with_defaults(block, defaults: dict, name: str) -> dict:
    """Return ``block`` merged over ``defaults``, rejecting unknown keys."""
    if block is None:
        return _clone_config_obj(defaults)
    if not isinstance(block, dict):
        raise ValueError(f"The '{name}' block must be a dictionary")
    extras = set(block) - set(defaults)
    if extras:
        raise ValueError(f"Unknown keys in '{name}': {sorted(extras)}, allowed: {sorted(defaults)}")
    merged = _clone_config_obj(defaults)
    merged.update(_clone_config_obj(block))
    return merged


def _require_number(block: dict, name: str, key: str, minimum: float | None = None, strict: bool = False):
    value = block.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{name}.{key}' must be numeric")
    if minimum is not None:
        if strict and value <= minimum:
            raise ValueError(f"'{name}.{key}' must be > {minimum}")
        if not strict and value < minimum:
            raise ValueError(f"'{name}.{key}' must be >= {minimum}")
    block[key] = float(value)


def _require_positive_int(block: dict, name: str, key: str):
    value = block.get(key)
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"'{name}.{key}' must be a positive integer")


def _require_point(block: dict, name: str, key: str):
    value = block.get(key)
    if not (
        isinstance(value, list)
        and len(value) == 2
        and all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in value)
    ):
        raise ValueError(f"'{name}.{key}' must be an [x, y] array of numbers")
    block[key] = [float(v) for v in value]


def _validate_environment_block(env_cfg: dict):
    _require_positive_int(env_cfg, "environment", "ticks_per_second")
    _require_number(env_cfg, "environment", "time_limit", minimum=0)
    seed = env_cfg.get("random_seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise ValueError("'environment.random_seed' must be an integer or null")


def _validate_logging_block(logging_cfg):
    if not isinstance(logging_cfg, dict):
        raise ValueError("The 'logging' block must be a dictionary")
    level_raw = logging_cfg.get("level")
    if level_raw is not None:
        if not isinstance(level_raw, str) or level_raw.upper() not in LOG_LEVELS:
            raise ValueError(f"Invalid logging.level '{level_raw}', must be one of {sorted(LOG_LEVELS)}")
        logging_cfg["level"] = level_raw.upper()
    for flag in ("to_file", "to_console"):
        value = logging_cfg.get(flag)
        if value is not None and not isinstance(value, bool):
            raise ValueError(f"'logging.{flag}' must be a boolean")
    base_path = logging_cfg.get("base_path")
    if base_path is not None and not isinstance(base_path, str):
        raise ValueError("'logging.base_path' must be a string")


def _validate_arena_block(arena_cfg: dict):
    _require_point(arena_cfg, "arena", "half_extents")
    if any(v <= 0 for v in arena_cfg["half_extents"]):
        raise ValueError("'arena.half_extents' must be positive")
    _require_point(arena_cfg, "arena", "attractor")
    _require_positive_int(arena_cfg, "arena", "ring_size")


def _validate_field_block(field_cfg: dict):
    _require_number(field_cfg, "field", "notice_radius", minimum=0, strict=True)
    _require_number(field_cfg, "field", "repulsion_scaling")
    _require_number(field_cfg, "field", "attracting_power")
    _require_number(field_cfg, "field", "min_distance", minimum=0)


def _validate_actors_block(actors_cfg: dict):
    _require_positive_int(actors_cfg, "actors", "number")
    _require_number(actors_cfg, "actors", "base_speed", minimum=0)
    _require_number(actors_cfg, "actors", "base_turn_rate", minimum=0)
    _require_number(actors_cfg, "actors", "speed_scale", minimum=0)
    mode = actors_cfg.get("attractor_mode")
    allowed = available_attractor_strategies()
    if mode not in allowed:
        raise ValueError(f"Invalid actors.attractor_mode '{mode}', allowed: {sorted(allowed)}")


class Config:
    """Validated simulation configuration.

    Either ``config_path`` (a JSON file) or ``new_data`` (an already parsed
    dict) may be given; with neither, every block takes its defaults.
    """

    def __init__(self, config_path: str = "", new_data: dict | None = None):
        """Initialize the instance."""
        self.config_path = config_path
        if config_path:
            raw = self.load_config()
        elif new_data is not None:
            raw = _clone_config_obj(new_data)
        else:
            raw = {}
        self.data = self._normalize(raw)

    def load_config(self):
        """Load config."""
        with open(self.config_path, "r", encoding="utf-8") as file:
            return json.load(file)

    @staticmethod
    def _normalize(raw) -> dict:
        """Apply defaults and validate every block."""
        if not isinstance(raw, dict):
            raise ValueError("The configuration root must be a dictionary")
        environment = raw.get("environment", {})
        if not isinstance(environment, dict):
            raise ValueError("The 'environment' field must be a dictionary")
        nested = {
            "logging": environment.get("logging"),
            "arena": environment.get("arena"),
            "field": environment.get("field"),
            "actors": environment.get("actors"),
        }
        flat = {k: v for k, v in environment.items() if k not in nested}
        env_cfg = _with_defaults(flat, DEFAULT_ENVIRONMENT, "environment")
        _validate_environment_block(env_cfg)

        logging_cfg = _clone_config_obj(nested["logging"]) if nested["logging"] is not None else {}
        _validate_logging_block(logging_cfg)
        env_cfg["logging"] = logging_cfg

        for name, defaults, validator in (
            ("arena", DEFAULT_ARENA, _validate_arena_block),
            ("field", DEFAULT_FIELD, _validate_field_block),
            ("actors", DEFAULT_ACTORS, _validate_actors_block),
        ):
            block = _with_defaults(nested[name], defaults, name)
            validator(block)
            env_cfg[name] = block
        logger.debug("Configuration normalized: %s", env_cfg)
        return {"environment": env_cfg}

    @property
    def environment(self) -> dict:
        """Return the environment configuration."""
        return self.data.get("environment", {})

    @property
    def logging(self) -> dict:
        """Return the logging configuration."""
        return self.environment.get("logging", {})

    @property
    def arena(self) -> dict:
        """Return the arena configuration."""
        return self.environment.get("arena", {})

    @property
    def field(self) -> dict:
        """Return the force field configuration."""
        return self.environment.get("field", {})

    @property
    def actors(self) -> dict:
        """Return the actor configuration."""
        return self.environment.get("actors", {})
