# ------------------------------------------------------------------------------
#  Swarmfield
#  Copyright (c) 2025 Fabio Oddi
#
#  This file is part of Swarmfield, released under the BSD 3-Clause License.
#  You may use, modify, and redistribute this file according to the terms of the
#  license. Attribution is required if this code is used in other works.
# ------------------------------------------------------------------------------

"""Base entity: anything with a position can act as a field emitter."""

from __future__ import annotations


class Entity:
    """Field emitter with a stable UID of the form ``<class>#<id>``."""

    def __init__(self, entity_type: str, config_elem: dict, _id: int = 0):
        """Initialize the instance."""
        self.entity_type = entity_type
        self._id = _id
        self._entity_uid = self._build_entity_uid(entity_type, _id)

    def get_name(self):
        """Return the stable entity UID."""
        return self._entity_uid

    def get_position(self) -> tuple[float, float]:
        """Return the current (x, y) position."""
        return self.position

    @staticmethod
    def _sanitize_token(token, default: str = "x") -> str:
        """Sanitize a token so it does not contain the UID separator."""
        cleaned = "".join(ch if ch.isalnum() or ch == "_" else "_" for ch in str(token).strip())
        cleaned = cleaned.strip("_")
        return cleaned or default

    def _build_entity_uid(self, entity_type: str, numeric_id: int | str) -> str:
        """Construct the UID from the class label (type minus its kind prefix)."""
        label = entity_type.split("_", 1)[1] if "_" in entity_type else entity_type
        return f"{self._sanitize_token(label, 'entity')}#{self._sanitize_token(numeric_id, '0')}"

    def __repr__(self):
        x, y = self.get_position()
        return f"{type(self).__name__}({self.get_name()!r}, x={x:.3f}, y={y:.3f})"
