"""Force fields, heading helpers and built-in attractor strategies."""

from swarmfield.models.fields import attraction_field, repulsion_field  # noqa: F401
from swarmfield.models.utility_functions import (  # noqa: F401
    angle_between,
    clamp_turn,
    heading_to_vector,
    normalize_heading,
    vector_to_heading,
)
import swarmfield.models.attractors  # noqa: F401  # register built-in strategies
