"""
Jaunty Extensions - Stateless helpers for game code.

Selection over collections, random picks and shuffles, and small
float/geometry helpers. Nothing here keeps state between calls.
"""

__version__ = "1.0.0"

from .config import ConfigManager
from .geometry import (
    Intersection,
    line_line_intersection,
    line_segments_intersection,
    segment_segment_intersection,
)
from .math_utils import (
    SQRT3,
    floor_div,
    floor_mod,
    frac,
    in_range,
    in_range01,
    layer_mask_contains,
    lerp,
    sign,
    wlerp01,
)
from .random_selection import (
    get_random_array_index,
    get_weighted_index,
    get_weighted_random_array_index,
    random_element,
    shuffle,
    shuffle_array,
)
from .selection import Positioned, first_by_generated_value, nearest
from .text import to_one_line_string
from .utils import create_rng

__all__ = [
    "ConfigManager",
    "Intersection",
    "Positioned",
    "SQRT3",
    "create_rng",
    "first_by_generated_value",
    "floor_div",
    "floor_mod",
    "frac",
    "get_random_array_index",
    "get_weighted_index",
    "get_weighted_random_array_index",
    "in_range",
    "in_range01",
    "layer_mask_contains",
    "lerp",
    "line_line_intersection",
    "line_segments_intersection",
    "nearest",
    "random_element",
    "segment_segment_intersection",
    "shuffle",
    "shuffle_array",
    "sign",
    "to_one_line_string",
    "wlerp01",
]
