"""Generic helpers for ordered, in-memory sequences."""

__version__ = "0.1.0"

from sliceutils.core.types import Pair
from sliceutils.functional.sequences import (
    NO_DISTANCE,
    intersects,
    unique,
    map_elements,
    pairs,
    min_distance,
    same_elements,
)

__all__ = [
    "Pair",
    "NO_DISTANCE",
    "intersects",
    "unique",
    "map_elements",
    "pairs",
    "min_distance",
    "same_elements",
]
