"""Core data structures and settings."""

from sliceutils.core.config import Settings
from sliceutils.core.types import Pair, KeyFn, Transform, Predicate, DistanceFn

__all__ = [
    "Settings",
    "Pair",
    "KeyFn",
    "Transform",
    "Predicate",
    "DistanceFn",
]
