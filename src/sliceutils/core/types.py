"""Reusable type definitions for the sliceutils package.

This module provides the type variables, callable aliases and the ``Pair``
model shared by the sequence helpers.

Type Aliases:
    KeyFn: Maps an element to the identity used for de-duplication.
    Transform: Maps an element to a transformed value.
    Predicate: Tests a relation between two elements.
    DistanceFn: Integer distance between two elements.
"""

from typing import Callable, Generic, Tuple, TypeVar
from pydantic import BaseModel, ConfigDict

__all__ = [
    "T",
    "V",
    "R",
    "KeyFn",
    "Transform",
    "Predicate",
    "DistanceFn",
    "Pair",
]

T = TypeVar("T")
V = TypeVar("V")
R = TypeVar("R")

KeyFn = Callable[[T], V]
Transform = Callable[[T], R]
Predicate = Callable[[T, T], bool]
DistanceFn = Callable[[T, T], int]


class Pair(BaseModel, Generic[T]):
    """Two elements taken from the same sequence.

    ``first`` always comes from the smaller index. Pairs are immutable and
    compare field by field, so ``Pair(first=1, second=3)`` equals any other
    pair built from the same two values.

    Attributes:
        first: Element at the smaller index.
        second: Element at the larger index.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    first: T
    second: T

    def as_tuple(self) -> Tuple[T, T]:
        """Return the pair as a plain ``(first, second)`` tuple."""
        return (self.first, self.second)
