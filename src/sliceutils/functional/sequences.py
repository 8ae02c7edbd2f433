"""Generic helpers over ordered, in-memory sequences.

This module provides a collection of pure functions that operate on ordered
sequences of arbitrary elements. None of them mutates its inputs and none
keeps state between calls, so they are safe to call concurrently.

The module implements:
    - **intersects**: Whether two sequences share at least one element
    - **unique**: Order-preserving de-duplication by a key function
    - **map_elements**: Element-wise transformation
    - **pairs**: All index-ordered pairs satisfying a predicate
    - **min_distance**: Smallest distance between elements of two sequences
    - **same_elements**: Order-independent, multiplicity-sensitive equality

Note:
    Every sequence argument may be any finite iterable (lists, tuples, ranges,
    generators, numpy arrays). It is copied into a list once, so generators are
    consumed exactly once even where the algorithm scans an argument
    repeatedly. Exceptions raised by caller-supplied callables propagate
    unchanged.

Examples:
    >>> from sliceutils.functional.sequences import pairs, min_distance
    >>>
    >>> pairs([1, 2, 3, 4, 5], lambda a, b: a % 2 == b % 2)
    [Pair(first=1, second=3), Pair(first=1, second=5), Pair(first=2, second=4), Pair(first=3, second=5)]
    >>>
    >>> min_distance([1, 3, 3, 4], [1, 3, 4], lambda a, b: abs(a - b))
    0
"""

import sys
import typing as tp
from collections import Counter

from sliceutils.core.types import (
    DistanceFn,
    KeyFn,
    Pair,
    Predicate,
    R,
    T,
    Transform,
)
from sliceutils.logger.logger import logger

__all__ = [
    "NO_DISTANCE",
    "as_sequence",
    "intersects",
    "unique",
    "map_elements",
    "pairs",
    "min_distance",
    "same_elements",
]

# Returned by min_distance when no combination could be evaluated.
NO_DISTANCE: int = sys.maxsize


# =============================================================================
# Input Handling
# =============================================================================


def as_sequence(values: tp.Iterable[T], name: str = "values") -> tp.List[T]:
    """Copy an iterable into a new list.

    Args:
        values: Any finite iterable.
        name: Argument name used in the error message.

    Returns:
        A list holding the elements of ``values`` in iteration order.

    Raises:
        TypeError: If ``values`` is not iterable.
    """
    try:
        iterator = iter(values)
    except TypeError:
        raise TypeError(
            f"{name} must be an iterable, got {type(values).__name__}"
        ) from None
    return list(iterator)


class _SeenKeys:
    """Membership record for keys, hashable or not."""

    def __init__(self) -> None:
        self._hashed: tp.Set[tp.Any] = set()
        self._unhashable: tp.List[tp.Any] = []

    def add(self, key: tp.Any) -> bool:
        """Record ``key`` and return True if it had not been seen before."""
        try:
            if key in self._hashed:
                return False
            self._hashed.add(key)
            return True
        except TypeError:
            pass

        if not self._unhashable:
            logger.debug(
                f"Unhashable key of type {type(key).__name__}, using equality scan"
            )
        if any(key == seen for seen in self._unhashable):
            return False
        self._unhashable.append(key)
        return True


# =============================================================================
# Sequence Operations
# =============================================================================


def intersects(a: tp.Iterable[T], b: tp.Iterable[T]) -> bool:
    """Check whether two sequences share at least one element.

    Every element of ``a`` is compared with every element of ``b`` using
    ``==``, ``a`` in the outer loop. The scan stops at the first match.

    Args:
        a: The first sequence.
        b: The second sequence.

    Returns:
        True if some element of ``a`` equals some element of ``b``, False
        otherwise, including when either sequence is empty.

    Example:
        >>> intersects([1, 2, 3], [3, 4, 5])
        True
    """
    a = as_sequence(a, "a")
    b = as_sequence(b, "b")
    for x in a:
        for y in b:
            if x == y:
                return True
    return False


def unique(seq: tp.Iterable[T], key: KeyFn) -> tp.List[T]:
    """Return the elements of ``seq`` with duplicate keys removed.

    The uniqueness of each element is determined by ``key(element)``. The
    first element seen for a given key is kept, later ones are dropped, and
    the relative order of the kept elements is preserved.

    Keys are normally hashable. Unhashable keys (lists, dicts) are also
    accepted and are compared by equality against previously seen ones.

    Args:
        seq: The input sequence.
        key: Function mapping an element to its identity. Called exactly once
            per element.

    Returns:
        A new list of the first element for each distinct key. An empty input
        yields an empty list.

    Example:
        >>> unique([1, 3, 3, 4], lambda x: x)
        [1, 3, 4]
    """
    seen = _SeenKeys()
    result: tp.List[T] = []
    for element in as_sequence(seq, "seq"):
        if seen.add(key(element)):
            result.append(element)
    return result


def map_elements(seq: tp.Iterable[T], transform: Transform) -> tp.List[R]:
    """Apply ``transform`` to every element of ``seq``.

    Args:
        seq: The input sequence.
        transform: Function applied to each element.

    Returns:
        A new list where the i-th item is ``transform(seq[i])``.

    Example:
        >>> map_elements([1, 2, 3], lambda x: x * 2)
        [2, 4, 6]
    """
    return [transform(element) for element in as_sequence(seq, "seq")]


def pairs(seq: tp.Iterable[T], predicate: Predicate) -> tp.List[Pair]:
    """Collect every pair of elements that satisfies ``predicate``.

    Pairs are enumerated by index with ``i < j``: the outer loop walks ``i``
    upwards and the inner loop walks ``j`` from ``i + 1`` to the end. Each
    pair for which ``predicate(seq[i], seq[j])`` is truthy is appended in that
    order.

    Args:
        seq: The input sequence.
        predicate: Function of two elements returning whether to keep the pair.

    Returns:
        A list of :class:`Pair` objects. Inputs with fewer than two elements
        yield an empty list.

    Example:
        >>> [p.as_tuple() for p in pairs([1, 2, 3, 4, 5], lambda a, b: a % 2 == b % 2)]
        [(1, 3), (1, 5), (2, 4), (3, 5)]
    """
    seq = as_sequence(seq, "seq")
    result: tp.List[Pair] = []
    for i, first in enumerate(seq):
        for second in seq[i + 1 :]:
            if predicate(first, second):
                result.append(Pair(first=first, second=second))
    return result


def min_distance(
    a: tp.Iterable[T], b: tp.Iterable[T], distance: DistanceFn
) -> int:
    """Find the smallest distance between an element of ``a`` and one of ``b``.

    ``distance`` is evaluated for every combination; it does not need to be
    symmetric or satisfy the metric axioms.

    Args:
        a: The first sequence.
        b: The second sequence.
        distance: Function of one element from ``a`` and one from ``b``
            returning an integer.

    Returns:
        The minimum of ``distance(x, y)`` over all ``x`` in ``a`` and ``y`` in
        ``b``. If either sequence is empty no combination exists and
        :data:`NO_DISTANCE` (``sys.maxsize``) is returned. That value means
        "no result" and must not be read as a real distance.

    Example:
        >>> min_distance([1, 3, 3, 4], [1, 3, 4], lambda x, y: abs(x - y))
        0
    """
    a = as_sequence(a, "a")
    b = as_sequence(b, "b")
    if not a or not b:
        logger.debug(
            f"min_distance on empty input (len(a)={len(a)}, len(b)={len(b)}), "
            "returning NO_DISTANCE"
        )
        return NO_DISTANCE

    return min(distance(x, y) for x in a for y in b)


def _same_multiset_by_equality(a: tp.List[T], b: tp.List[T]) -> bool:
    remaining = list(a)
    for y in b:
        for i, x in enumerate(remaining):
            if x == y:
                del remaining[i]
                break
        else:
            return False
    return True


def same_elements(a: tp.Iterable[T], b: tp.Iterable[T]) -> bool:
    """Check whether two sequences hold the same elements, ignoring order.

    The comparison is multiplicity-sensitive: ``[1, 1, 2]`` and ``[1, 2, 2]``
    are not the same. Unhashable elements are matched by equality instead of
    through a frequency table.

    Args:
        a: The first sequence.
        b: The second sequence.

    Returns:
        True if both sequences have the same length and the same elements
        with the same counts, False otherwise.

    Example:
        >>> same_elements([1, 2, 3], [3, 2, 1])
        True
    """
    a = as_sequence(a, "a")
    b = as_sequence(b, "b")
    if len(a) != len(b):
        return False

    try:
        counts = Counter(a)
    except TypeError:
        logger.debug("same_elements on unhashable elements, using equality scan")
        return _same_multiset_by_equality(a, b)

    for y in b:
        try:
            remaining = counts[y]
        except TypeError:
            logger.debug("same_elements on unhashable elements, using equality scan")
            return _same_multiset_by_equality(a, b)
        if remaining == 0:
            return False
        counts[y] = remaining - 1
    return True
