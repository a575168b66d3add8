"""Filtering, reshaping and ordering of mappings.

Everything here except remove_where returns a newly allocated ``dict`` and
leaves its input untouched.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Hashable, Mapping, MutableMapping
from typing import Any, Protocol, TypeVar, runtime_checkable

from map_toolkit.errors import IncomparableTypeError, UnsupportedValueTypeError


logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")
R = TypeVar("R")
H = TypeVar("H", bound=Hashable)


@runtime_checkable
class SupportsClone(Protocol):
    def clone(self) -> Any: ...


def filter_map(mapping: Mapping[K, V], predicate: Callable[[K, V], bool]) -> dict[K, V]:
    """Return the pairs for which ``predicate(key, value)`` is true."""
    return {key: value for key, value in mapping.items() if predicate(key, value)}


def remove_where(mapping: MutableMapping[K, V], predicate: Callable[[K, V], bool]) -> int:
    """Delete, in place, every pair for which ``predicate(key, value)`` is true.

    Matching keys are collected first and deleted afterwards, so the predicate
    never sees a mapping that is being modified. Returns the number removed.
    """
    doomed = [key for key, value in list(mapping.items()) if predicate(key, value)]
    for key in doomed:
        del mapping[key]
    return len(doomed)


def map_values(mapping: Mapping[K, V], transform: Callable[[V], R]) -> dict[K, R]:
    """Return a mapping with the same keys and ``transform(value)`` as values."""
    return {key: transform(value) for key, value in mapping.items()}


# Kept under both names; existing callers use either.
transform_values = map_values


def combine_with(
    first: Mapping[K, V], second: Mapping[K, V], combiner: Callable[[V, V], R]
) -> dict[K, R]:
    """Combine the values of keys present in both mappings.

    Keys found in only one of the two are dropped without error. The result
    follows the iteration order of *first*.
    """
    return {key: combiner(value, second[key]) for key, value in first.items() if key in second}


def invert(mapping: Mapping[K, H]) -> dict[H, K]:
    """Swap keys and values.

    Values are expected to be unique. When they are not, the key seen last in
    iteration order wins.
    """
    inverted: dict[H, K] = {}
    for key, value in mapping.items():
        if value in inverted:
            logger.debug("invert: value %r of key %r replaces key %r", value, key, inverted[value])
        inverted[value] = key
    return inverted


def _copy_value(key: Any, value: Any) -> Any:
    if isinstance(value, SupportsClone):
        return value.clone()
    try:
        return copy.deepcopy(value)
    except (TypeError, copy.Error) as exc:
        raise UnsupportedValueTypeError(key, value) from exc


def deep_copy(mapping: Mapping[K, V]) -> dict[K, V]:
    """Return a copy whose values are independent of the originals.

    Values exposing ``clone()`` are copied with it; anything else goes through
    :func:`copy.deepcopy`. Raises UnsupportedValueTypeError for values that
    cannot be copied (locks, open generators, ...).
    """
    return {key: _copy_value(key, value) for key, value in mapping.items()}


def sort_by_key(mapping: Mapping[K, V]) -> dict[K, V]:
    """Return a new dict ordered by key."""
    try:
        ordered = sorted(mapping.items(), key=lambda item: item[0])
    except TypeError as exc:
        raise IncomparableTypeError(f"Keys cannot be ordered: {exc}") from exc
    return dict(ordered)


def sort_by_value(mapping: Mapping[K, V]) -> list[tuple[K, V]]:
    """Return the pairs ordered by value, ascending.

    Pairs with equal values keep their original relative order. Unlike
    sort_by_key this returns a list of pairs, not a mapping.
    """
    try:
        return sorted(mapping.items(), key=lambda item: item[1])
    except TypeError as exc:
        raise IncomparableTypeError(f"Values cannot be ordered: {exc}") from exc


def for_each(mapping: Mapping[K, V], action: Callable[[K, V], object]) -> None:
    for key, value in mapping.items():
        action(key, value)
