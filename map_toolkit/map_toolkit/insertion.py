"""Insert and update helpers for mutable mappings."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, MutableMapping
from typing import TypeVar

from map_toolkit.errors import DuplicateKeyError


K = TypeVar("K")
V = TypeVar("V")

# Seed used by increment() for a key seen for the first time.
DEFAULT_INCREMENT_SEED = 1


def add(mapping: MutableMapping[K, V], key: K, value: V) -> None:
    """Insert *key* strictly, refusing to overwrite an existing entry."""
    if key in mapping:
        raise DuplicateKeyError(key)
    mapping[key] = value


def add_if_not_exists(mapping: MutableMapping[K, V], key: K, value: V) -> None:
    if key not in mapping:
        mapping[key] = value


def add_or_update(mapping: MutableMapping[K, V], key: K, value: V) -> None:
    mapping[key] = value


def try_add(mapping: MutableMapping[K, V], key: K, value: V) -> bool:
    """Insert *key* if absent. Return whether the mapping changed."""
    if key in mapping:
        return False
    mapping[key] = value
    return True


def add_range(
    mapping: MutableMapping[K, V], pairs: Iterable[tuple[K, V]] | Mapping[K, V]
) -> None:
    """Strictly insert each pair in order.

    Not transactional: if a key collides, the pairs inserted before it stay in
    the mapping and the DuplicateKeyError propagates.
    """
    items = pairs.items() if isinstance(pairs, Mapping) else pairs
    for key, value in items:
        add(mapping, key, value)


def get_or_add(mapping: MutableMapping[K, V], key: K, value_factory: Callable[[], V]) -> V:
    """Return the value for *key*, creating it with *value_factory* when missing.

    The factory is only called when the key is absent, and then exactly once.
    """
    if key in mapping:
        return mapping[key]
    value = value_factory()
    mapping[key] = value
    return value


def get_or_add_value(mapping: MutableMapping[K, V], key: K, value: V) -> V:
    """Like get_or_add, but with a precomputed value instead of a factory."""
    if key in mapping:
        return mapping[key]
    mapping[key] = value
    return value


def increment(
    mapping: MutableMapping[K, int], key: K, initial_value: int = DEFAULT_INCREMENT_SEED
) -> int:
    """Add one to the count for *key*, or seed it with *initial_value*.

    *initial_value* only applies to the first occurrence; later calls always
    add exactly 1.
    """
    if key in mapping:
        mapping[key] += 1
    else:
        mapping[key] = initial_value
    return mapping[key]


def merge(mapping: MutableMapping[K, V], other: Mapping[K, V]) -> None:
    """Upsert every pair of *other* into *mapping*; *other* wins on conflicts."""
    for key, value in other.items():
        mapping[key] = value
