"""Non-mutating queries over mappings."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Generic, TypeVar


K = TypeVar("K")
V = TypeVar("V")


def get_value_or_default(mapping: Mapping[K, V], key: K, default: V | None = None) -> V | None:
    if key in mapping:
        return mapping[key]
    return default


def get_keys(mapping: Mapping[K, V]) -> list[K]:
    return list(mapping.keys())


def get_values(mapping: Mapping[K, V]) -> list[V]:
    return list(mapping.values())


class KeysForValue(Generic[K, V]):
    """Lazy sequence of the keys mapped to a given value.

    Every iteration rescans the underlying mapping, so the result follows
    later changes to it and can be consumed more than once.
    """

    def __init__(self, mapping: Mapping[K, V], value: V) -> None:
        self._mapping = mapping
        self._value = value

    def __iter__(self) -> Iterator[K]:
        for key, value in self._mapping.items():
            if value == self._value:
                yield key

    def __repr__(self) -> str:
        return f"KeysForValue(value={self._value!r})"


def find_keys_for_value(mapping: Mapping[K, V], value: V) -> KeysForValue[K, V]:
    return KeysForValue(mapping, value)


def has_duplicate_values(mapping: Mapping[K, V]) -> bool:
    """Return True when fewer distinct values than entries exist.

    Values are compared with ``==`` only, never by identity, so the same NaN
    stored twice is not a duplicate. Hashable values are bucketed by hash
    first; unhashable ones are compared pairwise.
    """
    buckets: dict[int, list[V]] = {}
    unhashable: list[V] = []
    for value in mapping.values():
        try:
            seen = buckets.setdefault(hash(value), [])
        except TypeError:
            seen = unhashable
        if any(value == other for other in seen):
            return True
        seen.append(value)
    return False


def to_list(mapping: Mapping[K, V]) -> list[tuple[K, V]]:
    return list(mapping.items())


def as_read_only(mapping: Mapping[K, V]) -> Mapping[K, V]:
    """Wrap *mapping* in a read-only view without copying it.

    Changes made to *mapping* afterwards are visible through the view.
    """
    return MappingProxyType(mapping)
