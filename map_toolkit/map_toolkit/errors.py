"""Exception taxonomy for map operations."""

from __future__ import annotations

from collections.abc import Hashable


class MapToolkitError(Exception):
    """Base class for every error raised by map_toolkit."""


class DuplicateKeyError(MapToolkitError, KeyError):
    """A strict insert hit a key that is already present."""

    def __init__(self, key: Hashable) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"An item with the same key has already been added: {self.key!r}"


class ParseError(MapToolkitError, ValueError):
    """Interchange text could not be parsed."""


class TypeMismatchError(MapToolkitError, TypeError):
    """A decoded (or to-be-encoded) member does not fit the requested types."""

    def __init__(self, message: str, key: object = None) -> None:
        super().__init__(message)
        self.key = key


class UnsupportedValueTypeError(MapToolkitError, TypeError):
    """A value has no way to produce an independent copy of itself."""

    def __init__(self, key: Hashable, value: object) -> None:
        super().__init__(f"Value for key {key!r} of type {type(value).__name__} cannot be copied")
        self.key = key
        self.value = value


class IncomparableTypeError(MapToolkitError, TypeError):
    """Keys or values have no total order."""
