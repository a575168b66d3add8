"""Thread-safe mapping."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Iterator, Mapping, MutableMapping
from typing import Generic, TypeVar


K = TypeVar("K")
V = TypeVar("V")

_MISSING = object()


class ConcurrentMap(MutableMapping[K, V], Generic[K, V]):
    """A dict guarded by a single re-entrant lock.

    Reads and writes from several threads never leave the map half-updated.
    The compound dict methods (setdefault, pop, popitem, update, clear) each
    run under a single lock acquisition.
    Iteration walks a snapshot taken under the lock, so it is safe while
    other threads keep writing; it does not see their later changes.
    """

    def __init__(self, initial: Mapping[K, V] | Iterable[tuple[K, V]] | None = None) -> None:
        self._lock = threading.RLock()
        self._data: dict[K, V] = dict(initial) if initial is not None else {}

    def __getitem__(self, key: K) -> V:
        with self._lock:
            return self._data[key]

    def __setitem__(self, key: K, value: V) -> None:
        with self._lock:
            self._data[key] = value

    def __delitem__(self, key: K) -> None:
        with self._lock:
            del self._data[key]

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __iter__(self) -> Iterator[K]:
        with self._lock:
            keys = list(self._data)
        return iter(keys)

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.snapshot()!r})"

    def get(self, key: K, default: V | None = None) -> V | None:
        with self._lock:
            return self._data.get(key, default)

    def setdefault(self, key: K, default: V | None = None) -> V | None:  # type: ignore[override]
        with self._lock:
            return self._data.setdefault(key, default)  # type: ignore[arg-type]

    def pop(self, key: K, *default: V) -> V:  # type: ignore[override]
        with self._lock:
            return self._data.pop(key, *default)

    def popitem(self) -> tuple[K, V]:
        with self._lock:
            return self._data.popitem()

    def update(  # type: ignore[override]
        self, other: Mapping[K, V] | Iterable[tuple[K, V]] = (), /, **kwargs: V
    ) -> None:
        with self._lock:
            self._data.update(other, **kwargs)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def snapshot(self) -> dict[K, V]:
        """Return a consistent point-in-time copy as a plain dict."""
        with self._lock:
            return dict(self._data)

    def try_add(self, key: K, value: V) -> bool:
        with self._lock:
            if key in self._data:
                return False
            self._data[key] = value
            return True

    def get_or_add(self, key: K, value_factory: Callable[[], V]) -> V:
        """Atomically return the value for *key*, creating it when missing.

        The factory runs while the lock is held.
        """
        with self._lock:
            if key in self._data:
                return self._data[key]
            value = value_factory()
            self._data[key] = value
            return value

    def add_or_update(self, key: K, add_value: V, update_factory: Callable[[K, V], V]) -> V:
        """Insert *add_value*, or replace the current value with ``update_factory(key, old)``."""
        with self._lock:
            if key in self._data:
                value = update_factory(key, self._data[key])
            else:
                value = add_value
            self._data[key] = value
            return value

    def try_remove(self, key: K) -> tuple[bool, V | None]:
        with self._lock:
            value = self._data.pop(key, _MISSING)
        if value is _MISSING:
            return False, None
        return True, value  # type: ignore[return-value]

    def try_update(self, key: K, new_value: V, comparison_value: V) -> bool:
        """Replace the value for *key* only if it currently equals *comparison_value*."""
        with self._lock:
            if key in self._data and self._data[key] == comparison_value:
                self._data[key] = new_value
                return True
            return False
