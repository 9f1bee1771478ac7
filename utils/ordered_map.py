"""Insertion-ordered container keyed by a value-derived identifier.

Used by the notification service to keep notices in creation order so the
oldest entries can be found by a simple scan over :attr:`OrderedMap.keys`.
"""

from __future__ import annotations

from typing import Callable, Dict, Generic, Iterator, List, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class OrderedMap(Generic[K, V]):
    """Keyed values in insertion order with O(1) lookup and removal."""

    def __init__(self, key_of: Callable[[V], K]) -> None:
        self._key_of = key_of
        self._items: Dict[K, V] = {}

    # ---- Mutation ----------------------------------------------------------
    def add_value(self, value: V) -> None:
        self.add(self._key_of(value), value)

    def add(self, key: K, value: V) -> None:
        if key in self._items:
            raise KeyError(f"duplicate key {key!r}")
        self._items[key] = value

    def remove(self, key: K) -> None:
        # missing keys are fine, delayed removals race explicit ones
        self._items.pop(key, None)

    def remove_all(self) -> None:
        self._items.clear()

    # ---- Access ------------------------------------------------------------
    def get(self, key: K) -> Optional[V]:
        return self._items.get(key)

    def has(self, key: K) -> bool:
        return key in self._items

    @property
    def keys(self) -> List[K]:
        return list(self._items.keys())

    @property
    def values(self) -> List[V]:
        return list(self._items.values())

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[V]:
        return iter(self.values)


__all__ = ["OrderedMap"]
