"""Sorted containers that answer rank and select queries in O(log n)."""

from __future__ import annotations

from typing import Any, Hashable, Iterable, Iterator

from sortedcontainers import SortedDict, SortedList


class OrderStatisticSet:
    """A sorted set of distinct keys supporting lookup by rank."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items = SortedList(set(items))

    def add(self, key: Any) -> bool:
        """Insert ``key``; return False if it was already present."""
        if key in self._items:
            return False
        self._items.add(key)
        return True

    def discard(self, key: Any) -> bool:
        """Remove ``key``; return False if it was absent."""
        if key not in self._items:
            return False
        self._items.remove(key)
        return True

    def find_by_order(self, index: int) -> Any:
        """The key of rank ``index`` (0-based); raises IndexError when out of range."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"rank {index} outside [0, {len(self._items)})")
        return self._items[index]

    def order_of_key(self, key: Any) -> int:
        """Number of keys strictly smaller than ``key``."""
        return self._items.bisect_left(key)

    def __contains__(self, key: Any) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)


class OrderStatisticMap:
    """A mapping kept in key order that supports lookup by rank."""

    def __init__(self) -> None:
        self._data: SortedDict = SortedDict()

    def __setitem__(self, key: Hashable, value: Any) -> None:
        self._data[key] = value

    def __getitem__(self, key: Hashable) -> Any:
        return self._data[key]

    def __delitem__(self, key: Hashable) -> None:
        del self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def find_by_order(self, index: int) -> tuple[Any, Any]:
        """The ``(key, value)`` pair of rank ``index``; raises IndexError when out of range."""
        if not 0 <= index < len(self._data):
            raise IndexError(f"rank {index} outside [0, {len(self._data)})")
        return self._data.peekitem(index)

    def order_of_key(self, key: Any) -> int:
        """Number of keys strictly smaller than ``key``."""
        return self._data.bisect_left(key)