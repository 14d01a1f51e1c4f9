"""Bounded, ordered sequence of distinct integers backed by a Python list."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterator


class SortedList:
    """Distinct integers kept in ascending order, holding at most ``capacity`` keys."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        self._keys: list[int] = []

    @property
    def capacity(self) -> int:
        """Largest number of keys the list can hold."""
        return self._capacity

    def _position(self, key: int) -> int:
        return bisect_left(self._keys, key)

    def insert(self, key: int) -> bool:
        """Add ``key`` in order; return False if it is present or the list is full."""
        pos = self._position(key)
        if pos < len(self._keys) and self._keys[pos] == key:
            return False
        if self.is_full():
            return False
        self._keys.insert(pos, key)
        return True

    def remove(self, key: int) -> bool:
        """Remove ``key``; return False if it was not present."""
        try:
            pos = self.index(key)
        except ValueError:
            return False
        del self._keys[pos]
        return True

    def index(self, key: int) -> int:
        """Return the position of ``key``; raise ValueError if it is absent."""
        pos = self._position(key)
        if pos < len(self._keys) and self._keys[pos] == key:
            return pos
        raise ValueError(f"{key} is not in the list")

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        pos = self._position(key)
        return pos < len(self._keys) and self._keys[pos] == key

    def __iter__(self) -> Iterator[int]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def is_empty(self) -> bool:
        return not self._keys

    def is_full(self) -> bool:
        return len(self._keys) == self._capacity

    @classmethod
    def _from_sorted(cls, keys: list[int], capacity: int) -> "SortedList":
        result = cls(capacity)
        result._keys = keys
        if keys:
            # Trim the spare room once the result is known.
            result._capacity = len(keys)
        return result

    def union(self, other: "SortedList") -> "SortedList":
        """Return a new list with the keys of both operands, merged in one pass."""
        a, b = self._keys, other._keys
        merged: list[int] = []
        i = j = 0
        while i < len(a) and j < len(b):
            if a[i] == b[j]:
                merged.append(a[i])
                i += 1
                j += 1
            elif a[i] > b[j]:
                merged.append(b[j])
                j += 1
            else:
                merged.append(a[i])
                i += 1
        merged.extend(a[i:])
        merged.extend(b[j:])
        return self._from_sorted(merged, len(a) + len(b))

    def intersection(self, other: "SortedList") -> "SortedList":
        """Return a new list with the keys present in both operands."""
        a, b = self._keys, other._keys
        common: list[int] = []
        i = j = 0
        while i < len(a) and j < len(b):
            if a[i] == b[j]:
                common.append(a[i])
                i += 1
                j += 1
            elif a[i] > b[j]:
                j += 1
            else:
                i += 1
        return self._from_sorted(common, min(len(a), len(b)))

    def format(self) -> str:
        """Render as ``{k1 k2 ... }`` with each key followed by a space."""
        return "{" + "".join(f"{key} " for key in self._keys) + "}"

    def __repr__(self) -> str:
        return f"SortedList({self._keys!r}, capacity={self._capacity})"