"""Set of distinct integers stored in a chosen underlying structure."""

from __future__ import annotations

from collections.abc import Iterator
from enum import IntEnum
from typing import Union

from intsets.avl import AVLTree
from intsets.sorted_list import SortedList


class Structure(IntEnum):
    """Storage chosen for an :class:`IntSet`."""

    AVL = 0
    LIST = 1


class IntSet:
    """A set of distinct integers held in an AVL tree or a bounded sorted list.

    ``capacity`` bounds the number of keys of a list-backed set; a tree-backed
    set keeps it only as a size hint.
    """

    def __init__(self, kind: Union[Structure, int], capacity: int = 0) -> None:
        self.kind = Structure(kind)
        self.capacity = capacity
        self._items: Union[AVLTree, SortedList] = (
            AVLTree() if self.kind is Structure.AVL else SortedList(capacity)
        )

    @classmethod
    def _wrap(
        cls, kind: Structure, capacity: int, items: Union[AVLTree, SortedList]
    ) -> "IntSet":
        result = cls(kind, capacity)
        result._items = items
        return result

    def _check_compatible(self, other: "IntSet") -> None:
        if self.kind is not other.kind:
            raise ValueError(
                f"cannot combine a {self.kind.name} set with a {other.kind.name} set"
            )

    def insert(self, key: int) -> bool:
        """Add ``key``; return False if it is present or there is no room."""
        return self._items.insert(key)

    def remove(self, key: int) -> bool:
        """Remove ``key``; return False if it was not present."""
        return self._items.remove(key)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator[int]:
        """Yield the keys in ascending order."""
        return iter(self._items)

    def union(self, other: "IntSet") -> "IntSet":
        """Return a new set with the keys of both operands."""
        self._check_compatible(other)
        if self.kind is Structure.AVL:
            return self._wrap(self.kind, 0, self._items.union(other._items))
        return self._wrap(
            self.kind,
            self.capacity + other.capacity,
            self._items.union(other._items),
        )

    def intersection(self, other: "IntSet") -> "IntSet":
        """Return a new set with the keys present in both operands."""
        self._check_compatible(other)
        if self.kind is Structure.AVL:
            # Walk the smaller operand and look each key up in the larger one.
            if self.capacity >= other.capacity:
                items = other._items.intersection(self._items)
            else:
                items = self._items.intersection(other._items)
            return self._wrap(self.kind, 0, items)
        return self._wrap(
            self.kind,
            min(self.capacity, other.capacity),
            self._items.intersection(other._items),
        )

    def format(self) -> str:
        """Render as ``{k1 k2 ... }`` with each key followed by a space."""
        return self._items.format()

    def __repr__(self) -> str:
        return f"IntSet({self.kind.name}, {list(self)!r})"