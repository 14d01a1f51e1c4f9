"""Self-balancing binary search tree (AVL) holding distinct integer keys."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class _Node:
    key: int
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None
    height: int = 0


def _height(node: Optional[_Node]) -> int:
    # An absent subtree has height -1, a leaf has height 0.
    return node.height if node else -1


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance_factor(node: Optional[_Node]) -> int:
    return _height(node.left) - _height(node.right) if node else 0


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _rebalance(node: _Node) -> _Node:
    _update(node)
    factor = _balance_factor(node)
    if factor > 1:
        if _balance_factor(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if factor < -1:
        if _balance_factor(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: Optional[_Node], key: int) -> tuple[_Node, bool]:
    if node is None:
        return _Node(key), True
    if key < node.key:
        node.left, added = _insert(node.left, key)
    elif key > node.key:
        node.right, added = _insert(node.right, key)
    else:
        return node, False
    return _rebalance(node), added


def _remove(node: Optional[_Node], key: int) -> Optional[_Node]:
    if node is None:
        return None
    if key < node.key:
        node.left = _remove(node.left, key)
    elif key > node.key:
        node.right = _remove(node.right, key)
    else:
        if node.left is None or node.right is None:
            return node.left or node.right
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.key = successor.key
        node.right = _remove(node.right, successor.key)
    return _rebalance(node)


class AVLTree:
    """A set of distinct integers kept in a height-balanced search tree."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.insert(item)

    def insert(self, key: int) -> bool:
        """Add ``key``; return False if it was already present."""
        self._root, added = _insert(self._root, key)
        if added:
            self._size += 1
        return added

    def remove(self, key: int) -> bool:
        """Remove ``key``; return False if it was not present."""
        if key not in self:
            return False
        self._root = _remove(self._root, key)
        self._size -= 1
        return True

    def __contains__(self, key: object) -> bool:
        node = self._root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right  # type: ignore[operator]
        return False

    def __iter__(self) -> Iterator[int]:
        """Yield the keys in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def __len__(self) -> int:
        return self._size

    def height(self) -> int:
        """Height of the tree: -1 when empty, 0 for a single key."""
        return _height(self._root)

    def union(self, other: Iterable[int]) -> "AVLTree":
        """Return a new tree with the keys of both operands."""
        result = AVLTree(self)
        for key in other:
            result.insert(key)
        return result

    def intersection(self, other: "AVLTree") -> "AVLTree":
        """Return a new tree with the keys present in both operands."""
        return AVLTree(key for key in self if key in other)

    def format(self) -> str:
        """Render as ``{k1 k2 ... }`` with each key followed by a space."""
        return "{" + "".join(f"{key} " for key in self) + "}"

    def __repr__(self) -> str:
        return f"AVLTree({list(self)!r})"