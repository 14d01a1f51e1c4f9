# intsets

Sets of distinct integers stored in one of two structures:

- `AVLTree` (`intsets.avl`): a self-balancing binary search tree.
- `SortedList` (`intsets.sorted_list`): a list of at most `capacity` keys
  kept in ascending order and searched by bisection.

`IntSet` (`intsets.intset`) wraps either one behind a common interface. The
structure is chosen with the `Structure` enum: `Structure.AVL` (0) or
`Structure.LIST` (1).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from intsets.avl import AVLTree
from intsets.sorted_list import SortedList
from intsets.intset import IntSet, Structure

tree = AVLTree([5, 1, 3])
tree.insert(4)
print(list(tree))          # [1, 3, 4, 5]
print(3 in tree)           # True
print(len(tree))           # 4
print(tree.format())       # {1 3 4 5 }

sl = SortedList(3)
for key in (8, 2, 6):
    sl.insert(key)
print(sl.insert(7))        # False: the list is full
print(sl.index(6))         # 1
print(list(sl.union(SortedList(0))))   # [2, 6, 8]

a = IntSet(Structure.AVL, 3)
b = IntSet(Structure.AVL, 3)
for key in (1, 2, 3):
    a.insert(key)
for key in (2, 3, 4):
    b.insert(key)
print(a.union(b).format())         # {1 2 3 4 }
print(a.intersection(b).format())  # {2 3 }
```

Behaviour worth knowing:

- `insert` returns `False` when the key is already present or, for a
  `SortedList` (and a list-backed `IntSet`), when it is full; `remove` returns
  `False` when the key is missing.
- `SortedList.index` raises `ValueError` for a missing key, and a negative
  capacity raises `ValueError`.
- `union` and `intersection` return new objects and leave their operands
  unchanged. On a `SortedList`, a non-empty result has its capacity trimmed to
  its length.
- `AVLTree.height()` is `-1` for an empty tree and `0` for a single key.
- `IntSet` raises `ValueError` for an unknown structure number and when
  combining a tree-backed set with a list-backed one. For a tree-backed set,
  `capacity` is only a size hint.
- `format()` renders keys in ascending order, each followed by a space,
  inside braces: `{1 2 3 }`; an empty set is `{}`.

## Command line

The `intsets` command reads whitespace-separated integers from standard
input:

1. the structure: `0` for the AVL tree, `1` for the sorted list;
2. the sizes of sets A and B;
3. the elements of A, then those of B;
4. an operation: `1` membership in A (followed by a key), `2` union,
   `3` intersection, `4` removal from A (followed by a key).

It prints both sets, then the result of the operation (`Pertence.` or
`Nao pertence.` for membership; for removal of a missing key,
`elemento nao esta no conjunto` before set A). Any other operation number
prints only the two sets. Missing or non-integer input makes it print an
error to standard error and exit with status 1.

```
echo "0 3 3 1 2 3 2 3 4 3" | intsets
```

prints both sets and then their intersection, `{2 3 }`.

The same processing is available as `intsets.cli.run(text)`, which returns
the output as a string.

## Limits

The command handles one operation per run and keeps nothing between runs;
sets are held in memory only.