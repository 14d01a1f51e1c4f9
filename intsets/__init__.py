"""Integer sets backed by an AVL tree or a bounded sorted list, with a command-line driver."""

__version__ = "0.1.0"
__all__ = ["avl", "sorted_list", "intset", "cli"]