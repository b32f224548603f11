"""An unbalanced binary search tree of unique integers with breadth-first traversal."""

__version__ = "0.1.0"
__all__ = ["bst"]