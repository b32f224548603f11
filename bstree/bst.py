"""A binary search tree of integers with level-order traversal."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Optional

EMPTY_TREE_TEXT = "(空树)"


def _address(node: Optional["Node"]) -> str:
    return "0" if node is None else hex(id(node))


@dataclass(eq=False)
class Node:
    """A tree node holding an integer value and two child links.

    Nodes compare with integers by their value, on either side of the
    operator. Two nodes compare by identity.
    """

    value: int = 0
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    def __str__(self) -> str:
        return (
            f"{_address(self)} => value:{self.value} "
            f"left:{_address(self.left)} right:{_address(self.right)}"
        )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, int) and not isinstance(other, bool):
            return self.value == other
        return NotImplemented

    __hash__ = object.__hash__

    def __gt__(self, other: int) -> bool:
        if isinstance(other, int):
            return self.value > other
        return NotImplemented

    def __ge__(self, other: int) -> bool:
        if isinstance(other, int):
            return self.value >= other
        return NotImplemented

    def __lt__(self, other: int) -> bool:
        if isinstance(other, int):
            return self.value < other
        return NotImplemented

    def __le__(self, other: int) -> bool:
        if isinstance(other, int):
            return self.value <= other
        return NotImplemented


class BST:
    """An unbalanced binary search tree of distinct integers."""

    def __init__(self) -> None:
        self.root: Optional[Node] = None

    def __iter__(self) -> Iterator[Node]:
        """Yield the nodes in breadth-first (level) order."""
        if self.root is None:
            return
        queue = deque([self.root])
        while queue:
            current = queue.popleft()
            yield current
            if current.left is not None:
                queue.append(current.left)
            if current.right is not None:
                queue.append(current.right)

    def bfs(self, func: Callable[[Node], object]) -> None:
        """Call ``func`` on every node in breadth-first order."""
        for node in self:
            func(node)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def add_node(self, value: int) -> bool:
        """Insert ``value``; return False if it is already present."""
        if self.root is None:
            self.root = Node(value)
            return True
        current = self.root
        while True:
            if value == current.value:
                return False
            if value < current.value:
                if current.left is None:
                    current.left = Node(value)
                    return True
                current = current.left
            else:
                if current.right is None:
                    current.right = Node(value)
                    return True
                current = current.right

    def find_node(self, value: int) -> Optional[Node]:
        """Return the node holding ``value``, or None."""
        current = self.root
        while current is not None:
            if value == current.value:
                return current
            current = current.left if value < current.value else current.right
        return None

    def find_parent(self, value: int) -> Optional[Node]:
        """Return the parent of the node holding ``value``.

        None is returned when the value is absent or sits at the root.
        """
        parent: Optional[Node] = None
        current = self.root
        while current is not None:
            if value < current.value:
                parent, current = current, current.left
            elif value > current.value:
                parent, current = current, current.right
            else:
                return parent
        return None

    def __str__(self) -> str:
        if self.root is None:
            return EMPTY_TREE_TEXT
        lines = []
        level = [self.root]
        while level:
            lines.append("".join(f"{node.value} " for node in level))
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return "".join(line + "\n" for line in lines)