"""Binary search tree of unique values with parent links."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary search tree."""

    value: int
    left: Optional[TreeNode] = field(default=None, repr=False)
    right: Optional[TreeNode] = field(default=None, repr=False)
    parent: Optional[TreeNode] = field(default=None, repr=False)


class BinarySearchTree:
    """A binary search tree that ignores duplicate insertions."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Optional[TreeNode] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> bool:
        """Insert ``value``; return False if it was already present."""
        if self.root is None:
            self.root = TreeNode(value)
            self._size += 1
            return True
        current = self.root
        while True:
            if value == current.value:
                return False
            if value < current.value:
                if current.left is None:
                    current.left = TreeNode(value, parent=current)
                    break
                current = current.left
            else:
                if current.right is None:
                    current.right = TreeNode(value, parent=current)
                    break
                current = current.right
        self._size += 1
        return True

    def find(self, target: int) -> Optional[TreeNode]:
        """Return the node holding ``target`` (recursive search), or None."""

        def search(node: Optional[TreeNode]) -> Optional[TreeNode]:
            if node is None:
                return None
            if node.value == target:
                return node
            return search(node.left if target < node.value else node.right)

        return search(self.root)

    def find_iterative(self, target: int) -> Optional[TreeNode]:
        """Return the node holding ``target`` (iterative search), or None."""
        current = self.root
        while current is not None and current.value != target:
            current = current.left if target < current.value else current.right
        return current

    def remove(self, node: Optional[TreeNode]) -> None:
        """Remove ``node`` from the tree; a None node is ignored."""
        if self.root is None or node is None:
            return
        if self.find_iterative(node.value) is not node:
            raise ValueError("node does not belong to this tree")
        self._splice(node)
        self._size -= 1

    def discard(self, value: int) -> bool:
        """Remove the node holding ``value``; return whether one was removed."""
        node = self.find_iterative(value)
        if node is None:
            return False
        self.remove(node)
        return True

    def _replace(self, node: TreeNode, replacement: Optional[TreeNode]) -> None:
        parent = node.parent
        if parent is None:
            self.root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement

    def _splice(self, node: TreeNode) -> None:
        if node.left is None or node.right is None:
            child = node.left if node.left is not None else node.right
            if child is not None:
                child.parent = node.parent
            self._replace(node, child)
        else:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            self._splice(successor)
            self._replace(node, successor)
            successor.parent = node.parent
            successor.left = node.left
            node.left.parent = successor
            successor.right = node.right
            if node.right is not None:
                node.right.parent = successor
        node.left = node.right = node.parent = None

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.find_iterative(value) is not None

    def __iter__(self) -> Iterator[int]:
        stack: list[TreeNode] = []
        current = self.root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current.value
            current = current.right

    def __len__(self) -> int:
        return self._size