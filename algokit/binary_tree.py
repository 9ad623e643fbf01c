"""Binary tree traversals and measurements."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer."""

    data: int
    left: Optional[Node] = field(default=None, repr=False)
    right: Optional[Node] = field(default=None, repr=False)


def preorder(root: Optional[Node]) -> list[int]:
    """Return the node values in root, left, right order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def _levels(root: Optional[Node]) -> Iterator[list[Node]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def level_order(root: Optional[Node]) -> list[int]:
    """Return the node values level by level, left to right."""
    result: list[int] = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        result.append(node.data)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return result


def sum_at_level(root: Optional[Node], k: int) -> int:
    """Return the sum of the values on level ``k`` (the root is level 0)."""
    if root is None:
        raise ValueError("tree is empty")
    for depth, level in enumerate(_levels(root)):
        if depth == k:
            return sum(node.data for node in level)
    return 0


def sum_of_nodes(root: Optional[Node]) -> int:
    """Return the sum of all values in the tree."""
    if root is None:
        return 0
    return sum_of_nodes(root.left) + sum_of_nodes(root.right) + root.data


def count_nodes(root: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    if root is None:
        return 0
    return count_nodes(root.left) + count_nodes(root.right) + 1


def height(root: Optional[Node]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def diameter(root: Optional[Node]) -> int:
    """Return the number of nodes on the longest path between two nodes."""
    if root is None:
        return 0
    through_root = height(root.left) + height(root.right) + 1
    return max(through_root, diameter(root.left), diameter(root.right))


def diameter_and_height(root: Optional[Node]) -> tuple[int, int]:
    """Return ``(diameter, height)`` in a single pass over the tree."""
    if root is None:
        return 0, 0
    left_dia, left_height = diameter_and_height(root.left)
    right_dia, right_height = diameter_and_height(root.right)
    through_root = left_height + right_height + 1
    return (
        max(left_dia, right_dia, through_root),
        max(left_height, right_height) + 1,
    )