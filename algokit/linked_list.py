"""Singly linked list with reversal, rotation and cycle handling."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    data: int
    next: Optional[ListNode] = field(default=None, repr=False)


class LinkedList:
    """A singly linked list of integers."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Optional[ListNode] = None
        tail: Optional[ListNode] = None
        for value in values:
            node = ListNode(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def append(self, value: int) -> None:
        """Add ``value`` at the tail."""
        node = ListNode(value)
        if self.head is None:
            self.head = node
            return
        *_, tail = self._nodes()
        tail.next = node

    def prepend(self, value: int) -> None:
        """Add ``value`` at the head."""
        self.head = ListNode(value, self.head)

    def pop_front(self) -> int:
        """Remove and return the first value."""
        if self.head is None:
            raise IndexError("pop from empty list")
        node = self.head
        self.head = node.next
        return node.data

    def remove(self, value: int) -> None:
        """Remove the first node holding ``value``."""
        if self.head is None:
            raise ValueError(f"{value!r} not in list")
        if self.head.data == value:
            self.head = self.head.next
            return
        for node in self._nodes():
            if node.next is not None and node.next.data == value:
                node.next = node.next.next
                return
        raise ValueError(f"{value!r} not in list")

    def reverse(self) -> None:
        """Reverse the list in place, iteratively."""
        previous: Optional[ListNode] = None
        current = self.head
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self.head = previous

    def reverse_recursive(self) -> None:
        """Reverse the list in place, recursively."""

        def flip(node: Optional[ListNode]) -> Optional[ListNode]:
            if node is None or node.next is None:
                return node
            new_head = flip(node.next)
            node.next.next = node
            node.next = None
            return new_head

        self.head = flip(self.head)

    def reverse_in_groups(self, k: int) -> None:
        """Reverse every run of ``k`` nodes; a shorter final run is reversed too."""
        if k < 1:
            raise ValueError("k must be at least 1")
        new_head: Optional[ListNode] = None
        previous_tail: Optional[ListNode] = None
        current = self.head
        while current is not None:
            group_head = current
            previous: Optional[ListNode] = None
            count = 0
            while current is not None and count < k:
                current.next, previous, current = previous, current, current.next
                count += 1
            if previous_tail is None:
                new_head = previous
            else:
                previous_tail.next = previous
            previous_tail = group_head
        self.head = new_head

    def rotate(self, k: int) -> None:
        """Move the last ``k`` nodes to the front."""
        nodes = list(self._nodes())
        if not nodes:
            return
        k %= len(nodes)
        if k == 0:
            return
        new_tail = nodes[len(nodes) - k - 1]
        new_head = new_tail.next
        new_tail.next = None
        nodes[-1].next = self.head
        self.head = new_head

    def __contains__(self, value: object) -> bool:
        return any(node.data == value for node in self._nodes())

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self) + "NULL"


def _meeting_point(head: Optional[ListNode]) -> Optional[ListNode]:
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if fast is slow:
            return slow
    return None


def has_cycle(head: Optional[ListNode]) -> bool:
    """Return whether the chain starting at ``head`` loops back on itself."""
    return _meeting_point(head) is not None


def remove_cycle(head: Optional[ListNode]) -> bool:
    """Break a cycle reachable from ``head``; return whether one was found."""
    slow = _meeting_point(head)
    if slow is None:
        return False
    fast = head
    if fast is slow:
        while slow.next is not head:
            slow = slow.next
    else:
        while fast.next is not slow.next:
            fast = fast.next
            slow = slow.next
    slow.next = None
    return True