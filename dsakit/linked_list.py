"""Singly linked list with the classic pointer-manipulation operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, repr=False)
class Node:
    """A list cell holding a value and a link to the next cell."""

    value: Any
    next: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


def _reverse(head: Node | None) -> Node | None:
    previous = None
    current = head
    while current is not None:
        following = current.next
        current.next = previous
        previous = current
        current = following
    return previous


def _first_half_end(head: Node) -> Node:
    """Return the last node of the first half; an odd middle stays in the first half."""
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def _length(head: Node | None) -> int:
    count = 0
    while head is not None:
        count += 1
        head = head.next
    return count


class LinkedList:
    """Singly linked list whose first node is ``head``."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        tail: Node | None = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        node = Node(value)
        if self.head is None:
            self.head = node
            return
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = node

    def __iter__(self) -> Iterator[Any]:
        seen: set[int] = set()
        node = self.head
        while node is not None:
            if id(node) in seen:
                raise ValueError("the list contains a cycle")
            seen.add(id(node))
            yield node.value
            node = node.next

    def _meeting_point(self) -> Node | None:
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
            if slow is fast:
                return slow
        return None

    def has_cycle(self) -> bool:
        """Return True if following the links eventually revisits a node."""
        return self._meeting_point() is not None

    def cycle_start(self) -> Node | None:
        """Return the first node of the cycle, or None if there is no cycle."""
        meeting = self._meeting_point()
        if meeting is None:
            return None
        walker = self.head
        while walker is not meeting:
            walker = walker.next
            meeting = meeting.next
        return walker

    def cycle_length(self) -> int | None:
        """Return the number of nodes in the cycle, or None if there is no cycle."""
        start = self.cycle_start()
        if start is None:
            return None
        count = 1
        node = start.next
        while node is not start:
            count += 1
            node = node.next
        return count

    def delete_node(self, node: Node) -> None:
        """Remove ``node`` by copying its successor into it."""
        successor = node.next
        if successor is None:
            raise ValueError("the last node cannot be deleted without its predecessor")
        node.value = successor.value
        node.next = successor.next

    def delete_from_end(self, position: int) -> None:
        """Remove the ``position``-th node counted from the end (1 is the last)."""
        if position < 1:
            raise ValueError("position must be at least 1")
        lead = self.head
        for _ in range(position):
            if lead is None:
                raise ValueError(f"position {position} is beyond the list length")
            lead = lead.next
        if lead is None:
            self.head = self.head.next
            return
        trail = self.head
        while lead.next is not None:
            lead = lead.next
            trail = trail.next
        trail.next = trail.next.next

    def intersection_point(self, other_head: Node | None) -> Node | None:
        """Return the first node shared with the list starting at ``other_head``."""
        first, second = self.head, other_head
        first_length, second_length = _length(first), _length(second)
        for _ in range(first_length - second_length):
            first = first.next
        for _ in range(second_length - first_length):
            second = second.next
        while first is not second:
            first = first.next
            second = second.next
        return first

    def merge_sorted(self, other: LinkedList) -> None:
        """Splice the nodes of sorted ``other`` into this sorted list, emptying ``other``."""
        if other is self:
            raise ValueError("cannot merge a list with itself")
        dummy = Node(None)
        tail = dummy
        first, second = self.head, other.head
        while first is not None and second is not None:
            if first.value <= second.value:
                tail.next = first
                first = first.next
            else:
                tail.next = second
                second = second.next
            tail = tail.next
        tail.next = first if first is not None else second
        self.head = dummy.next
        other.head = None

    def middle(self) -> Any:
        """Return the middle value; for an even length, the first of the two middles."""
        if self.head is None:
            raise ValueError("middle of an empty list")
        slow = self.head
        fast = self.head.next
        while fast is not None and fast.next is not None:
            fast = fast.next.next
            slow = slow.next
        return slow.value

    def is_palindrome(self) -> bool:
        """Return True if the values read the same both ways; the list is left intact."""
        if self.head is None or self.head.next is None:
            return True
        first_end = _first_half_end(self.head)
        second = _reverse(first_end.next)
        result = True
        left, right = self.head, second
        while right is not None:
            if left.value != right.value:
                result = False
                break
            left = left.next
            right = right.next
        first_end.next = _reverse(second)
        return result

    def remove_duplicates(self) -> None:
        """Drop repeated neighbours, leaving one of each run in a sorted list."""
        node = self.head
        while node is not None and node.next is not None:
            if node.next.value == node.value:
                node.next = node.next.next
            else:
                node = node.next

    def reverse(self) -> None:
        """Reverse the list in place."""
        self.head = _reverse(self.head)

    def reverse_in_groups(self, k: int) -> None:
        """Reverse each full group of ``k`` nodes; a shorter tail stays as it is."""
        if k < 1:
            raise ValueError("k must be at least 1")
        remaining = _length(self.head)
        dummy = Node(None, self.head)
        before = dummy
        while remaining >= k:
            current = before.next
            for _ in range(k - 1):
                moved = current.next
                current.next = moved.next
                moved.next = before.next
                before.next = moved
            before = current
            remaining -= k
        self.head = dummy.next

    def rotate_right(self, k: int) -> None:
        """Move the last ``k`` nodes to the front."""
        if k < 0:
            raise ValueError("k must not be negative")
        if self.head is None:
            return
        tail = self.head
        size = 1
        while tail.next is not None:
            tail = tail.next
            size += 1
        k %= size
        if k == 0:
            return
        new_tail = self.head
        for _ in range(size - k - 1):
            new_tail = new_tail.next
        new_head = new_tail.next
        new_tail.next = None
        tail.next = self.head
        self.head = new_head

    def interleave_halves(self) -> None:
        """Reorder to first, last, second, second-to-last, ... in place."""
        if self.head is None or self.head.next is None:
            return
        first_end = _first_half_end(self.head)
        second = _reverse(first_end.next)
        first_end.next = None
        first = self.head
        while first is not None and second is not None:
            first_next, second_next = first.next, second.next
            first.next = second
            second.next = first_next
            first, second = first_next, second_next