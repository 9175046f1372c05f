"""Stacks and queues built from one another, plus classic stack problems."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from typing import Generic, TypeVar

T = TypeVar("T")

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())
_OPERATORS = frozenset("+-*/")


class Stack(Generic[T]):
    """Last-in, first-out container."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> T:
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


class QueueUsingStacks(Generic[T]):
    """First-in, first-out queue kept in a stack whose top is the oldest item."""

    def __init__(self) -> None:
        self._main: Stack[T] = Stack()
        self._spare: Stack[T] = Stack()

    def enqueue(self, item: T) -> None:
        while self._main:
            self._spare.push(self._main.pop())
        self._main.push(item)
        while self._spare:
            self._main.push(self._spare.pop())

    def dequeue(self) -> T:
        if not self._main:
            raise IndexError("dequeue from an empty queue")
        return self._main.pop()

    def __len__(self) -> int:
        return len(self._main)


class StackUsingQueues(Generic[T]):
    """Last-in, first-out stack kept in a queue whose front is the newest item."""

    def __init__(self) -> None:
        self._main: deque[T] = deque()
        self._spare: deque[T] = deque()

    def push(self, item: T) -> None:
        self._spare.append(item)
        while self._main:
            self._spare.append(self._main.popleft())
        self._main, self._spare = self._spare, self._main

    def pop(self) -> T:
        if not self._main:
            raise IndexError("pop from an empty stack")
        return self._main.popleft()

    def __len__(self) -> int:
        return len(self._main)


def is_balanced(text: str) -> bool:
    """Return True if every bracket in ``text`` is closed by its matching kind."""
    opened: Stack[str] = Stack()
    for char in text:
        if char in _OPENERS:
            opened.push(char)
        elif char in _PAIRS:
            if not opened or opened.pop() != _PAIRS[char]:
                return False
    return not opened


def check_redundant_parentheses(text: str) -> bool:
    """Return True if some bracket pair in ``text`` directly encloses no operator.

    Raises ValueError if the brackets are not balanced.
    """
    pending: Stack[str] = Stack()
    depth = 0
    for char in text:
        if char in _PAIRS:
            opener = _PAIRS[char]
            has_operator = False
            while pending and pending.peek() != opener:
                if pending.pop() in _OPERATORS:
                    has_operator = True
            if not pending:
                raise ValueError(f"unmatched {char!r} in expression")
            pending.pop()
            depth -= 1
            if not has_operator:
                return True
        else:
            if char in _OPENERS:
                depth += 1
            pending.push(char)
    if depth:
        raise ValueError("unclosed bracket in expression")
    return False


def next_greater_elements(values: Sequence[int]) -> list[int | None]:
    """For each value, return the first later value that is larger, or None."""
    result: list[int | None] = [None] * len(values)
    pending: Stack[int] = Stack()
    for index, value in enumerate(values):
        while pending and values[pending.peek()] < value:
            result[pending.pop()] = value
        pending.push(index)
    return result


def smallest_nine_zero_multiple(num: int) -> int:
    """Return the smallest positive multiple of ``num`` written with only 9s and 0s."""
    if num <= 0:
        raise ValueError("num must be positive")
    candidates = deque([9])
    while True:
        candidate = candidates.popleft()
        if candidate % num == 0:
            return candidate
        candidates.append(candidate * 10)
        candidates.append(candidate * 10 + 9)