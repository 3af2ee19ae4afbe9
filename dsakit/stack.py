"""A bounded LIFO stack."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class StackOverflow(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflow(Exception):
    """Raised when popping or peeking an empty stack."""


class Stack:
    """A fixed-capacity LIFO stack. Iteration runs from top to bottom."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._items: list[Any] = []

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def push(self, value: Any) -> None:
        if self.is_full():
            raise StackOverflow("Stack is full.")
        self._items.append(value)

    def pop(self) -> Any:
        if self.is_empty():
            raise StackUnderflow("Stack is Empty.")
        return self._items.pop()

    def peek(self) -> Any:
        if self.is_empty():
            raise StackUnderflow("Stack is Empty.")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return reversed(self._items)