"""Bounded FIFO queues: a circular queue and a linear array queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class QueueOverflow(Exception):
    """Raised when a value is enqueued onto a full queue."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Queue Overflow: Cannot enqueue {value}")
        self.value = value


class QueueUnderflow(Exception):
    """Raised when an empty queue is dequeued or peeked."""


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError(f"capacity must be at least 1, got {capacity}")
    return capacity


class CircularQueue:
    """A fixed-capacity FIFO queue that reuses freed space."""

    def __init__(self, capacity: int = 5) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: deque[Any] = deque()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def enqueue(self, value: Any) -> None:
        if self.is_full():
            raise QueueOverflow(value)
        self._items.append(value)

    def dequeue(self) -> Any:
        if self.is_empty():
            raise QueueUnderflow("Queue Underflow: Cannot dequeue")
        return self._items.popleft()

    def peek(self) -> Any:
        if self.is_empty():
            raise QueueUnderflow("Queue is empty. Nothing to peek.")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)


class LinearQueue:
    """A fixed-capacity FIFO queue over a non-wrapping array.

    Space freed by dequeuing is reclaimed only once the queue is emptied,
    so the queue can be full while holding fewer items than its capacity.
    """

    def __init__(self, capacity: int = 5) -> None:
        self.capacity = _check_capacity(capacity)
        self._slots: list[Any] = []
        self._front = 0

    def is_empty(self) -> bool:
        return self._front >= len(self._slots)

    def is_full(self) -> bool:
        return len(self._slots) == self.capacity

    def enqueue(self, value: Any) -> None:
        if self.is_full():
            raise QueueOverflow(value)
        self._slots.append(value)

    def dequeue(self) -> Any:
        if self.is_empty():
            raise QueueUnderflow("Queue Underflow: Cannot dequeue")
        value = self._slots[self._front]
        self._front += 1
        if self.is_empty():
            self._slots, self._front = [], 0
        return value

    def peek(self) -> Any:
        if self.is_empty():
            raise QueueUnderflow("Queue is empty. Cannot peek.")
        return self._slots[self._front]

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[self._front:])