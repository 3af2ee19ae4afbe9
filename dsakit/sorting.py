"""Classic comparison sorts and a small mark-statistics helper.

Every sort takes any iterable and returns a new list, leaving its input alone.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort ascending by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for r in range(end):
            if items[r] > items[r + 1]:
                items[r], items[r + 1] = items[r + 1], items[r]
    return items


def insertion_sort(values: Iterable[Any], descending: bool = False) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and (current > items[j] if descending else current < items[j]):
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def selection_sort(values: Iterable[Any], descending: bool = False) -> list[Any]:
    """Sort by repeatedly selecting the smallest (or largest) remaining element."""
    items = list(values)
    for i in range(len(items) - 1):
        best = i
        for j in range(i + 1, len(items)):
            if (items[j] > items[best]) if descending else (items[best] > items[j]):
                best = j
        items[i], items[best] = items[best], items[i]
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Sort ascending by splitting in halves and merging the sorted halves."""
    items = list(values)
    if len(items) < 2:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[high]
    i = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[high] = items[high], items[i + 1]
    return i + 1


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Sort ascending with quicksort, using the last element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(items, low, high)
            pending.append((pivot + 1, high))
            pending.append((low, pivot - 1))
    return items


def sort_string(text: str) -> str:
    """Return the characters of text in ascending code-point order."""
    return "".join(bubble_sort(text))


def average_mark(marks: Iterable[int]) -> float:
    """Average of integer marks, truncated toward zero as integer division does."""
    items = list(marks)
    if not items:
        raise ValueError("cannot average an empty list of marks")
    total = sum(items)
    quotient = abs(total) // len(items)
    return float(quotient if total >= 0 else -quotient)


def marks_above_average(marks: Iterable[int]) -> list[int]:
    """Marks strictly greater than average_mark, in their given order."""
    items = list(marks)
    avg = average_mark(items)
    return [mark for mark in items if mark > avg]