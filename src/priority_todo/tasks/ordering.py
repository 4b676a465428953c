# src/priority_todo/tasks/ordering.py

"""
Priority ordering for task lists.

Quicksort with a Lomuto partition and the last element of each range as the
pivot. Not stable: tasks of equal priority may swap places.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, TypeVar

from .task_models import Task
from .task_store import TaskStore

T = TypeVar("T")


class IndexedItems(Protocol[T]):
    def __len__(self) -> int: ...

    def __getitem__(self, index: int) -> T: ...

    def __setitem__(self, index: int, value: T) -> None: ...


def _partition(items: IndexedItems[T], low: int, high: int, key: Callable[[T], Any]) -> int:
    pivot = key(items[high])
    i = low - 1
    for j in range(low, high):
        if key(items[j]) < pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[high] = items[high], items[i + 1]
    return i + 1


def quicksort(
    items: IndexedItems[T],
    key: Callable[[T], Any],
    low: int = 0,
    high: int | None = None,
) -> None:
    """
    Sort items[low..high] (inclusive) in place by `key`.

    Recurses into the smaller side and loops on the larger one, so the stack
    stays O(log n) even on all-equal or reversed input.
    """
    if high is None:
        high = len(items) - 1

    while low < high:
        p = _partition(items, low, high, key)
        if p - low < high - p:
            quicksort(items, key, low, p - 1)
            low = p + 1
        else:
            quicksort(items, key, p + 1, high)
            high = p - 1


def _priority(task: Task) -> int:
    return task.priority


def sort_by_priority(store: TaskStore) -> None:
    """Reorder the store in place, most urgent (lowest number) first."""
    if len(store) < 2:
        return
    quicksort(store, _priority)
