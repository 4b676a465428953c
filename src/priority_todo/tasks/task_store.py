# src/priority_todo/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterator

from ..config import DEFAULT_INITIAL_CAPACITY, DEFAULT_NAME_MAX_LENGTH, DEFAULT_SEPARATOR_SUBSTITUTE
from .task_models import CapacityError, StoreInitError, Task, sanitize_name

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Growable, ordered array of tasks for one open list.

    Storage is a fixed-size slot buffer that doubles when full, so the
    capacity seen from outside is always initial_capacity * 2**k.

    Invariants (hold on every exit path, including errors):
    - count <= capacity
    - capacity == len(buffer)
    - slots [0, count) hold tasks, the rest hold None
    """

    def __init__(
        self,
        initial_capacity: int = DEFAULT_INITIAL_CAPACITY,
        *,
        max_capacity: int | None = None,
        name_max_length: int = DEFAULT_NAME_MAX_LENGTH,
        separator_substitute: str = DEFAULT_SEPARATOR_SUBSTITUTE,
    ) -> None:
        if initial_capacity < 1:
            raise StoreInitError(f"initial capacity must be positive, got {initial_capacity}")
        if max_capacity is not None and max_capacity < initial_capacity:
            raise StoreInitError(
                f"max capacity {max_capacity} is below initial capacity {initial_capacity}"
            )

        try:
            self._slots: list[Task | None] = [None] * initial_capacity
        except MemoryError as e:
            raise StoreInitError("failed to allocate task storage") from e

        self._count = 0
        self._capacity = initial_capacity
        self._initial_capacity = initial_capacity
        self._max_capacity = max_capacity
        self.name_max_length = name_max_length
        self.separator_substitute = separator_substitute
        logger.debug("TaskStore ready capacity=%d", initial_capacity)

    @classmethod
    def from_settings(cls, settings) -> TaskStore:
        return cls(
            settings.initial_capacity,
            max_capacity=settings.max_capacity,
            name_max_length=settings.name_max_length,
            separator_substitute=settings.separator_substitute,
        )

    # ---- read access ----

    @property
    def count(self) -> int:
        return self._count

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Task]:
        for i in range(self._count):
            yield self._slots[i]  # type: ignore[misc]

    def _index(self, index: int) -> int:
        if index < 0:
            index += self._count
        if not 0 <= index < self._count:
            raise IndexError("task index out of range")
        return index

    def __getitem__(self, index: int) -> Task:
        return self._slots[self._index(index)]  # type: ignore[return-value]

    def __setitem__(self, index: int, task: Task) -> None:
        # Reordering only: the slot must already be occupied.
        self._slots[self._index(index)] = task

    def tasks(self) -> tuple[Task, ...]:
        """Snapshot of the current order."""
        return tuple(self)

    # ---- capacity ----

    def ensure_capacity(self) -> None:
        """
        Make room for one more task, doubling the buffer when it is full.

        Raises CapacityError (and changes nothing) when the buffer cannot grow.
        """
        if self._count < self._capacity:
            return

        new_capacity = self._capacity * 2 if self._capacity else self._initial_capacity
        if self._max_capacity is not None and new_capacity > self._max_capacity:
            raise CapacityError(
                f"cannot grow past {self._max_capacity} tasks (count={self._count})"
            )
        try:
            grown = self._slots + [None] * (new_capacity - self._capacity)
        except MemoryError as e:
            raise CapacityError(f"failed to grow storage to {new_capacity} tasks") from e

        self._slots = grown
        self._capacity = new_capacity
        logger.debug("TaskStore grew capacity=%d", new_capacity)

    # ---- mutators ----

    def append(self, task: Task) -> None:
        """Append an already-built task. Raises CapacityError if there is no room."""
        self.ensure_capacity()
        self._slots[self._count] = task
        self._count += 1

    def add(self, name: str, priority: int) -> bool:
        """
        Add a new, not completed task at the end of the list.

        Returns False when the store could not grow (the list is unchanged).
        """
        clean = sanitize_name(
            name, max_length=self.name_max_length, substitute=self.separator_substitute
        )
        if not clean:
            raise ValueError("task name is required")

        try:
            self.append(Task(name=clean, priority=int(priority), completed=0))
        except CapacityError:
            logger.warning("Task not added, store is full: %r", clean)
            return False

        logger.debug("Task added name=%r priority=%s count=%d", clean, priority, self._count)
        return True

    def remove(self, name: str) -> bool:
        """Remove the first task named exactly `name`. Returns whether one was found."""
        for i in range(self._count):
            if self._slots[i].name == name:  # type: ignore[union-attr]
                for j in range(i, self._count - 1):
                    self._slots[j] = self._slots[j + 1]
                self._count -= 1
                self._slots[self._count] = None
                logger.debug("Task removed name=%r count=%d", name, self._count)
                return True
        return False

    def destroy(self) -> None:
        """Drop every task and the buffer itself. Safe to call twice."""
        self._slots = []
        self._count = 0
        self._capacity = 0
