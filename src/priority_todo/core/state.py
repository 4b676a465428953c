# src/priority_todo/core/state.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ..tasks.ordering import sort_by_priority
from ..tasks.persistence import load_tasks, save_tasks
from ..tasks.task_models import CapacityError, MalformedLineError, Task, TaskFileError
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def resolve_list_path(settings, filename: str) -> Path:
    """Relative list names live under settings.lists_dir."""
    path = Path(filename).expanduser()
    if path.is_absolute():
        return path
    return Path(getattr(settings, "lists_dir", ".")) / path


class TodoSession:
    """
    One open list: a file path plus the store holding its tasks.

    The store is owned by the session and destroyed by close().
    """

    def __init__(self, path: str | Path, store: TaskStore) -> None:
        self.path = Path(path)
        self.store = store
        self.load_error: MalformedLineError | None = None
        self.closed = False

    @classmethod
    def create(cls, path: str | Path, settings) -> TodoSession:
        """Start an empty list. Nothing is read; an existing file is overwritten on save."""
        session = cls(path, TaskStore.from_settings(settings))
        logger.info("Created list %s", session.path)
        return session

    @classmethod
    def open(cls, path: str | Path, settings) -> TodoSession:
        """
        Load an existing list.

        TaskFileError propagates when the file cannot be read, and CapacityError
        when the list does not fit the store; the new store is released in both
        cases. A malformed line does not propagate: the session keeps the tasks
        read so far and exposes the error as `load_error`.
        """
        store = TaskStore.from_settings(settings)
        session = cls(path, store)
        try:
            load_tasks(store, session.path)
        except MalformedLineError as e:
            session.load_error = e
        except (TaskFileError, CapacityError):
            store.destroy()
            raise
        logger.info("Opened list %s (%d tasks)", session.path, store.count)
        return session

    # ---- operations used by the command layer ----

    def add(self, name: str, priority: int) -> bool:
        return self.store.add(name, priority)

    def delete(self, name: str) -> bool:
        return self.store.remove(name)

    def list_tasks(self) -> tuple[Task, ...]:
        """Sort by priority, then return the tasks in their new order."""
        sort_by_priority(self.store)
        return self.store.tasks()

    def save(self) -> int:
        return save_tasks(self.store, self.path)

    def close(self, *, save: bool = True) -> None:
        """Save (optionally) and release the store. Calling it again does nothing."""
        if self.closed:
            return
        try:
            if save:
                self.save()
        finally:
            self.store.destroy()
            self.closed = True
            logger.info("Closed list %s", self.path)


@dataclass
class AppState:
    settings: object
    session: TodoSession | None = None
