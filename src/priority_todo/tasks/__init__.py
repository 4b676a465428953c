from .ordering import quicksort, sort_by_priority
from .persistence import load_tasks, save_tasks
from .task_models import (
    CapacityError,
    InvalidPriorityError,
    MalformedLineError,
    Priority,
    StoreInitError,
    Task,
    TaskFileError,
    TodoError,
)
from .task_store import TaskStore

__all__ = [
    "CapacityError",
    "InvalidPriorityError",
    "MalformedLineError",
    "Priority",
    "StoreInitError",
    "Task",
    "TaskFileError",
    "TaskStore",
    "TodoError",
    "load_tasks",
    "quicksort",
    "save_tasks",
    "sort_by_priority",
]
