# src/priority_todo/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

SEPARATOR = ","


class TodoError(Exception):
    """Base class for task list errors."""


class StoreInitError(TodoError):
    """The store could not get its initial buffer. The app cannot start."""


class CapacityError(TodoError):
    """Growing the store failed. The mutation in progress was abandoned."""


class TaskFileError(TodoError):
    """A list file could not be opened, read or written."""

    def __init__(self, path: str | Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = Path(path)


class MalformedLineError(TaskFileError):
    """A line in a list file did not hold three fields. Loading stopped there."""

    def __init__(self, path: str | Path, line_no: int, line: str) -> None:
        super().__init__(path, f"line {line_no} is malformed: {line!r}")
        self.line_no = line_no
        self.line = line


class InvalidPriorityError(ValueError):
    pass


class Priority(IntEnum):
    """
    Ordinal urgency, 1 is the most urgent.

    Only interactive input is validated against this enum. Stored tasks keep
    whatever integer they were loaded with.
    """

    HIGH = 1
    MEDIUM = 2
    LOW = 3

    @classmethod
    def parse(cls, raw: str) -> Priority:
        try:
            value = int(raw.strip())
        except (AttributeError, ValueError):
            raise InvalidPriorityError(
                "Priority must be an integer between 1 and 3."
            ) from None
        try:
            return cls(value)
        except ValueError:
            raise InvalidPriorityError(
                "Priority must be an integer between 1 and 3."
            ) from None


@dataclass(frozen=True, slots=True)
class Task:
    name: str
    priority: int
    completed: int = 0

    def to_line(self) -> str:
        return f"{self.name}{SEPARATOR}{self.priority:d}{SEPARATOR}{self.completed:d}\n"


def sanitize_name(name: str, *, max_length: int, substitute: str = ";") -> str:
    """Truncate to `max_length`; replace separators and line breaks so the name fits one field."""
    clean = name[:max_length]
    for ch in (SEPARATOR, "\n", "\r"):
        clean = clean.replace(ch, substitute)
    return clean
