# src/priority_todo/tasks/persistence.py

"""
Plain-text list files.

One task per line, `name,priority,completed`, integers in decimal:

    Write report,1,0
    Buy milk,2,0

Writes are not atomic: the file is truncated first, so a failure half-way
leaves a short file behind.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from .task_models import SEPARATOR, MalformedLineError, Task, TaskFileError
from .task_store import TaskStore

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_int_lenient(raw: str) -> int:
    """Leading digits (after optional whitespace and sign) as an int, else 0."""
    m = _LEADING_INT.match(raw)
    return int(m.group(1)) if m else 0


def parse_line(line: str) -> tuple[str, int, int] | None:
    """
    Split one record into (name, priority, completed).

    Empty fields are skipped and anything after the third field is ignored,
    so `a,,1` has only two fields. Returns None for fewer than three.
    """
    fields = [f for f in line.split(SEPARATOR) if f]
    if len(fields) < 3:
        return None
    name, priority, completed = fields[:3]
    return name, parse_int_lenient(priority), parse_int_lenient(completed)


def save_tasks(store: TaskStore, path: str | Path) -> int:
    """Write every task in current order. Returns the number of lines written."""
    path = Path(path)
    written = 0
    try:
        with path.open("w", encoding="utf-8") as fp:
            for task in store:
                fp.write(task.to_line())
                written += 1
    except OSError as e:
        raise TaskFileError(path, f"cannot write list file ({e.strerror or e})") from e

    logger.info("Saved %d tasks to %s", written, path)
    return written


def load_tasks(store: TaskStore, path: str | Path) -> int:
    """
    Append the tasks in `path` to `store`. Returns how many were appended.

    Raises:
    - TaskFileError if the file cannot be opened or read (store untouched)
    - MalformedLineError at the first line without three fields; tasks from
      earlier lines stay in the store
    - CapacityError if the store cannot grow; tasks appended before it stay
    """
    path = Path(path)
    # Decode everything up front so read errors never leave a half-filled store.
    try:
        with path.open("r", encoding="utf-8") as fp:
            lines = fp.readlines()
    except (OSError, UnicodeDecodeError) as e:
        reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
        raise TaskFileError(path, f"cannot read list file ({reason})") from e

    loaded = 0
    for line_no, raw in enumerate(lines, start=1):
        line = raw.rstrip("\n")
        parsed = parse_line(line)
        if parsed is None:
            logger.warning(
                "Malformed line %d in %s, stopped after %d tasks", line_no, path, loaded
            )
            raise MalformedLineError(path, line_no, line)

        name, priority, completed = parsed
        store.append(
            Task(
                name=name[: store.name_max_length],
                priority=priority,
                completed=completed,
            )
        )
        loaded += 1

    logger.info("Loaded %d tasks from %s", loaded, path)
    return loaded
