# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from priority_todo.core.state import AppState
from priority_todo.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the store, session and console.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="priority-todo",
        log_level="WARNING",
        data_dir=tmp_path / "data",
        lists_dir=tmp_path,
        initial_capacity=10,
        max_capacity=None,
        name_max_length=99,
        separator_substitute=";",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore.from_settings(settings)


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return AppState(settings=settings)
