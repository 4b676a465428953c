# tests/test_persistence.py

from __future__ import annotations

from pathlib import Path

import pytest

from priority_todo.tasks.ordering import sort_by_priority
from priority_todo.tasks.persistence import (
    load_tasks,
    parse_int_lenient,
    parse_line,
    save_tasks,
)
from priority_todo.tasks.task_models import (
    CapacityError,
    MalformedLineError,
    Task,
    TaskFileError,
)
from priority_todo.tasks.task_store import TaskStore


def test_save_writes_one_line_per_task_in_current_order(tmp_path: Path, store: TaskStore) -> None:
    store.add("Buy milk", 2)
    store.add("Write report", 1)
    path = tmp_path / "todo.txt"

    assert save_tasks(store, path) == 2
    assert path.read_text("utf-8") == "Buy milk,2,0\nWrite report,1,0\n"

    sort_by_priority(store)
    save_tasks(store, path)
    assert path.read_text("utf-8") == "Write report,1,0\nBuy milk,2,0\n"


def test_save_empty_store_truncates(tmp_path: Path, store: TaskStore) -> None:
    path = tmp_path / "todo.txt"
    path.write_text("old,1,0\n", "utf-8")

    assert save_tasks(store, path) == 0
    assert path.read_text("utf-8") == ""


def test_save_to_missing_directory_fails(tmp_path: Path, store: TaskStore) -> None:
    store.add("a", 1)
    with pytest.raises(TaskFileError):
        save_tasks(store, tmp_path / "no-such-dir" / "todo.txt")
    assert store.count == 1


def test_round_trip_keeps_triples_and_order(tmp_path: Path, settings) -> None:
    original = TaskStore.from_settings(settings)
    original.add("Buy milk", 2)
    original.add("Write report", 1)
    original.add("Call dentist", 3)
    original.add("n" * 120, 2)
    original.append(Task("Already done", 1, 1))
    sort_by_priority(original)

    path = tmp_path / "todo.txt"
    save_tasks(original, path)

    reloaded = TaskStore.from_settings(settings)
    assert load_tasks(reloaded, path) == original.count
    assert reloaded.tasks() == original.tasks()


def test_example_end_to_end(tmp_path: Path, settings) -> None:
    store = TaskStore.from_settings(settings)
    store.add("Buy milk", 2)
    store.add("Write report", 1)
    store.add("Call dentist", 3)
    sort_by_priority(store)
    path = tmp_path / "todo.txt"
    save_tasks(store, path)

    loaded = TaskStore.from_settings(settings)
    load_tasks(loaded, path)

    assert [t.name for t in loaded] == ["Write report", "Buy milk", "Call dentist"]


def test_load_missing_file_fails_and_leaves_store_alone(tmp_path: Path, store: TaskStore) -> None:
    store.add("keep", 1)
    with pytest.raises(TaskFileError) as exc_info:
        load_tasks(store, tmp_path / "missing.txt")

    assert not isinstance(exc_info.value, MalformedLineError)
    assert store.tasks() == (Task("keep", 1),)


def test_malformed_second_line_keeps_first_and_stops(tmp_path: Path, store: TaskStore) -> None:
    path = tmp_path / "todo.txt"
    path.write_text("first,1,0\nsecond,2\nthird,3,0\n", "utf-8")

    with pytest.raises(MalformedLineError) as exc_info:
        load_tasks(store, path)

    assert exc_info.value.line_no == 2
    assert exc_info.value.line == "second,2"
    assert store.tasks() == (Task("first", 1, 0),)


def test_blank_line_is_malformed(tmp_path: Path, store: TaskStore) -> None:
    path = tmp_path / "todo.txt"
    path.write_text("a,1,0\n\nb,2,0\n", "utf-8")

    with pytest.raises(MalformedLineError):
        load_tasks(store, path)
    assert store.count == 1


def test_load_is_lenient_about_numbers(tmp_path: Path, store: TaskStore) -> None:
    path = tmp_path / "todo.txt"
    path.write_text("a,7,0\nb,high,x\nc, 2abc,1\nd,-1,0,extra\n", "utf-8")

    assert load_tasks(store, path) == 4
    assert store.tasks() == (
        Task("a", 7, 0),
        Task("b", 0, 0),
        Task("c", 2, 1),
        Task("d", -1, 0),
    )


def test_load_truncates_long_names(tmp_path: Path, store: TaskStore) -> None:
    path = tmp_path / "todo.txt"
    path.write_text("y" * 200 + ",1,0\n", "utf-8")

    load_tasks(store, path)
    assert store[0].name == "y" * 99


def test_load_grows_store_and_reports_capacity_failure(tmp_path: Path) -> None:
    path = tmp_path / "todo.txt"
    path.write_text("".join(f"t{i},1,0\n" for i in range(5)), "utf-8")

    roomy = TaskStore(2)
    assert load_tasks(roomy, path) == 5
    assert roomy.capacity == 8

    tight = TaskStore(2, max_capacity=4)
    with pytest.raises(CapacityError):
        load_tasks(tight, path)
    assert tight.count == 4


@pytest.mark.parametrize(
    "line,expected",
    [
        ("a,1,0", ("a", 1, 0)),
        (",a,1,0", ("a", 1, 0)),
        ("a,,1,0", ("a", 1, 0)),
        ("a,,1", None),
        ("a,1", None),
        ("", None),
    ],
)
def test_parse_line_skips_empty_fields(line: str, expected) -> None:
    assert parse_line(line) == expected


@pytest.mark.parametrize(
    "raw,expected",
    [("3", 3), ("  12x", 12), ("+4", 4), ("-2", -2), ("abc", 0), ("", 0)],
)
def test_parse_int_lenient(raw: str, expected: int) -> None:
    assert parse_int_lenient(raw) == expected


def test_undecodable_file_leaves_store_untouched(tmp_path: Path, store: TaskStore) -> None:
    path = tmp_path / "todo.txt"
    path.write_bytes(b"".join(b"t%d,1,0\n" % i for i in range(2000)) + b"\xff\xfe,1,0\n")
    store.add("keep", 2)

    with pytest.raises(TaskFileError):
        load_tasks(store, path)

    assert store.tasks() == (Task("keep", 2),)


def test_line_breaks_in_names_do_not_split_records(tmp_path: Path, settings) -> None:
    store = TaskStore.from_settings(settings)
    store.add("first\nsecond\r", 1)
    path = tmp_path / "todo.txt"
    save_tasks(store, path)

    assert path.read_text("utf-8") == "first;second;,1,0\n"
    reloaded = TaskStore.from_settings(settings)
    assert load_tasks(reloaded, path) == 1
    assert reloaded.tasks() == store.tasks()
