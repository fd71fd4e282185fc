"""Tests for TaskStore."""

import logging
import random

import pytest

from task_cli.errors import InvalidPriority, InvalidTaskType
from task_cli.storage import TaskFile
from task_cli.store import STARTING_FRESH, TaskStore
from task_cli.task import TaskKind


def titles(store):
    return [task.title for task in store.list()]


class TestAdd:
    """Tests for adding tasks."""

    def test_add_returns_success(self, store):
        result = store.add("Work", "Fix bug", "desc", "2024-01-01", 1, "Proj")

        assert result.success
        assert result.message == "Task added successfully!"
        assert result.task.title == "Fix bug"
        assert result.warning is None
        assert len(store) == 1

    def test_list_is_sorted_by_priority(self, store):
        store.add("Personal", "low", "", "", 3)
        store.add("Work", "high", "", "", 1)
        store.add("Work", "medium", "", "", 2)

        assert titles(store) == ["high", "medium", "low"]

    def test_ties_keep_insertion_order(self, store):
        store.add("Work", "first", "", "", 2)
        store.add("Personal", "second", "", "", 2)
        store.add("Work", "urgent", "", "", 1)
        store.add("Work", "third", "", "", 2)

        assert titles(store) == ["urgent", "first", "second", "third"]

    def test_any_add_sequence_is_non_decreasing(self, tmp_path):
        rng = random.Random(1234)
        store = TaskStore(TaskFile(tmp_path / "tasks.txt"))
        for i in range(50):
            store.add(rng.choice(["Work", "Personal"]), f"t{i}", "", "", rng.randint(1, 3))

        priorities = [task.priority for task in store.list()]
        assert priorities == sorted(priorities)
        assert len(priorities) == 50

    def test_invalid_kind_leaves_store_unchanged(self, store):
        store.add("Work", "keep", "", "", 2)
        before = list(store.list())
        before_file = store.task_file.path.read_text(encoding="utf-8")

        with pytest.raises(InvalidTaskType):
            store.add("Bogus", "nope", "", "", 1)

        assert list(store.list()) == before
        assert store.task_file.path.read_text(encoding="utf-8") == before_file

    def test_legacy_kind_label_rejected_on_add(self, store):
        """The older "Work Task" label is only understood when reading a file."""
        store.add("Work", "keep", "", "", 2)
        before = list(store.list())
        before_file = store.task_file.path.read_text(encoding="utf-8")

        with pytest.raises(InvalidTaskType):
            store.add("Work Task", "t", "d", "x", 1, "")

        assert list(store.list()) == before
        assert store.task_file.path.read_text(encoding="utf-8") == before_file

    def test_out_of_range_priority_accepted(self, store):
        store.add("Work", "odd", "", "", 0)
        store.add("Work", "normal", "", "", 1)
        store.add("Work", "way down", "", "", 99)

        assert titles(store) == ["odd", "normal", "way down"]

    def test_strict_priority_rejects(self, task_file):
        store = TaskStore(task_file, strict_priority=True)

        with pytest.raises(InvalidPriority):
            store.add("Work", "odd", "", "", 7)

        assert len(store) == 0
        assert not task_file.exists()

    def test_add_persists(self, store):
        store.add("Work", "Fix bug", "desc", "2024-01-01", 1, "Proj")

        assert store.task_file.read_lines() == ["Work,Fix bug,desc,2024-01-01,1,Proj"]


class TestList:
    """Tests for enumeration."""

    def test_list_is_restartable(self, store):
        store.add("Work", "a", "", "", 1)
        store.add("Work", "b", "", "", 2)

        first = list(store.list())
        second = list(store.list())

        assert first == second
        assert len(first) == 2

    def test_list_is_lazy_snapshot(self, store):
        store.add("Work", "a", "", "", 1)
        iterator = store.list()
        store.add("Work", "b", "", "", 2)

        assert [t.title for t in iterator] == ["a"]

    def test_list_does_not_mutate(self, store):
        store.add("Work", "a", "", "", 1)
        for _ in store.list():
            pass

        assert len(store) == 1

    def test_empty_list(self, store):
        assert list(store.list()) == []
        assert not store


class TestRemoveUndo:
    """Tests for remove and undo."""

    def test_remove_takes_highest_priority(self, store):
        store.add("Personal", "low", "", "", 3)
        store.add("Work", "high", "", "", 1)

        result = store.remove()

        assert result.success
        assert result.message == "Task removed successfully! You can undo this action."
        assert result.task.title == "high"
        assert titles(store) == ["low"]
        assert store.undo_depth == 1

    def test_remove_empty(self, store):
        result = store.remove()

        assert not result.success
        assert result.message == "No tasks to remove."
        assert store.undo_depth == 0
        assert not store.task_file.exists()

    def test_undo_empty(self, store):
        result = store.undo()

        assert not result.success
        assert result.message == "No actions to undo."
        assert not store.task_file.exists()

    def test_remove_then_undo_restores_multiset(self, store):
        store.add("Work", "a", "", "", 2, "P")
        store.add("Personal", "b", "", "", 1, "C")
        store.add("Work", "c", "", "", 2)
        before = sorted(store.list(), key=lambda t: t.title)

        store.remove()
        result = store.undo()

        assert result.success
        assert result.message == "Undo successful! Task has been restored."
        assert sorted(store.list(), key=lambda t: t.title) == before
        assert store.undo_depth == 0

    def test_undo_is_lifo(self, store):
        store.add("Work", "one", "", "", 1)
        store.add("Work", "two", "", "", 2)
        store.add("Work", "three", "", "", 3)
        store.remove()
        store.remove()

        assert store.undo().task.title == "two"
        assert store.undo().task.title == "one"
        assert titles(store) == ["one", "two", "three"]

    def test_undo_reinserts_by_priority(self, store):
        store.add("Work", "urgent", "", "", 1)
        store.add("Work", "later", "", "", 3)
        store.remove()
        store.add("Work", "new urgent", "", "", 1)

        store.undo()

        assert titles(store) == ["new urgent", "urgent", "later"]

    def test_undo_keeps_extra_in_memory(self, task_file):
        store = TaskStore(task_file, persist_extra=False)
        store.add("Work", "Fix bug", "desc", "2024-01-01", 1, "Proj")
        store.remove()

        restored = store.undo().task

        assert restored.extra == "Proj"
        assert task_file.read_lines() == ["Work,Fix bug,desc,2024-01-01,1"]

    def test_remove_persists(self, store):
        store.add("Work", "a", "", "", 1)
        store.add("Work", "b", "", "", 2)
        store.remove()

        assert store.task_file.read_lines() == ["Work,b,,,2,"]


class TestPersistence:
    """Load/save behavior."""

    def test_missing_file_starts_fresh(self, task_file, caplog):
        with caplog.at_level(logging.INFO, logger="task_cli.store"):
            store = TaskStore(task_file)

        assert len(store) == 0
        assert store.notices == [STARTING_FRESH]
        assert "Starting fresh" in caplog.text
        assert not task_file.exists()

    def test_reload_preserves_order_and_fields(self, task_file):
        store = TaskStore(task_file)
        store.add("Personal", "Gym", "legs", "Monday", 3, "Health")
        store.add("Work", "Fix bug", "desc", "2024-01-01", 1, "Proj")

        reloaded = TaskStore(task_file)

        assert list(reloaded.list()) == list(store.list())
        assert reloaded.notices == []

    def test_unicode_line_separator_in_title_survives_reload(self, task_file):
        store = TaskStore(task_file)
        store.add("Personal", "a\u2028b", "desc", "Monday", 3, "Home")

        reloaded = list(TaskStore(task_file).list())

        assert len(reloaded) == 1
        assert reloaded[0].title == "a\u2028b"
        assert reloaded[0].extra == "Home"

    def test_legacy_mode_loses_extra_on_reload(self, task_file):
        store = TaskStore(task_file, persist_extra=False)
        store.add("Work", "Fix bug", "desc", "2024-01-01", 1, "Proj")

        reloaded = TaskStore(task_file)
        task = next(reloaded.list())

        assert task.title == "Fix bug"
        assert task.extra == ""

    def test_malformed_lines_are_skipped(self, task_file, caplog):
        task_file.write_lines([
            "Work,Fix bug,desc,2024-01-01,1,Proj",
            "",
            "too,short",
            "Personal,Gym,legs,Monday,high",
            "Bogus,x,y,z,1",
            "Personal,Gym,legs,Monday,3",
        ])

        with caplog.at_level(logging.WARNING, logger="task_cli.storage"):
            store = TaskStore(task_file)

        assert titles(store) == ["Fix bug", "Gym"]
        assert store.skipped == 3
        assert len(store.notices) == 1
        assert "Skipped 3" in store.notices[0]
        assert caplog.text.count("Skipping invalid line") == 3

    def test_load_sorts_unsorted_file(self, task_file):
        task_file.write_lines([
            "Personal,c,,,3",
            "Work,a,,,1",
            "Work,b,,,2",
            "Work,a2,,,1",
        ])

        assert titles(TaskStore(task_file)) == ["a", "a2", "b", "c"]

    def test_unreadable_file_starts_fresh(self, tmp_path):
        directory = tmp_path / "tasks.txt"
        directory.mkdir()

        store = TaskStore(TaskFile(directory))

        assert len(store) == 0
        assert len(store.notices) == 1
        assert "Starting fresh" in store.notices[0]

    def test_save_failure_is_a_warning(self, tmp_path):
        directory = tmp_path / "tasks.txt"
        directory.mkdir()
        store = TaskStore(TaskFile(directory))

        result = store.add("Work", "Fix bug", "desc", "2024-01-01", 1)

        assert result.success
        assert result.warning is not None
        assert "Error saving tasks" in result.warning
        assert titles(store) == ["Fix bug"]

        removed = store.remove()
        assert removed.success and removed.warning
        assert store.undo().task.title == "Fix bug"


class TestScenario:
    """End-to-end run from empty storage."""

    def test_add_remove_undo_reload(self, task_file):
        store = TaskStore(task_file)
        store.add("Work", "Fix bug", "desc", "2024-01-01", 1, "Proj")

        tasks = list(store.list())
        assert len(tasks) == 1
        assert tasks[0].kind is TaskKind.WORK
        assert tasks[0].priority == 1

        store.remove()
        assert list(store.list()) == []
        assert task_file.read_lines() == []

        store.undo()
        restored = list(store.list())
        assert len(restored) == 1
        assert restored[0].to_fields() == ("Work", "Fix bug", "desc", "2024-01-01", 1, "Proj")

        reloaded = list(TaskStore(task_file).list())
        assert reloaded == restored
