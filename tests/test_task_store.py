# tests/test_task_store.py

from __future__ import annotations

from datetime import timedelta

import pytest
from sqlalchemy import insert

from errors import NotFoundError, ValidationError
from task_store import TaskStore, tasks_table


def test_create_list_update_delete(task_store: TaskStore) -> None:
    task_id = task_store.create("Buy stamps", None)
    assert task_id > 0

    [task] = task_store.list_all()
    assert task.id == task_id
    assert task.title == "Buy stamps"
    assert task.description == ""
    assert task.completed is False
    assert task.created_at.tzinfo is not None
    assert task.created_at.utcoffset() == timedelta(0)

    task_store.update(task_id, "Buy stamps", "at the post office")
    assert task_store.list_all()[0].description == "at the post office"

    # same values again still match the row
    task_store.update(task_id, "Buy stamps", "at the post office")

    task_store.delete(task_id)
    assert task_store.list_all() == []


def test_empty_title_is_rejected(task_store: TaskStore) -> None:
    with pytest.raises(ValidationError):
        task_store.create("")
    with pytest.raises(ValidationError):
        task_store.create(None)

    task_id = task_store.create("ok")
    with pytest.raises(ValidationError):
        task_store.update(task_id, "")
    assert task_store.list_all()[0].title == "ok"


def test_toggle_flips_in_place(task_store: TaskStore) -> None:
    task_id = task_store.create("Run")
    task_store.toggle_completed(task_id)
    assert task_store.list_all()[0].completed is True
    task_store.toggle_completed(task_id)
    assert task_store.list_all()[0].completed is False


def test_missing_rows_raise_not_found(task_store: TaskStore) -> None:
    with pytest.raises(NotFoundError):
        task_store.update(42, "x")
    with pytest.raises(NotFoundError):
        task_store.delete(42)
    with pytest.raises(NotFoundError):
        task_store.toggle_completed(42)


def test_initialize_is_idempotent(task_store: TaskStore) -> None:
    task_store.create("survives")
    assert task_store.initialize() is True
    assert [t.title for t in task_store.list_all()] == ["survives"]
    assert task_store.check_connection() is True


def test_created_at_defaults_for_external_inserts(task_store: TaskStore) -> None:
    with task_store.engine.begin() as conn:
        conn.execute(insert(tasks_table).values(title="from a SQL console"))

    [task] = task_store.list_all()
    assert task.title == "from a SQL console"
    assert task.created_at is not None
    assert task.completed is False
