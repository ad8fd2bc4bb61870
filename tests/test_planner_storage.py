# tests/test_planner_storage.py

from __future__ import annotations

import json
from pathlib import Path

from models import WEEKDAYS, DayRecord, Mood, TodoItem
from planner_storage import (
    STORAGE_KEY,
    JsonFileStorage,
    MemoryStorage,
    load_planner_data,
    save_planner_data,
)


def _assert_default(record: DayRecord) -> None:
    assert record.month_year == ""
    assert record.schedule == {}
    assert record.water == 0
    assert record.mood is None
    assert record.priorities == ""
    assert record.todos == []
    assert record.notes == ""


def test_empty_storage_yields_seven_defaults() -> None:
    data = load_planner_data(MemoryStorage())
    assert list(data) == list(WEEKDAYS)
    for record in data.values():
        _assert_default(record)


def test_corrupt_blob_falls_back_to_defaults() -> None:
    for raw in ("{not json", "[1, 2, 3]", "null"):
        data = load_planner_data(MemoryStorage({STORAGE_KEY: raw}))
        assert len(data) == 7
        for record in data.values():
            _assert_default(record)


def test_missing_and_invalid_days_are_synthesized() -> None:
    blob = {
        "Mo": {"monthYear": "October 2026", "notes": "kept", "water": 2, "mood": "cool"},
        "Tu": {"water": 42},
    }
    data = load_planner_data(MemoryStorage({STORAGE_KEY: json.dumps(blob)}))

    assert data["Mo"].month_year == "October 2026"
    assert data["Mo"].notes == "kept"
    assert data["Mo"].water == 2
    assert data["Mo"].mood is Mood.COOL
    _assert_default(data["Tu"])
    _assert_default(data["Su"])


def test_save_writes_one_camel_case_blob() -> None:
    storage = MemoryStorage()
    data = load_planner_data(storage)
    data["We"].month_year = "May 2026"
    data["We"].mood = Mood.HAPPY
    data["We"].todos.append(TodoItem(text="Call mom"))

    save_planner_data(storage, data)

    blob = json.loads(storage.get_item(STORAGE_KEY))
    assert set(blob) == set(WEEKDAYS)
    assert blob["We"]["monthYear"] == "May 2026"
    assert blob["We"]["mood"] == "happy"
    assert blob["We"]["todos"] == [{"text": "Call mom", "completed": False}]
    assert load_planner_data(storage)["We"] == data["We"]


def test_json_file_storage(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "planner.json"
    storage = JsonFileStorage(path)
    assert storage.get_item(STORAGE_KEY) is None

    storage.set_item(STORAGE_KEY, "value")
    storage.set_item("other", "x")

    reopened = JsonFileStorage(path)
    assert reopened.get_item(STORAGE_KEY) == "value"
    assert reopened.get_item("other") == "x"


def test_json_file_storage_ignores_unreadable_file(tmp_path: Path) -> None:
    path = tmp_path / "planner.json"
    path.write_text("garbage", encoding="utf-8")

    storage = JsonFileStorage(path)
    assert storage.get_item(STORAGE_KEY) is None
    storage.set_item(STORAGE_KEY, "{}")
    assert storage.get_item(STORAGE_KEY) == "{}"
