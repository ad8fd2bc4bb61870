# tests/conftest.py

from __future__ import annotations

import random
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from planner import PlannerController
from planner_storage import MemoryStorage
from task_server import create_app
from task_store import TaskStore

from .fakes import FakePlannerView


@pytest.fixture()
def task_store(tmp_path: Path):
    """Real SQLite-backed store in a per-test temp directory."""
    store = TaskStore.from_url(f"sqlite:///{tmp_path / 'tasks.sqlite3'}")
    store.initialize()
    yield store
    store.dispose()


@pytest.fixture()
def client(task_store: TaskStore):
    # Entering the client runs the app's startup (connectivity check + schema bootstrap)
    with TestClient(create_app(task_store)) as c:
        yield c


@pytest.fixture()
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture()
def view() -> FakePlannerView:
    return FakePlannerView()


@pytest.fixture()
def controller(storage: MemoryStorage, view: FakePlannerView) -> PlannerController:
    planner = PlannerController(storage, view, rng=random.Random(7))
    planner.start()
    return planner
