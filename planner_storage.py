"""
Key-value persistence for the planner.

The whole week is stored as one JSON blob under STORAGE_KEY, keyed by weekday
abbreviation. Reads never fail: absent or corrupt data falls back to defaults.
"""
import json
import logging
from pathlib import Path
from typing import Dict, Optional, Protocol, Union

from pydantic import ValidationError

from models import WEEKDAYS, DayRecord

logger = logging.getLogger(__name__)

STORAGE_KEY = "dailyPlannerData"

PlannerData = Dict[str, DayRecord]


class KeyValueStorage(Protocol):
    """String key -> string value store with local-storage semantics"""

    def get_item(self, key: str) -> Optional[str]:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...


class MemoryStorage:
    def __init__(self, items: Optional[Dict[str, str]] = None):
        self.items: Dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value


class JsonFileStorage:
    """Key-value map kept in a single pretty-printed JSON file"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError):
            logger.warning("Could not read %s, starting from an empty store", self.path, exc_info=True)
            return {}
        return data if isinstance(data, dict) else {}

    def get_item(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        items = self._read()
        items[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(items, f, indent=4)


def default_planner_data() -> PlannerData:
    return {day: DayRecord() for day in WEEKDAYS}


def load_planner_data(storage: KeyValueStorage) -> PlannerData:
    """Load all seven DayRecords, synthesizing defaults for anything missing or invalid"""
    raw = storage.get_item(STORAGE_KEY)
    if not raw:
        return default_planner_data()

    try:
        parsed = json.loads(raw)
    except ValueError:
        logger.error("Failed to parse planner data from storage", exc_info=True)
        return default_planner_data()
    if not isinstance(parsed, dict):
        logger.error("Stored planner data is not an object, using defaults")
        return default_planner_data()

    data: PlannerData = {}
    for day in WEEKDAYS:
        entry = parsed.get(day)
        if not entry:
            data[day] = DayRecord()
            continue
        try:
            data[day] = DayRecord.model_validate(entry)
        except ValidationError:
            logger.warning("Invalid planner data for %s, using defaults", day, exc_info=True)
            data[day] = DayRecord()
    return data


def save_planner_data(storage: KeyValueStorage, data: PlannerData) -> None:
    """Serialize the whole week and write it under STORAGE_KEY"""
    blob = {
        day: data.get(day, DayRecord()).model_dump(mode="json", by_alias=True)
        for day in WEEKDAYS
    }
    storage.set_item(STORAGE_KEY, json.dumps(blob))
