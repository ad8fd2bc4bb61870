"""
Planner controller.

Owns the application state (current day + the week's DayRecords), persists the
whole week write-through after every mutation, and pushes view models to a
PlannerView.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from models import TIME_SLOTS, WEEKDAYS, DayRecord, Mood
from planner_storage import (
    KeyValueStorage,
    PlannerData,
    default_planner_data,
    load_planner_data,
    save_planner_data,
)
from planner_view import PlannerView, build_day_view
from quotes import Quote, pick_quote
from todo_list import AnimatedDeletion, DeletionStrategy, TodoList
from water import next_fill_count

logger = logging.getLogger(__name__)

DEFAULT_DAY = "Mo"


@dataclass
class PlannerState:
    current_day: str = DEFAULT_DAY
    records: PlannerData = field(default_factory=default_planner_data)

    @property
    def current_record(self) -> DayRecord:
        return self.records[self.current_day]


def _check_day(day: str):
    if day not in WEEKDAYS:
        raise ValueError(f"Unknown day {day!r}, expected one of {', '.join(WEEKDAYS)}")


class PlannerController:
    """
    Drives one PlannerView over a KeyValueStorage.

    To-do rows are deleted immediately unless `animated` is set, in which case the
    view's play_removal runs first. An explicit `deletion` strategy overrides both.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        view: PlannerView,
        deletion: Optional[DeletionStrategy] = None,
        rng: Optional[random.Random] = None,
        animated: bool = False,
    ):
        self.storage = storage
        self.view = view
        if deletion is None and animated:
            deletion = AnimatedDeletion(view.play_removal)
        self.deletion = deletion
        self.rng = rng
        self.state = PlannerState()
        self.quote: Optional[Quote] = None

    # --- persistence ---

    def load(self):
        self.state.records = load_planner_data(self.storage)

    def save(self):
        save_planner_data(self.storage, self.state.records)

    # --- lifecycle ---

    def start(self):
        """Load the week, show the quote of the day and render the default day"""
        self.load()
        self.state.current_day = DEFAULT_DAY
        self.quote = pick_quote(self.rng)
        self.view.show_quote(self.quote)
        self.view.show_active_day(self.state.current_day)
        self.render()

    def render(self):
        self.view.show_day(build_day_view(self.state.current_record))

    # --- day switching ---

    def switch_day(self, day: str):
        """Flush the outgoing day to storage, then show the incoming one"""
        _check_day(day)
        if day == self.state.current_day:
            return
        self._commit()
        self.state.current_day = day
        self.view.show_active_day(day)
        self.render()
        logger.debug("Switched planner to %s", day)

    # --- field synchronization ---

    def on_input(
        self,
        month_year: Optional[str] = None,
        schedule: Optional[Dict[str, str]] = None,
        priorities: Optional[str] = None,
        notes: Optional[str] = None,
    ):
        """A form field changed: capture the visible form into the current day and persist"""
        if schedule:
            unknown = set(schedule) - set(TIME_SLOTS)
            if unknown:
                raise ValueError(f"Unknown time slot(s): {', '.join(sorted(unknown))}")
        overrides = dict(month_year=month_year, schedule=schedule, priorities=priorities, notes=notes)
        self._commit(**overrides)
        # Values not typed into the view must be shown, or the next read_form would undo them
        if any(value is not None for value in overrides.values()):
            self.render()

    def _capture_form(self, month_year=None, schedule=None, priorities=None, notes=None):
        form = self.view.read_form()
        record = self.state.current_record
        merged_schedule = dict(form.schedule)
        merged_schedule.update(schedule or {})

        record.month_year = form.month_year if month_year is None else month_year
        record.schedule = {label: merged_schedule.get(label, "") for label in TIME_SLOTS}
        record.priorities = form.priorities if priorities is None else priorities
        record.notes = form.notes if notes is None else notes

    def _commit(self, **overrides):
        self._capture_form(**overrides)
        self.save()

    # --- water ---

    def click_glass(self, index: int) -> int:
        record = self.state.current_record
        record.water = next_fill_count(record.water, index)
        self._commit()
        self.render()
        return record.water

    # --- mood ---

    def select_mood(self, mood: Union[Mood, str, None]):
        self.state.current_record.mood = None if mood is None else Mood(mood)
        self._commit()
        self.render()

    # --- to-do list ---

    @property
    def todos(self) -> TodoList:
        return TodoList(self.state.current_record.todos, self._todos_changed, self.deletion)

    def add_todo(self, text: str) -> bool:
        added = self.todos.add(text)
        if added:
            self.view.clear_todo_input()
        return added

    def toggle_todo(self, index: int):
        self.todos.toggle(index)

    def delete_todo(self, index: int):
        self.todos.delete(index)

    def _todos_changed(self):
        self._commit()
        self.render()
