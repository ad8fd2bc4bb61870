"""
View models for the planner and the interface its renderer implements.

build_day_view is a pure function of a DayRecord; everything that touches a
screen lives behind PlannerView.
"""
import sys
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Protocol, TextIO

from models import MOOD_LABELS, TIME_SLOTS, DayRecord, Mood
from quotes import Quote
from water import glass_states, water_label

NO_TODOS_MESSAGE = "No tasks yet. Add one above!"
NO_MOOD_LABEL = "\u00a0"


@dataclass
class ScheduleRow:
    label: str
    value: str


@dataclass
class TodoRow:
    index: int
    text: str
    completed: bool

    @property
    def css_class(self) -> str:
        return "todo-text completed" if self.completed else "todo-text"


@dataclass
class DayView:
    month_year: str
    schedule: List[ScheduleRow]
    glasses: List[bool]
    water_label: str
    mood: Optional[Mood]
    mood_label: str
    priorities: str
    notes: str
    todos: List[TodoRow]
    placeholder: Optional[str]


@dataclass
class FormState:
    """Free-text fields as currently shown to the user"""
    month_year: str = ""
    schedule: Dict[str, str] = field(default_factory=dict)
    priorities: str = ""
    notes: str = ""


def mood_label(mood: Optional[Mood]) -> str:
    if mood is None:
        return NO_MOOD_LABEL
    return MOOD_LABELS[Mood(mood)]


def build_day_view(record: DayRecord) -> DayView:
    todos = [
        TodoRow(index=i, text=item.text, completed=item.completed)
        for i, item in enumerate(record.todos)
    ]
    return DayView(
        month_year=record.month_year,
        schedule=[ScheduleRow(label, record.schedule.get(label, "")) for label in TIME_SLOTS],
        glasses=glass_states(record.water),
        water_label=water_label(record.water),
        mood=record.mood,
        mood_label=mood_label(record.mood),
        priorities=record.priorities,
        notes=record.notes,
        todos=todos,
        placeholder=None if todos else NO_TODOS_MESSAGE,
    )


class PlannerView(Protocol):
    """Rendering collaborator driven by PlannerController"""

    def read_form(self) -> FormState:
        ...

    def show_day(self, view: DayView) -> None:
        ...

    def show_active_day(self, day: str) -> None:
        ...

    def show_quote(self, quote: Quote) -> None:
        ...

    def clear_todo_input(self) -> None:
        """Empty the new-item input and give it focus again"""
        ...

    def play_removal(self, index: int, done: Callable[[], None]) -> None:
        """Animate removal of a to-do row, then call done()"""
        ...


class TextView:
    """Plain-text renderer used by the planner CLI"""

    def __init__(self, out: TextIO = sys.stdout):
        self.out = out
        self.day: Optional[str] = None
        self.view: Optional[DayView] = None
        self.quote: Optional[Quote] = None

    def read_form(self) -> FormState:
        if self.view is None:
            return FormState()
        return FormState(
            month_year=self.view.month_year,
            schedule={row.label: row.value for row in self.view.schedule},
            priorities=self.view.priorities,
            notes=self.view.notes,
        )

    def show_day(self, view: DayView) -> None:
        self.view = view

    def show_active_day(self, day: str) -> None:
        self.day = day

    def show_quote(self, quote: Quote) -> None:
        self.quote = quote

    def clear_todo_input(self) -> None:
        pass

    def play_removal(self, index: int, done: Callable[[], None]) -> None:
        done()

    def render(self):
        """Write the current day to the output stream"""
        view = self.view
        if view is None:
            return
        lines = [f"=== {self.day} === {view.month_year}".rstrip()]
        if self.quote is not None:
            lines.extend(self.quote.formatted())
        lines.append("")
        lines.append("Schedule:")
        for row in view.schedule:
            lines.append(f"  {row.label:>5} | {row.value}")
        glasses = "".join("●" if filled else "○" for filled in view.glasses)
        lines.append(f"Water: {glasses} {view.water_label}")
        lines.append(f"Mood: {view.mood_label}")
        lines.append(f"Priorities: {view.priorities}")
        lines.append("To-do:")
        if view.placeholder:
            lines.append(f"  {view.placeholder}")
        for row in view.todos:
            mark = "x" if row.completed else " "
            lines.append(f"  {row.index}. [{mark}] {row.text}")
        lines.append(f"Notes: {view.notes}")
        self.out.write("\n".join(lines) + "\n")
