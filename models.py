from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


# --- Task Service ---

class TaskIn(BaseModel):
    """Request body for creating or updating a task"""
    title: Optional[str] = Field(default=None, description="Required, non-empty")
    description: Optional[str] = Field(default=None, description="Defaults to an empty string")


class Task(BaseModel):
    """A row of the tasks table"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str = ""
    completed: bool = False
    created_at: datetime


class TaskCreated(BaseModel):
    message: str
    taskId: int


class Message(BaseModel):
    message: str


# --- Planner ---

WEEKDAYS = ("Mo", "Tu", "We", "Th", "Fr", "Sa", "Su")

TIME_SLOTS = (
    "6 AM", "7 AM", "8 AM", "9 AM", "10 AM", "11 AM",
    "12 PM", "1 PM", "2 PM", "3 PM", "4 PM", "5 PM",
    "6 PM", "7 PM", "8 PM", "9 PM", "10 PM",
)

GLASS_COUNT = 8


class Mood(str, Enum):
    HAPPY = "happy"
    SMILE = "smile"
    COOL = "cool"
    NEUTRAL = "neutral"
    WORRIED = "worried"
    ANGRY = "angry"
    FURIOUS = "furious"


MOOD_LABELS = {
    Mood.HAPPY: "Happy",
    Mood.SMILE: "Smile",
    Mood.COOL: "Cool",
    Mood.NEUTRAL: "Neutral",
    Mood.WORRIED: "Worried",
    Mood.ANGRY: "Angry",
    Mood.FURIOUS: "Furious",
}


class TodoItem(BaseModel):
    text: str
    completed: bool = False


class DayRecord(BaseModel):
    """
    Every planner field for one weekday.
    Serialized with camelCase keys (monthYear) to match the stored blob.
    """
    model_config = ConfigDict(populate_by_name=True)

    month_year: str = Field(default="", alias="monthYear")
    schedule: Dict[str, str] = Field(
        default_factory=dict,
        description="Time-slot label -> free text"
    )
    water: int = Field(default=0, ge=0, le=GLASS_COUNT)
    mood: Optional[Mood] = None
    priorities: str = ""
    todos: List[TodoItem] = Field(default_factory=list)
    notes: str = ""
