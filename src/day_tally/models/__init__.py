"""Database models for Day Tally."""

from .base import Base
from .day_counter import DayCounter
from .task import Task

__all__ = [
    "Base",
    "DayCounter",
    "Task",
]
