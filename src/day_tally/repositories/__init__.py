"""Repositories over the Day Tally store."""

from .day_counters import DataRepository
from .tasks import TaskFieldOptions, TaskRepository

__all__ = [
    "DataRepository",
    "TaskFieldOptions",
    "TaskRepository",
]
