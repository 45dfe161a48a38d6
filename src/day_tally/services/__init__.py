"""Statistics services."""

from .statistics import StatisticsController
from .tally import DailyTally, IncrementResult

__all__ = [
    "DailyTally",
    "IncrementResult",
    "StatisticsController",
]
