"""Domain exception types.

Storage errors are never wrapped here: SQLAlchemy exceptions propagate to the
caller unchanged. These types only cover input the store must never see.
"""


class DayTallyError(Exception):
    """Base exception for all Day Tally errors."""

    pass


class InvalidDateError(DayTallyError, ValueError):
    """A counter date is not a ``yyyy-MM-dd`` calendar date."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid counter date {value!r}, expected yyyy-MM-dd")


class InvalidCounterValueError(DayTallyError, ValueError):
    """A counter value is negative."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Counter value must be non-negative, got {value}")


class PastDateError(DayTallyError, ValueError):
    """An increment event is dated before the day already being counted."""

    def __init__(self, value: str, current: str):
        self.value = value
        self.current = current
        super().__init__(f"Cannot record an event for {value}; counting has reached {current}")
