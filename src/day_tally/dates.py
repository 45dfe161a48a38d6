"""Calendar helpers for counter dates.

Counter dates are ``yyyy-MM-dd`` strings built from the calendar date alone,
independent of locale.
"""

from datetime import date, datetime
from typing import Callable

from .exceptions import InvalidDateError

DATE_FORMAT = "%Y-%m-%d"

Clock = Callable[[], str]


def today_iso() -> str:
    """Return the local calendar date as ``yyyy-MM-dd``."""
    return date.today().strftime(DATE_FORMAT)


def parse_day(value: str) -> date:
    """Parse a counter date, raising ``InvalidDateError`` when malformed."""
    try:
        parsed = datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError):
        raise InvalidDateError(value) from None
    # strptime accepts unpadded fields such as 2024-1-2
    if parsed.strftime(DATE_FORMAT) != value:
        raise InvalidDateError(value)
    return parsed


def format_label(value: str, label_format: str = "%d/%m") -> str:
    """Derive the display label of a counter date."""
    return parse_day(value).strftime(label_format)
