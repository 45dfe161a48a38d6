"""Controller between the caller's notion of "today" and the counter store."""

from typing import List, Optional, Tuple

from ..models.day_counter import DayCounter
from ..repositories.day_counters import DataRepository


class StatisticsController:
    """Delegates counter reads and writes to a ``DataRepository``."""

    def __init__(self, repository: DataRepository):
        self.repository = repository

    async def get_data_by_date(self, day: str) -> Optional[DayCounter]:
        return await self.repository.get_by_date(day)

    async def insert_or_update_data(self, day: str, value: int) -> None:
        await self.repository.insert_or_update(day, value)

    async def get_series(self) -> Tuple[List[DayCounter], List[str]]:
        """Read the full series and its labels, in date order."""
        series = await self.repository.get_all()
        labels = await self.repository.get_formatted_date_labels()
        return series, labels

    async def get_today_label(self, day: str) -> str:
        """Label of the counter for ``day``, or an empty string."""
        counter = await self.repository.get_by_date(day)
        return counter.formatted_date if counter is not None else ""
