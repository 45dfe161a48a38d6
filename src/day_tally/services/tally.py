"""In-memory daily tally driven by increment events.

``DailyTally`` holds the counter shown to the user and the date it belongs
to. Each increment event persists the current counter for today, bumps it in
memory and re-renders the chart from storage.

On the first event of a new day the counter is reset to zero *before* it is
persisted, so the row created for the new day holds 0 and the in-memory
counter becomes 1.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from ..charts.projection import ChartRenderData, LabelStyle, project
from ..dates import Clock, parse_day, today_iso
from ..exceptions import PastDateError
from ..observability import metrics
from .statistics import StatisticsController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IncrementResult:
    """Outcome of one increment event."""

    date: str
    persisted_value: int
    point_counter: int
    rolled_over: bool
    chart: ChartRenderData


class DailyTally:
    """Counter state for the current day plus the write, re-read, render sequence."""

    def __init__(
        self,
        controller: StatisticsController,
        clock: Clock = today_iso,
        *,
        min_labels: int = 2,
        label_style: Optional[LabelStyle] = None,
    ):
        self.controller = controller
        self.clock = clock
        self.min_labels = min_labels
        self.label_style = label_style
        self.point_counter = 0
        self.last_added_date = clock()
        self._lock = asyncio.Lock()

    async def start(self) -> ChartRenderData:
        """Seed the counter from today's stored row and render the chart."""
        async with self._lock:
            today = self.clock()
            self.last_added_date = today
            counter = await self.controller.get_data_by_date(today)
            self.point_counter = counter.value if counter is not None else 0
            logger.info("Daily tally started for %s at %s", today, self.point_counter)
            return await self._render(today)

    async def increment(self, current_date: Optional[str] = None) -> IncrementResult:
        """Handle one increment event.

        Args:
            current_date: Date of the event; defaults to the clock. A date
                before ``last_added_date`` raises ``PastDateError``, since
                only the current day's row is ever written.

        The counter is incremented in memory only after the write succeeds.
        If the write raises, the error propagates and the counter is left
        as it was after any day reset.
        """
        async with self._lock:
            current_date = current_date or self.clock()
            if parse_day(current_date) < parse_day(self.last_added_date):
                raise PastDateError(current_date, self.last_added_date)

            rolled_over = current_date != self.last_added_date
            if rolled_over:
                logger.info(
                    "Day rolled over from %s to %s; counter reset from %s",
                    self.last_added_date,
                    current_date,
                    self.point_counter,
                )
                self.point_counter = 0
                self.last_added_date = current_date

            value = self.point_counter
            await self.controller.insert_or_update_data(current_date, value)
            self.point_counter += 1
            metrics.record_increment(rolled_over, self.point_counter)

            chart = await self._render(current_date)
            return IncrementResult(
                date=current_date,
                persisted_value=value,
                point_counter=self.point_counter,
                rolled_over=rolled_over,
                chart=chart,
            )

    async def render(self, today: Optional[str] = None) -> ChartRenderData:
        """Render the chart from the current stored series."""
        return await self._render(today or self.clock())

    async def _render(self, today: str) -> ChartRenderData:
        series, labels = await self.controller.get_series()
        today_label = ""
        if len(labels) >= self.min_labels:
            today_label = await self.controller.get_today_label(today)
        return project(
            series,
            today_label,
            labels=labels,
            min_labels=self.min_labels,
            label_style=self.label_style,
        )
