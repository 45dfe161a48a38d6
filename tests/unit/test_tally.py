"""Unit tests for the daily tally and statistics controller."""

import asyncio
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from day_tally.exceptions import InvalidDateError, PastDateError
from day_tally.services.tally import DailyTally


class TestStatisticsController:

    @pytest.mark.asyncio
    async def test_get_data_by_date_delegates(self, controller, repository):
        await repository.insert_or_update("2024-01-01", 2)

        counter = await controller.get_data_by_date("2024-01-01")

        assert counter.value == 2
        assert await controller.get_data_by_date("2024-01-02") is None

    @pytest.mark.asyncio
    async def test_series_and_labels_share_order(self, controller):
        await controller.insert_or_update_data("2024-01-02", 5)
        await controller.insert_or_update_data("2024-01-01", 1)

        series, labels = await controller.get_series()

        assert [c.date for c in series] == ["2024-01-01", "2024-01-02"]
        assert labels == ["01/01", "02/01"]

    @pytest.mark.asyncio
    async def test_today_label_empty_when_missing(self, controller):
        assert await controller.get_today_label("2024-01-01") == ""


class TestStart:

    @pytest.mark.asyncio
    async def test_seeds_counter_from_today_row(self, tally, repository, clock):
        await repository.insert_or_update(clock.today, 7)

        await tally.start()

        assert tally.point_counter == 7
        assert tally.last_added_date == clock.today

    @pytest.mark.asyncio
    async def test_starts_from_zero_without_row(self, tally, repository):
        await repository.insert_or_update("2023-12-31", 9)

        chart = await tally.start()

        assert tally.point_counter == 0
        assert len(chart.points) == 1


class TestIncrement:

    @pytest.mark.asyncio
    async def test_same_day_persists_then_increments(self, tally, repository):
        tally.last_added_date = "2024-01-01"
        tally.point_counter = 3

        result = await tally.increment("2024-01-01")

        assert result.persisted_value == 3
        assert result.rolled_over is False
        assert tally.point_counter == 4
        assert (await repository.get_by_date("2024-01-01")).value == 3

    @pytest.mark.asyncio
    async def test_rollover_persists_zero_for_new_day(self, tally, repository):
        tally.last_added_date = "2024-01-01"
        tally.point_counter = 5

        result = await tally.increment("2024-01-02")

        assert result.rolled_over is True
        assert result.persisted_value == 0
        assert tally.point_counter == 1
        assert tally.last_added_date == "2024-01-02"
        assert (await repository.get_by_date("2024-01-02")).value == 0

    @pytest.mark.asyncio
    async def test_rollover_leaves_previous_day_untouched(self, tally, repository):
        await tally.start()
        await tally.increment("2024-01-01")
        await tally.increment("2024-01-01")

        await tally.increment("2024-01-02")

        assert (await repository.get_by_date("2024-01-01")).value == 1
        assert len(await repository.get_all()) == 2

    @pytest.mark.asyncio
    async def test_uses_clock_when_no_date_given(self, tally, clock, repository):
        clock.today = "2024-06-30"

        result = await tally.increment()

        assert result.date == "2024-06-30"
        assert await repository.get_by_date("2024-06-30") is not None

    @pytest.mark.asyncio
    async def test_chart_reflects_the_write(self, tally):
        await tally.increment("2024-01-01")
        await tally.increment("2024-01-01")
        result = await tally.increment("2024-01-02")

        chart = result.chart
        assert [p.y for p in chart.points] == [1.0, 0.0]
        assert chart.labels == ("01/01", "02/01", "02/01")

    @pytest.mark.asyncio
    async def test_failed_write_does_not_increment(self, controller, clock):
        controller.insert_or_update_data = AsyncMock(
            side_effect=OperationalError("UPDATE", {}, Exception("disk I/O error"))
        )
        tally = DailyTally(controller, clock=clock)
        tally.point_counter = 2

        with pytest.raises(OperationalError):
            await tally.increment(clock.today)

        assert tally.point_counter == 2

    @pytest.mark.asyncio
    async def test_rejects_malformed_date(self, tally):
        with pytest.raises(InvalidDateError):
            await tally.increment("01/02/2024")

        assert tally.point_counter == 0

    @pytest.mark.asyncio
    async def test_rejects_date_before_current_day(self, tally, repository):
        for _ in range(4):
            await tally.increment("2024-01-01")

        with pytest.raises(PastDateError):
            await tally.increment("2023-06-01")

        assert tally.last_added_date == "2024-01-01"
        assert tally.point_counter == 4
        assert await repository.get_by_date("2023-06-01") is None

        result = await tally.increment("2024-01-01")
        assert result.rolled_over is False
        assert result.persisted_value == 4
        assert (await repository.get_by_date("2024-01-01")).value == 4

    @pytest.mark.asyncio
    async def test_concurrent_events_are_serialized(self, tally, repository):
        day = "2024-01-01"

        results = await asyncio.gather(
            tally.increment(day),
            tally.increment(day),
            tally.increment(day),
        )

        assert {r.persisted_value for r in results} == {0, 1, 2}
        assert tally.point_counter == 3
        rows = [r for r in await repository.get_all() if r.date == day]
        assert len(rows) == 1
        assert rows[0].value == 2
