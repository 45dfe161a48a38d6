"""Repository for per-day counters."""

import logging
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError

from ..database.connection import DatabaseManager
from ..dates import format_label
from ..exceptions import InvalidCounterValueError
from ..models.day_counter import DayCounter

logger = logging.getLogger(__name__)


class DataRepository:
    """Get, upsert and scan ``DayCounter`` rows.

    Every method is a coroutine and opens its own session, so callers are
    free to await them in whatever order they need. Storage errors are not
    caught here.
    """

    def __init__(self, db: DatabaseManager, label_format: str = "%d/%m"):
        self._db = db
        self._label_format = label_format

    async def get_by_date(self, day: str) -> Optional[DayCounter]:
        """Return the counter for ``day``, or ``None`` when there is none."""
        async with self._db.session() as session:
            result = await session.execute(
                select(DayCounter).where(DayCounter.date == day)
            )
            return result.scalar_one_or_none()

    async def insert_or_update(self, day: str, value: int) -> None:
        """Set the counter for ``day`` to ``value``, creating the row if needed.

        The unique constraint on ``date`` guarantees a single row per day. If
        another writer inserts the row between our update and insert, the
        insert fails and the update is applied to the winner's row instead.
        """
        if value < 0:
            raise InvalidCounterValueError(value)
        label = format_label(day, self._label_format)

        async with self._db.session() as session:
            update_result = await session.execute(
                update(DayCounter)
                .where(DayCounter.date == day)
                .values(value=value, formatted_date=label)
            )
            inserted = (update_result.rowcount or 0) == 0
            if inserted:
                session.add(DayCounter(date=day, value=value, formatted_date=label))

            try:
                await session.commit()
            except IntegrityError:
                await session.rollback()
                logger.info("Counter row for %s created concurrently; updating instead", day)
                await session.execute(
                    update(DayCounter)
                    .where(DayCounter.date == day)
                    .values(value=value, formatted_date=label)
                )
                await session.commit()
                inserted = False

        logger.debug("Counter %s %s value=%s", day, "inserted" if inserted else "updated", value)

    async def get_all(self) -> List[DayCounter]:
        """Return every counter, oldest date first."""
        async with self._db.session() as session:
            result = await session.execute(
                select(DayCounter).order_by(DayCounter.date.asc())
            )
            return list(result.scalars().all())

    async def get_formatted_date_labels(self) -> List[str]:
        """Return the axis labels of ``get_all()`` in the same order."""
        async with self._db.session() as session:
            result = await session.execute(
                select(DayCounter.formatted_date).order_by(DayCounter.date.asc())
            )
            return list(result.scalars().all())
