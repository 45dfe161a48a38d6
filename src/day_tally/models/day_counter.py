"""Daily counter model."""

from sqlalchemy import Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class DayCounter(Base):
    """Persistent counter for one calendar day.

    ``date`` is the ``yyyy-MM-dd`` key; ``formatted_date`` is the axis label
    derived from it when the row is written.
    """

    __tablename__ = "day_counters"
    __table_args__ = (
        UniqueConstraint("date", name="uq_day_counters_date"),
    )

    date: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    value: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    formatted_date: Mapped[str] = mapped_column(String(32), nullable=False, default="")

    def __repr__(self) -> str:
        return f"<DayCounter(date='{self.date}', value={self.value})>"
