"""Turn the stored counter series into bar chart render data.

``project`` is pure: it reads nothing but its arguments, so the same series
always yields the same render data.
"""

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple


class CounterRow(Protocol):
    """What the projection needs from a stored counter."""

    value: int
    formatted_date: str


@dataclass(frozen=True)
class ChartPoint:
    x: float
    y: float


@dataclass(frozen=True)
class LabelStyle:
    """Rendering hints for custom x-axis labels."""

    angle: int = 35
    height: int = 70
    text_size: float = 30.0
    count: int = 0


@dataclass(frozen=True)
class ChartRenderData:
    """Points, axis bounds and optional axis labels for one bar chart."""

    points: Tuple[ChartPoint, ...]
    x_bounds: Tuple[float, float]
    y_bounds: Tuple[float, float]
    labels: Optional[Tuple[str, ...]] = None
    label_style: Optional[LabelStyle] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready representation."""
        return {
            "points": [asdict(p) for p in self.points],
            "x_bounds": list(self.x_bounds),
            "y_bounds": list(self.y_bounds),
            "labels": list(self.labels) if self.labels is not None else None,
            "label_style": asdict(self.label_style) if self.label_style is not None else None,
        }


def project(
    series: Sequence[CounterRow],
    today_label: str = "",
    *,
    labels: Optional[Sequence[str]] = None,
    min_labels: int = 2,
    label_style: Optional[LabelStyle] = None,
) -> ChartRenderData:
    """Project an ordered counter series into chart render data.

    Args:
        series: Counters ordered by ascending date.
        today_label: Label of today's counter, appended after the stored
            labels. Empty when today has no counter yet.
        labels: Stored labels in series order. Defaults to each row's
            ``formatted_date``.
        min_labels: Custom labels are attached only when the series has at
            least this many labels.
        label_style: Style attached along with custom labels.

    Returns:
        One point per row at x = 1..n, x bounds padded by half a bar on each
        side, y bounds from zero to the largest value.
    """
    points = tuple(
        ChartPoint(x=float(rank), y=float(row.value))
        for rank, row in enumerate(series, start=1)
    )
    x_bounds = (0.5, len(points) + 0.5)
    max_y = max((p.y for p in points), default=0.0)
    y_bounds = (0.0, max_y)

    stored: List[str] = (
        list(labels) if labels is not None else [row.formatted_date for row in series]
    )
    if len(stored) < min_labels:
        return ChartRenderData(points=points, x_bounds=x_bounds, y_bounds=y_bounds)

    all_labels = tuple(stored) + (today_label,)
    style = replace(label_style or LabelStyle(), count=len(all_labels))
    return ChartRenderData(
        points=points,
        x_bounds=x_bounds,
        y_bounds=y_bounds,
        labels=all_labels,
        label_style=style,
    )
