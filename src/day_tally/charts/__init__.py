"""Chart projection of the daily counter series."""

from .projection import ChartPoint, ChartRenderData, LabelStyle, project

__all__ = [
    "ChartPoint",
    "ChartRenderData",
    "LabelStyle",
    "project",
]
