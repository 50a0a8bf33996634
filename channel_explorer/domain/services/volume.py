"""Domain helpers for analytics volume series."""

import math

from channel_explorer.domain.constants import (
    SPARKLINE_HEIGHT,
    SPARKLINE_WIDTH,
    U64_MAX,
)
from channel_explorer.domain.models import AnalyticsSeries, BigAmount


def series_total(series: AnalyticsSeries) -> BigAmount:
    """Return the exact sum of an analytics series."""
    return series.total()


def impressions_count(series: AnalyticsSeries) -> int:
    """Return the total count of a series, or 0 beyond the u64 range."""
    total = series.total().value
    return total if total <= U64_MAX else 0


def sparkline_points(
    series: AnalyticsSeries,
    width: int = SPARKLINE_WIDTH,
    height: int = SPARKLINE_HEIGHT,
) -> list[tuple[int, int]] | None:
    """Scale a series into polyline points for a small chart.

    The last bucket is still filling up and is left out. Values are
    scaled in the integer domain between the series minimum and maximum.

    Args:
        series: Analytics buckets in time order.
        width: Chart width in pixels.
        height: Chart height in pixels.

    Returns:
        list[tuple[int, int]] | None: (x, y) points with y growing
        downwards, or None when fewer than two buckets can be plotted.
    """
    values = series.values
    if not values:
        return None
    low = min(values)
    high = max(values)
    spread = high - low
    plotted = values[:-1]
    if len(plotted) < 2:
        return None
    if spread.is_zero():
        # Flat series: everything sits on the baseline.
        scaled = [0] * len(plotted)
    else:
        scaled = [
            ((value - low) * height).div_floor(spread).value
            for value in plotted
        ]
    ratio = width / (len(plotted) - 1)
    return [
        (math.ceil(index * ratio), height - point)
        for index, point in enumerate(scaled)
    ]


__all__ = ["series_total", "impressions_count", "sparkline_points"]
