"""Domain models for analytics time series."""

from dataclasses import dataclass
from datetime import datetime

from channel_explorer.domain.models.amounts import BigAmount


@dataclass(frozen=True)
class AnalyticsPoint:
    """Aggregated analytics value for one time bucket."""

    time: datetime
    value: BigAmount


@dataclass(frozen=True)
class AnalyticsSeries:
    """Ordered analytics buckets for a metric and timeframe."""

    metric: str
    timeframe: str
    points: tuple[AnalyticsPoint, ...] = ()

    @property
    def values(self) -> list[BigAmount]:
        """Return the bucket values in time order."""
        return [point.value for point in self.points]

    def total(self) -> BigAmount:
        """Return the exact sum of all buckets."""
        return BigAmount.sum(self.values)


__all__ = ["AnalyticsPoint", "AnalyticsSeries"]
