"""Application port for market data access."""

from typing import Protocol

from channel_explorer.domain.models import (
    AnalyticsSeries,
    BigAmount,
    ChannelRecord,
)

DAILY_VOLUME_METRIC = ("eventPayouts", "day")
MONTHLY_IMPRESSIONS_METRIC = ("eventCounts", "month")


class MarketRepositoryPort(Protocol):
    """Port exposing read access to market and on-chain snapshots."""

    def fetch_channels(self) -> list[ChannelRecord]:
        """Return every channel listed on the market."""

    def fetch_core_balance(self) -> BigAmount:
        """Return the deposit token balance locked in the core contract."""

    def fetch_analytics(self, metric: str, timeframe: str) -> AnalyticsSeries:
        """Return the analytics series for a metric and timeframe."""


__all__ = [
    "MarketRepositoryPort",
    "DAILY_VOLUME_METRIC",
    "MONTHLY_IMPRESSIONS_METRIC",
]
