"""Application ports package."""

from .market_repository import (
    DAILY_VOLUME_METRIC,
    MONTHLY_IMPRESSIONS_METRIC,
    MarketRepositoryPort,
)

__all__ = [
    "DAILY_VOLUME_METRIC",
    "MONTHLY_IMPRESSIONS_METRIC",
    "MarketRepositoryPort",
]
