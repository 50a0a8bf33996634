"""Application use cases package."""

from .get_ad_unit_stats import CategoryStats, GetAdUnitStatsUseCase
from .get_channel_table import ChannelRow, GetChannelTableUseCase
from .get_market_summary import GetMarketSummaryUseCase, MarketSummary
from .refresh_dashboard import RefreshDashboardUseCase

__all__ = [
    "CategoryStats",
    "GetAdUnitStatsUseCase",
    "ChannelRow",
    "GetChannelTableUseCase",
    "GetMarketSummaryUseCase",
    "MarketSummary",
    "RefreshDashboardUseCase",
]
