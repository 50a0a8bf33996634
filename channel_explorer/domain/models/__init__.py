"""Domain models package."""

from .amounts import BigAmount, Ordering
from .analytics import AnalyticsPoint, AnalyticsSeries
from .channels import (
    AdUnit,
    ChannelRecord,
    ChannelSpec,
    ChannelStatus,
    StatusType,
    TargetingTag,
    ValidatorDesc,
)
from .dashboard import DashboardState, Loadable, LoadStatus
from .stats import CategoryStats, ChannelRow, MarketSummary

__all__ = [
    "BigAmount",
    "Ordering",
    "AnalyticsPoint",
    "AnalyticsSeries",
    "AdUnit",
    "ChannelRecord",
    "ChannelSpec",
    "ChannelStatus",
    "StatusType",
    "TargetingTag",
    "ValidatorDesc",
    "DashboardState",
    "Loadable",
    "LoadStatus",
    "CategoryStats",
    "ChannelRow",
    "MarketSummary",
]
