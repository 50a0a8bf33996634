"""Domain package for token arithmetic and channel statistics."""

from .errors import AmountError, DivideByZero, PrecisionLoss, Underflow
from .models import (
    AdUnit,
    AnalyticsPoint,
    AnalyticsSeries,
    BigAmount,
    CategoryStats,
    ChannelRecord,
    ChannelRow,
    ChannelSpec,
    ChannelStatus,
    DashboardState,
    Loadable,
    LoadStatus,
    MarketSummary,
    Ordering,
    StatusType,
    TargetingTag,
    ValidatorDesc,
)
from .services import (
    ChannelSort,
    compute_market_summary,
    currency_display,
    paid_ratio,
    per_category_stats,
    relative_time_label,
    sort_channels,
    total_deposit,
    total_paid,
    unique_count,
)

__all__ = [
    "AmountError",
    "DivideByZero",
    "PrecisionLoss",
    "Underflow",
    "AdUnit",
    "AnalyticsPoint",
    "AnalyticsSeries",
    "BigAmount",
    "CategoryStats",
    "ChannelRecord",
    "ChannelRow",
    "ChannelSpec",
    "ChannelStatus",
    "DashboardState",
    "Loadable",
    "LoadStatus",
    "MarketSummary",
    "Ordering",
    "StatusType",
    "TargetingTag",
    "ValidatorDesc",
    "ChannelSort",
    "compute_market_summary",
    "currency_display",
    "paid_ratio",
    "per_category_stats",
    "relative_time_label",
    "sort_channels",
    "total_deposit",
    "total_paid",
    "unique_count",
]
