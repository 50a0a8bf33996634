"""Domain services package."""

from .aggregation import (
    compute_market_summary,
    paid_ratio,
    per_category_stats,
    remaining_deposit,
    total_deposit,
    total_paid,
    unique_ad_units,
    unique_advertisers,
    unique_count,
    unique_publishers,
)
from .formatting import (
    count_display,
    cpm_display,
    currency_display,
    paid_ratio_display,
    relative_time_label,
    to_http_url,
    token_display,
    usd_display,
)
from .normalization import normalize_category, normalize_identity
from .sorting import ChannelSort, sort_channels
from .volume import impressions_count, series_total, sparkline_points

__all__ = [
    "compute_market_summary",
    "paid_ratio",
    "per_category_stats",
    "remaining_deposit",
    "total_deposit",
    "total_paid",
    "unique_ad_units",
    "unique_advertisers",
    "unique_count",
    "unique_publishers",
    "count_display",
    "cpm_display",
    "currency_display",
    "paid_ratio_display",
    "relative_time_label",
    "to_http_url",
    "token_display",
    "usd_display",
    "normalize_category",
    "normalize_identity",
    "ChannelSort",
    "sort_channels",
    "impressions_count",
    "series_total",
    "sparkline_points",
]
