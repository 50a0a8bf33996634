"""Domain models for dashboard statistics."""

from dataclasses import dataclass
from datetime import datetime

from channel_explorer.domain.constants import PER_THOUSAND
from channel_explorer.domain.models.amounts import BigAmount
from channel_explorer.domain.models.channels import AdUnit, StatusType


@dataclass(frozen=True)
class CategoryStats:
    """Aggregated figures for one ad unit category.

    Attributes:
        category: Ad unit category (ad size or type tag).
        weighted_avg_price: Deposit-weighted minimum price per impression
            over active channels.
        active_volume: Undisbursed deposit on active channels.
        total_volume: Deposits of every channel in the category.
        channel_count: Channels carrying the category.
        active_count: Active channels carrying the category.
    """

    category: str
    weighted_avg_price: BigAmount
    active_volume: BigAmount
    total_volume: BigAmount
    channel_count: int
    active_count: int

    @property
    def cpm(self) -> BigAmount:
        """Return the weighted price per thousand impressions."""
        return self.weighted_avg_price.mul_scalar(PER_THOUSAND)


@dataclass(frozen=True)
class MarketSummary:
    """Summary card figures for the market overview."""

    campaigns: int
    ad_units: int
    publishers: int
    advertisers: int
    total_deposit: BigAmount
    total_paid: BigAmount
    paid_ratio: BigAmount | None
    locked_on_chain: BigAmount | None = None
    daily_volume: BigAmount | None = None
    monthly_impressions: int | None = None


@dataclass(frozen=True)
class ChannelRow:
    """Channel table row ready for formatting."""

    id: str
    id_prefix: str
    status_url: str | None
    usd_estimate: float | None
    deposit: BigAmount
    cpm: BigAmount
    paid: BigAmount
    paid_ratio: BigAmount | None
    status: StatusType
    created: datetime
    is_recent: bool
    preview: AdUnit | None = None


__all__ = ["CategoryStats", "MarketSummary", "ChannelRow"]
