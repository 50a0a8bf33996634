"""Domain services aggregating channel snapshots into dashboard figures."""

from collections.abc import Callable, Iterable, Sequence

from channel_explorer.domain.constants import PAID_RATIO_BASE
from channel_explorer.domain.errors import Underflow
from channel_explorer.domain.models import (
    AnalyticsSeries,
    BigAmount,
    CategoryStats,
    ChannelRecord,
    MarketSummary,
)
from channel_explorer.domain.services.normalization import (
    normalize_category,
    normalize_identity,
)
from channel_explorer.domain.services.volume import impressions_count


def total_deposit(records: Iterable[ChannelRecord]) -> BigAmount:
    """Return the sum of channel deposits."""
    return BigAmount.sum(record.deposit_amount for record in records)


def total_paid(records: Iterable[ChannelRecord]) -> BigAmount:
    """Return the amount already paid out across all channels."""
    return BigAmount.sum(record.status.balances_sum() for record in records)


def paid_ratio(
    paid: BigAmount,
    deposit: BigAmount,
) -> BigAmount | None:
    """Return the paid share of a deposit in thousandths of a percent.

    Args:
        paid: Amount paid out.
        deposit: Amount deposited.

    Returns:
        BigAmount | None: `paid * 100000 // deposit`, or None when the
        deposit is zero and the ratio is undefined.
    """
    if deposit.is_zero():
        return None
    return paid.mul_scalar(PAID_RATIO_BASE).div_floor(deposit)


def unique_count(
    items: Iterable,
    key_fn: Callable | None = None,
) -> int:
    """Count distinct identities, ignoring letter case.

    Args:
        items: Records or raw identities.
        key_fn: Optional function returning an identity, an iterable of
            identities, or None for each item.

    Returns:
        int: Number of distinct normalized identities.
    """
    seen: set[str] = set()
    for item in items:
        keys = key_fn(item) if key_fn is not None else item
        if keys is None:
            continue
        if isinstance(keys, str):
            keys = (keys,)
        for key in keys:
            normalized = normalize_identity(key)
            if normalized is not None:
                seen.add(normalized)
    return len(seen)


def unique_advertisers(records: Iterable[ChannelRecord]) -> int:
    """Return the number of distinct channel creators."""
    return unique_count(records, lambda record: record.creator)


def unique_publishers(records: Iterable[ChannelRecord]) -> int:
    """Return the number of distinct paid parties other than creators."""
    return unique_count(records, _publisher_identities)


def unique_ad_units(records: Iterable[ChannelRecord]) -> int:
    """Return the number of distinct ad units by IPFS hash."""
    return len(
        {
            unit.ipfs
            for record in records
            for unit in record.spec.ad_units
            if unit.ipfs
        }
    )


def remaining_deposit(record: ChannelRecord) -> BigAmount:
    """Return the deposit not yet paid out on a channel.

    Raises:
        Underflow: If the channel paid out more than it holds.
    """
    try:
        return record.deposit_amount - record.status.balances_sum()
    except Underflow as exc:
        raise Underflow(
            f"Channel {record.id} paid out more than its deposit"
        ) from exc


def per_category_stats(
    records: Iterable[ChannelRecord],
) -> list[CategoryStats]:
    """Compute per ad unit category statistics.

    Channels are grouped by every category among their ad units. A
    channel counts once per category: several ad units of the same
    category do not add weight to its price or active volume. The
    weighted price is the deposit-weighted minimum price per impression
    of active channels and is zero when a category has no active deposit.

    Args:
        records: Channel snapshot.

    Returns:
        list[CategoryStats]: Categories ordered by descending weighted
        price, ties kept in first-encounter order.

    Raises:
        Underflow: If an active channel paid out more than its deposit.
    """
    grouped: dict[str, list[ChannelRecord]] = {}
    for record in records:
        categories = []
        for unit in record.spec.ad_units:
            category = normalize_category(unit.category)
            if category is not None and category not in categories:
                categories.append(category)
        for category in categories:
            grouped.setdefault(category, []).append(record)

    stats = [
        _category_stats(category, members)
        for category, members in grouped.items()
    ]
    return sorted(
        stats,
        key=lambda item: item.weighted_avg_price.value,
        reverse=True,
    )


def compute_market_summary(
    records: Sequence[ChannelRecord],
    *,
    core_balance: BigAmount | None = None,
    daily_volume: AnalyticsSeries | None = None,
    monthly_impressions: AnalyticsSeries | None = None,
) -> MarketSummary:
    """Compute the summary cards for a channel snapshot.

    Args:
        records: Channel snapshot.
        core_balance: Optional token balance locked in the core contract.
        daily_volume: Optional payouts series for the last day.
        monthly_impressions: Optional impression counts for the last month.

    Returns:
        MarketSummary: Counts, totals and the paid ratio.
    """
    deposit = total_deposit(records)
    paid = total_paid(records)
    return MarketSummary(
        campaigns=len(records),
        ad_units=unique_ad_units(records),
        publishers=unique_publishers(records),
        advertisers=unique_advertisers(records),
        total_deposit=deposit,
        total_paid=paid,
        paid_ratio=paid_ratio(paid, deposit),
        locked_on_chain=core_balance,
        daily_volume=(
            daily_volume.total() if daily_volume is not None else None
        ),
        monthly_impressions=(
            impressions_count(monthly_impressions)
            if monthly_impressions is not None
            else None
        ),
    )


def _publisher_identities(record: ChannelRecord) -> list[str]:
    creator = normalize_identity(record.creator)
    return [
        identity
        for identity in record.status.balances
        if normalize_identity(identity) != creator
    ]


def _category_stats(
    category: str,
    members: list[ChannelRecord],
) -> CategoryStats:
    active = [record for record in members if record.is_active]
    active_deposit = total_deposit(active)
    weighted_sum = BigAmount.sum(
        record.deposit_amount * record.spec.min_per_impression
        for record in active
    )
    if active_deposit.is_zero():
        weighted_price = BigAmount.zero()
    else:
        weighted_price = weighted_sum.div_floor(active_deposit)
    return CategoryStats(
        category=category,
        weighted_avg_price=weighted_price,
        active_volume=BigAmount.sum(
            remaining_deposit(record) for record in active
        ),
        total_volume=total_deposit(members),
        channel_count=len(members),
        active_count=len(active),
    )


__all__ = [
    "total_deposit",
    "total_paid",
    "paid_ratio",
    "unique_count",
    "unique_advertisers",
    "unique_publishers",
    "unique_ad_units",
    "remaining_deposit",
    "per_category_stats",
    "compute_market_summary",
]
