"""Tests for the channel aggregation services."""

from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from channel_explorer.domain.errors import Underflow
from channel_explorer.domain.models import (
    AdUnit,
    AnalyticsPoint,
    AnalyticsSeries,
    BigAmount,
    ChannelRecord,
    ChannelSpec,
    ChannelStatus,
    StatusType,
    ValidatorDesc,
)
from channel_explorer.domain.services import aggregation

_CREATED = datetime(2020, 1, 1, tzinfo=timezone.utc)


def _channel(
    channel_id: str,
    deposit: int,
    *,
    creator: str = "0xCreator",
    balances: dict[str, int] | None = None,
    status: StatusType = StatusType.ACTIVE,
    min_per_impression: int = 1,
    categories: tuple[str, ...] = ("legacy_300x250",),
) -> ChannelRecord:
    return ChannelRecord(
        id=channel_id,
        creator=creator,
        deposit_asset="0xDAI",
        deposit_amount=BigAmount(deposit),
        status=ChannelStatus(
            status_type=status,
            balances={
                key: BigAmount(value)
                for key, value in (balances or {}).items()
            },
            last_checked=_CREATED,
        ),
        spec=ChannelSpec(
            validators=(ValidatorDesc(id="leader", url="https://v1"),),
            min_per_impression=BigAmount(min_per_impression),
            max_per_impression=BigAmount(min_per_impression),
            created=_CREATED,
            ad_units=tuple(
                AdUnit(ipfs=f"Qm{channel_id}{index}", category=category)
                for index, category in enumerate(categories)
            ),
        ),
    )


def test_total_deposit_and_paid() -> None:
    """Totals should sum deposits and every paid balance."""
    records = [
        _channel("a", 100, balances={"0xP1": 10, "0xP2": 5}),
        _channel("b", 10**30, balances={"0xP1": 10**20}),
    ]

    assert aggregation.total_deposit(records) == BigAmount(100 + 10**30)
    assert aggregation.total_paid(records) == BigAmount(15 + 10**20)
    assert aggregation.total_deposit([]) == BigAmount(0)


def test_paid_ratio_in_thousandths_of_a_percent() -> None:
    """The ratio should be floor(paid * 100000 / deposit)."""
    ratio = aggregation.paid_ratio(BigAmount(1), BigAmount(3))

    assert ratio == BigAmount(33_333)


def test_paid_ratio_guard_never_divides() -> None:
    """A zero deposit should return None without calling division."""
    with patch.object(
        BigAmount,
        "div_floor",
        side_effect=AssertionError("division called"),
    ):
        for paid in (BigAmount(0), BigAmount(5), BigAmount(10**40)):
            assert aggregation.paid_ratio(paid, BigAmount(0)) is None


def test_unique_count_ignores_case() -> None:
    """Identities differing only by case should count once."""
    assert aggregation.unique_count(["0xABC", "0xabc", "0xDEF"]) == 2
    assert aggregation.unique_count([" 0xabc ", "", None, "0xABC"]) == 1


def test_unique_advertisers_and_publishers() -> None:
    """Creators paying themselves should not count as publishers."""
    records = [
        _channel(
            "a",
            100,
            creator="0xAdv1",
            balances={"0xadv1": 1, "0xPUB1": 2},
        ),
        _channel(
            "b",
            100,
            creator="0xADV1",
            balances={"0xpub1": 1, "0xPub2": 2},
        ),
        _channel("c", 100, creator="0xAdv2", balances={"0xadv1": 3}),
    ]

    assert aggregation.unique_advertisers(records) == 2
    # 0xadv1 is a publisher on channel c, where it is not the creator.
    assert aggregation.unique_publishers(records) == 3


def test_unique_ad_units_by_ipfs() -> None:
    """Ad units should be deduplicated by IPFS hash."""
    first = _channel("a", 1, categories=("x", "y"))
    duplicate = ChannelRecord(
        id="b",
        creator=first.creator,
        deposit_asset=first.deposit_asset,
        deposit_amount=first.deposit_amount,
        status=first.status,
        spec=first.spec,
    )

    assert aggregation.unique_ad_units([first, duplicate]) == 2


def test_per_category_stats_weighted_average_over_active_channels() -> None:
    """Weighted price should use deposits of active channels only."""
    records = [
        _channel("a", 100, min_per_impression=10, balances={"0xP": 40}),
        _channel("b", 300, min_per_impression=30),
        _channel(
            "c",
            10**6,
            min_per_impression=1000,
            status=StatusType.EXPIRED,
            balances={"0xP": 10**7},
        ),
    ]

    (stats,) = aggregation.per_category_stats(records)

    # (100*10 + 300*30) // 400 = 25
    assert stats.weighted_avg_price == BigAmount(25)
    assert stats.cpm == BigAmount(25_000)
    assert stats.active_volume == BigAmount(60 + 300)
    assert stats.total_volume == BigAmount(400 + 10**6)
    assert stats.channel_count == 3
    assert stats.active_count == 2


def test_per_category_stats_zero_for_inactive_category() -> None:
    """A category without active deposit should report a zero price."""
    records = [
        _channel(
            "a",
            100,
            min_per_impression=50,
            status=StatusType.EXHAUSTED,
            categories=("video",),
        )
    ]

    (stats,) = aggregation.per_category_stats(records)

    assert stats.weighted_avg_price == BigAmount(0)
    assert stats.active_volume == BigAmount(0)
    assert stats.active_count == 0


def test_per_category_stats_raises_underflow_on_overpaid_channel() -> None:
    """Paid balances above the deposit should surface as Underflow."""
    records = [_channel("broken", 10, balances={"0xP": 11})]

    with pytest.raises(Underflow, match="broken"):
        aggregation.per_category_stats(records)


def test_per_category_stats_orders_by_descending_price() -> None:
    """Categories should be ordered by weighted price, highest first."""
    records = [
        _channel("a", 100, min_per_impression=5, categories=("small",)),
        _channel("b", 100, min_per_impression=20, categories=("large",)),
        _channel("c", 100, min_per_impression=10, categories=("medium",)),
    ]

    stats = aggregation.per_category_stats(records)

    assert [item.weighted_avg_price.value for item in stats] == [20, 10, 5]
    assert [item.category for item in stats] == ["large", "medium", "small"]


def test_per_category_stats_keeps_first_encounter_order_on_ties() -> None:
    """Equal prices should keep the order categories first appear in."""
    records = [
        _channel("a", 100, min_per_impression=7, categories=("b", "a")),
        _channel("b", 100, min_per_impression=7, categories=("c",)),
    ]

    stats = aggregation.per_category_stats(records)

    assert [item.category for item in stats] == ["b", "a", "c"]


def test_per_category_stats_counts_a_channel_once_per_category() -> None:
    """Several units of one category should not add weight."""
    records = [
        _channel(
            "a",
            100,
            min_per_impression=10,
            categories=("banner", "banner"),
        ),
        _channel("b", 100, min_per_impression=40, categories=("banner",)),
    ]

    (stats,) = aggregation.per_category_stats(records)

    assert stats.total_volume == BigAmount(200)
    assert stats.active_volume == BigAmount(200)
    assert stats.weighted_avg_price == BigAmount(25)
    assert stats.channel_count == 2


def test_compute_market_summary() -> None:
    """Summary should gather counts, totals and optional sources."""
    records = [
        _channel("a", 200, creator="0xA", balances={"0xP": 50}),
        _channel("b", 200, creator="0xa", balances={"0xQ": 50}),
    ]
    volume = AnalyticsSeries(
        metric="eventPayouts",
        timeframe="day",
        points=(
            AnalyticsPoint(time=_CREATED, value=BigAmount(3)),
            AnalyticsPoint(time=_CREATED, value=BigAmount(4)),
        ),
    )

    summary = aggregation.compute_market_summary(
        records,
        core_balance=BigAmount(999),
        daily_volume=volume,
    )

    assert summary.campaigns == 2
    assert summary.ad_units == 2
    assert summary.advertisers == 1
    assert summary.publishers == 2
    assert summary.total_deposit == BigAmount(400)
    assert summary.total_paid == BigAmount(100)
    assert summary.paid_ratio == BigAmount(25_000)
    assert summary.locked_on_chain == BigAmount(999)
    assert summary.daily_volume == BigAmount(7)
    assert summary.monthly_impressions is None


def test_compute_market_summary_empty_snapshot() -> None:
    """An empty snapshot should report zeros and an undefined ratio."""
    summary = aggregation.compute_market_summary([])

    assert summary.campaigns == 0
    assert summary.total_deposit == BigAmount(0)
    assert summary.paid_ratio is None
