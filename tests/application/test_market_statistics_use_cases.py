"""Tests for the summary, channel table and ad unit stats use cases."""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from channel_explorer.application.use_cases.get_ad_unit_stats import (
    GetAdUnitStatsUseCase,
)
from channel_explorer.application.use_cases.get_channel_table import (
    GetChannelTableUseCase,
)
from channel_explorer.application.use_cases.get_market_summary import (
    GetMarketSummaryUseCase,
)
from channel_explorer.domain.errors import Underflow
from channel_explorer.domain.models import (
    AdUnit,
    AnalyticsPoint,
    AnalyticsSeries,
    BigAmount,
    ChannelRecord,
    ChannelSpec,
    ChannelStatus,
    DashboardState,
    Loadable,
    StatusType,
    ValidatorDesc,
)
from channel_explorer.domain.services.sorting import ChannelSort

_NOW = datetime(2024, 5, 10, 12, 0, tzinfo=timezone.utc)
_TOKEN = 10**18


def _channel(
    channel_id: str,
    deposit: int,
    paid: int,
    *,
    status: StatusType = StatusType.ACTIVE,
    checked_seconds_ago: int = 10,
    created_days_ago: int = 1,
    category: str = "legacy_300x250",
) -> ChannelRecord:
    return ChannelRecord(
        id=channel_id,
        creator="0xAdvertiser",
        deposit_asset="0xDAI",
        deposit_amount=BigAmount(deposit),
        status=ChannelStatus(
            status_type=status,
            balances={"0xPublisher": BigAmount(paid)},
            last_checked=_NOW - timedelta(seconds=checked_seconds_ago),
            usd_estimate=12.5,
        ),
        spec=ChannelSpec(
            validators=(
                ValidatorDesc(id="leader", url="https://tom.adex.network/"),
                ValidatorDesc(id="follower", url="https://jerry.adex.network"),
            ),
            min_per_impression=BigAmount(10**14),
            max_per_impression=BigAmount(10**15),
            created=_NOW - timedelta(days=created_days_ago),
            ad_units=(
                AdUnit(
                    ipfs=f"Qm{channel_id}",
                    category=category,
                    media_url="ipfs://QmMedia",
                    media_mime="image/png",
                ),
            ),
        ),
    )


def _state(*records: ChannelRecord, **sources) -> DashboardState:
    return DashboardState(
        channels=Loadable.ready(tuple(records)),
        last_loaded=_NOW,
        **sources,
    )


def test_market_summary_is_none_before_channels_load() -> None:
    """No summary should be produced while channels are loading."""
    use_case = GetMarketSummaryUseCase(logger=MagicMock())

    assert use_case.execute(DashboardState()) is None


def test_market_summary_includes_loaded_sources() -> None:
    """Loaded optional sources should flow into the summary."""
    impressions = AnalyticsSeries(
        metric="eventCounts",
        timeframe="month",
        points=(AnalyticsPoint(time=_NOW, value=BigAmount(1_500_000)),),
    )
    state = _state(
        _channel("0xaaaaaaaa", 100 * _TOKEN, 25 * _TOKEN),
        _channel("0xbbbbbbbb", 300 * _TOKEN, 75 * _TOKEN),
        core_balance=Loadable.ready(BigAmount(1000 * _TOKEN)),
        monthly_impressions=Loadable.ready(impressions),
    )
    logger = MagicMock()

    summary = GetMarketSummaryUseCase(logger=logger).execute(state)

    assert summary.campaigns == 2
    assert summary.total_deposit == BigAmount(400 * _TOKEN)
    assert summary.total_paid == BigAmount(100 * _TOKEN)
    assert summary.paid_ratio == BigAmount(25_000)
    assert summary.locked_on_chain == BigAmount(1000 * _TOKEN)
    assert summary.daily_volume is None
    assert summary.monthly_impressions == 1_500_000
    logger.info.assert_called_once()


def test_channel_table_rows_sorted_and_flagged() -> None:
    """Rows should follow the sort key and flag stale statuses."""
    state = _state(
        _channel("0xaaaaaaaa", 100 * _TOKEN, 50 * _TOKEN),
        _channel(
            "0xbbbbbbbb",
            300 * _TOKEN,
            0,
            checked_seconds_ago=600,
            created_days_ago=5,
        ),
    )
    use_case = GetChannelTableUseCase(logger=MagicMock())

    rows = use_case.execute(state, ChannelSort.DEPOSIT)

    assert [row.id for row in rows] == ["0xbbbbbbbb", "0xaaaaaaaa"]
    stale, fresh = rows
    assert stale.is_recent is False
    assert fresh.is_recent is True
    assert fresh.id_prefix == "0xaaaa"
    assert fresh.status_url == (
        "https://tom.adex.network/channel/0xaaaaaaaa/status"
    )
    assert fresh.cpm == BigAmount(10**17)
    assert fresh.paid == BigAmount(50 * _TOKEN)
    assert fresh.paid_ratio == BigAmount(50_000)
    assert fresh.preview.media_url == "ipfs://QmMedia"
    assert fresh.usd_estimate == 12.5

    by_created = use_case.execute(state, ChannelSort.CREATED)
    assert [row.id for row in by_created] == ["0xaaaaaaaa", "0xbbbbbbbb"]


def test_channel_table_zero_deposit_has_undefined_ratio() -> None:
    """Channels with no deposit should report an undefined ratio."""
    state = _state(_channel("0xcccccccc", 0, 0))

    (row,) = GetChannelTableUseCase(logger=MagicMock()).execute(state)

    assert row.paid_ratio is None


def test_ad_unit_stats_propagates_underflow() -> None:
    """Overpaid active channels should not be hidden."""
    state = _state(_channel("0xdddddddd", 10, 11))

    with pytest.raises(Underflow):
        GetAdUnitStatsUseCase(logger=MagicMock()).execute(state)


def test_ad_unit_stats_orders_categories() -> None:
    """Stats should come back ordered by weighted price."""
    state = _state(
        _channel("0xa", 100, 0, category="small"),
        _channel("0xb", 100, 0, status=StatusType.EXPIRED, category="video"),
    )

    stats = GetAdUnitStatsUseCase(logger=MagicMock()).execute(state)

    assert [item.category for item in stats] == ["small", "video"]
    assert stats[1].weighted_avg_price == BigAmount(0)
    assert GetAdUnitStatsUseCase(logger=MagicMock()).execute(
        DashboardState()
    ) == []
