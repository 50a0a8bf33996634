"""Tests for the RefreshDashboardUseCase."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

from channel_explorer.application.use_cases.refresh_dashboard import (
    RefreshDashboardUseCase,
)
from channel_explorer.domain.models import (
    AnalyticsSeries,
    BigAmount,
    DashboardState,
    LoadStatus,
)
from channel_explorer.infrastructure.market_codec import decode_analytics

_NOW = datetime(2024, 5, 10, 12, 0, tzinfo=timezone.utc)
_LATER = datetime(2024, 5, 10, 12, 1, tzinfo=timezone.utc)


def _build_repository() -> MagicMock:
    repository = MagicMock()
    repository.fetch_channels.return_value = ["channel-a", "channel-b"]
    repository.fetch_core_balance.return_value = BigAmount(10**21)
    repository.fetch_analytics.side_effect = (
        lambda metric, timeframe: AnalyticsSeries(
            metric=metric,
            timeframe=timeframe,
        )
    )
    return repository


def test_execute_loads_every_source() -> None:
    """First refresh should mark every source ready."""
    repository = _build_repository()
    use_case = RefreshDashboardUseCase(
        market_repository=repository,
        logger=MagicMock(),
    )

    state = use_case.execute(None, _NOW)

    assert state.channels.status is LoadStatus.READY
    assert state.channels.value == ("channel-a", "channel-b")
    assert state.core_balance.value == BigAmount(10**21)
    assert state.daily_volume.value.metric == "eventPayouts"
    assert state.daily_volume.value.timeframe == "day"
    assert state.monthly_impressions.value.metric == "eventCounts"
    assert state.monthly_impressions.value.timeframe == "month"
    assert state.last_loaded == _NOW


def test_execute_keeps_previous_value_when_a_source_fails() -> None:
    """A failing source should keep its value and record the error."""
    repository = _build_repository()
    logger = MagicMock()
    use_case = RefreshDashboardUseCase(
        market_repository=repository,
        logger=logger,
    )
    first = use_case.execute(None, _NOW)
    repository.fetch_core_balance.side_effect = RuntimeError("etherscan down")
    repository.fetch_channels.return_value = ["channel-c"]

    second = use_case.execute(first, _LATER)

    assert second.core_balance.status is LoadStatus.FAILED
    assert second.core_balance.value == BigAmount(10**21)
    assert second.core_balance.error == "etherscan down"
    assert second.channels.value == ("channel-c",)
    assert second.last_loaded == _LATER
    logger.warning.assert_called_once()
    # The previous state is left untouched.
    assert first.core_balance.status is LoadStatus.READY


def test_execute_does_not_advance_last_loaded_without_channels() -> None:
    """last_loaded should only move when channels load."""
    repository = _build_repository()
    repository.fetch_channels.side_effect = ValueError("bad payload")
    use_case = RefreshDashboardUseCase(
        market_repository=repository,
        logger=MagicMock(),
    )
    previous = DashboardState(last_loaded=_NOW)

    state = use_case.execute(previous, _LATER)

    assert state.channels.status is LoadStatus.FAILED
    assert state.channels.value is None
    assert state.last_loaded == _NOW
    assert state.core_balance.status is LoadStatus.READY


def test_execute_records_error_for_out_of_range_analytics() -> None:
    """A bad analytics timestamp should fail only that source."""
    repository = _build_repository()
    repository.fetch_analytics.side_effect = (
        lambda metric, timeframe: decode_analytics(
            {"aggr": [{"time": 10**20, "value": "1"}]},
            metric,
            timeframe,
        )
    )
    use_case = RefreshDashboardUseCase(
        market_repository=repository,
        logger=MagicMock(),
    )

    state = use_case.execute(None, _NOW)

    assert state.channels.status is LoadStatus.READY
    assert state.daily_volume.status is LoadStatus.FAILED
    assert "invalid timestamp" in state.daily_volume.error
    assert state.last_loaded == _NOW
