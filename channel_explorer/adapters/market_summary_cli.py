"""CLI adapter printing the market summary and ad unit stats.

This module wires the refresh and summary use cases to the HTTP market
repository and provides a command-line entry point for a one-off snapshot.
"""

from datetime import datetime, timezone

from channel_explorer.application.use_cases.get_ad_unit_stats import (
    GetAdUnitStatsUseCase,
)
from channel_explorer.application.use_cases.get_market_summary import (
    GetMarketSummaryUseCase,
)
from channel_explorer.application.use_cases.refresh_dashboard import (
    RefreshDashboardUseCase,
)
from channel_explorer.domain.services.formatting import (
    count_display,
    cpm_display,
    paid_ratio_display,
    token_display,
)
from channel_explorer.infrastructure.container import build_market_repository
from channel_explorer.infrastructure.logging.logger import get_app_logger


def _optional(value, formatter) -> str:
    """Format an optional figure, or N/A when its source failed."""
    if value is None:
        return "N/A"
    return formatter(value)


def main() -> None:
    """Fetch one market snapshot and print its statistics."""
    logger = get_app_logger()
    repository = build_market_repository()
    refresh = RefreshDashboardUseCase(market_repository=repository, logger=logger)
    state = refresh.execute(None, datetime.now(timezone.utc))

    summary = GetMarketSummaryUseCase(logger=logger).execute(state)
    if summary is None:
        logger.error(f"Channels could not be loaded: {state.channels.error}")
        return

    print(
        f"Campaigns: {count_display(summary.campaigns)}, "
        f"ad units: {count_display(summary.ad_units)}, "
        f"publishers: {count_display(summary.publishers)}, "
        f"advertisers: {count_display(summary.advertisers)}"
    )
    print(
        f"Total deposits: {token_display(summary.total_deposit)}, "
        f"paid out: {token_display(summary.total_paid)} "
        f"({paid_ratio_display(summary.paid_ratio)})"
    )
    print(
        f"Locked on-chain: {_optional(summary.locked_on_chain, token_display)}, "
        f"24h volume: {_optional(summary.daily_volume, token_display)}, "
        "monthly impressions: "
        f"{_optional(summary.monthly_impressions, count_display)}"
    )
    for item in GetAdUnitStatsUseCase(logger=logger).execute(state):
        print(
            f"{item.category}: CPM={cpm_display(item.weighted_avg_price)}, "
            f"active volume={token_display(item.active_volume)}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
