"""Use case to compute the market summary cards."""

from channel_explorer.domain.models import DashboardState, MarketSummary
from channel_explorer.domain.services.aggregation import compute_market_summary
from channel_explorer.infrastructure.logging.logger import get_app_logger


class GetMarketSummaryUseCase:
    """Compute summary card figures from the dashboard state."""

    def __init__(self, logger=None) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()

    def execute(self, state: DashboardState) -> MarketSummary | None:
        """Return the market summary for the loaded channels.

        Optional sources (on-chain balance, volume, impressions) are only
        included once they have loaded.

        Args:
            state: Current dashboard state.

        Returns:
            MarketSummary | None: Summary figures, or None while the
            channels have never loaded.
        """
        if not state.channels.has_value:
            return None
        summary = compute_market_summary(
            state.channels.value,
            core_balance=state.core_balance.value,
            daily_volume=state.daily_volume.value,
            monthly_impressions=state.monthly_impressions.value,
        )
        self._logger.info(
            f"Market summary computed: campaigns={summary.campaigns}, "
            f"deposit={summary.total_deposit}, paid={summary.total_paid}"
        )
        return summary


__all__ = ["GetMarketSummaryUseCase", "MarketSummary"]
