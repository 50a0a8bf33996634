"""Use case to compute ad unit statistics per category."""

from channel_explorer.domain.models import CategoryStats, DashboardState
from channel_explorer.domain.services.aggregation import per_category_stats
from channel_explorer.infrastructure.logging.logger import get_app_logger


class GetAdUnitStatsUseCase:
    """Compute the ad unit stats table from the dashboard state."""

    def __init__(self, logger=None) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()

    def execute(self, state: DashboardState) -> list[CategoryStats]:
        """Return per-category statistics ordered by weighted price.

        Args:
            state: Current dashboard state.

        Returns:
            list[CategoryStats]: Category rows, empty before channels load.

        Raises:
            Underflow: If an active channel paid out more than its deposit.
        """
        if not state.channels.has_value:
            return []
        stats = per_category_stats(state.channels.value)
        self._logger.info(f"Computed stats for {len(stats)} ad unit categories")
        return stats


__all__ = ["GetAdUnitStatsUseCase", "CategoryStats"]
