"""Use case refreshing the dashboard state from the market sources."""

from dataclasses import replace
from datetime import datetime
from typing import Callable

from channel_explorer.application.ports.market_repository import (
    DAILY_VOLUME_METRIC,
    MONTHLY_IMPRESSIONS_METRIC,
    MarketRepositoryPort,
)
from channel_explorer.domain.models import (
    DashboardState,
    Loadable,
    LoadStatus,
)
from channel_explorer.infrastructure.logging.logger import get_app_logger


class RefreshDashboardUseCase:
    """Fetch every data source and return the next dashboard state."""

    def __init__(
        self,
        market_repository: MarketRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            market_repository: Port providing market snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._market_repository = market_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        state: DashboardState | None,
        now: datetime,
    ) -> DashboardState:
        """Return a new state with freshly fetched sources.

        A source that fails keeps its previous value and records the
        error; the other sources still refresh.

        Args:
            state: Previous dashboard state, or None on first load.
            now: Time of the refresh, stored when channels load.

        Returns:
            DashboardState: Next dashboard state.
        """
        previous = state or DashboardState()
        channels = self._load(
            "channels",
            previous.channels,
            lambda: tuple(self._market_repository.fetch_channels()),
        )
        core_balance = self._load(
            "core balance",
            previous.core_balance,
            self._market_repository.fetch_core_balance,
        )
        daily_volume = self._load(
            "daily volume",
            previous.daily_volume,
            lambda: self._market_repository.fetch_analytics(
                *DAILY_VOLUME_METRIC
            ),
        )
        monthly_impressions = self._load(
            "monthly impressions",
            previous.monthly_impressions,
            lambda: self._market_repository.fetch_analytics(
                *MONTHLY_IMPRESSIONS_METRIC
            ),
        )
        last_loaded = previous.last_loaded
        if channels.status is LoadStatus.READY:
            last_loaded = now
            self._logger.info(
                f"Dashboard refreshed with {len(channels.value)} channels"
            )
        return replace(
            previous,
            channels=channels,
            core_balance=core_balance,
            daily_volume=daily_volume,
            monthly_impressions=monthly_impressions,
            last_loaded=last_loaded,
        )

    def _load(
        self,
        label: str,
        previous: Loadable,
        fetch: Callable[[], object],
    ) -> Loadable:
        try:
            return Loadable.ready(fetch())
        except (RuntimeError, ValueError) as exc:
            self._logger.warning(f"Failed to load {label}: {exc}")
            return previous.failed(str(exc))


__all__ = ["RefreshDashboardUseCase"]
