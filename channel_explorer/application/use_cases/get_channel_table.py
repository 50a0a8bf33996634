"""Use case to build the channels table."""

from datetime import datetime

from channel_explorer.domain.constants import (
    CHANNEL_ID_PREFIX_LENGTH,
    PER_THOUSAND,
    RECENT_STATUS_SECONDS,
)
from channel_explorer.domain.models import (
    ChannelRecord,
    ChannelRow,
    DashboardState,
)
from channel_explorer.domain.services.aggregation import paid_ratio
from channel_explorer.domain.services.sorting import ChannelSort, sort_channels
from channel_explorer.infrastructure.logging.logger import get_app_logger


class GetChannelTableUseCase:
    """Build sorted channel rows from the dashboard state."""

    def __init__(
        self,
        logger=None,
        recent_seconds: int = RECENT_STATUS_SECONDS,
    ) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
            recent_seconds: Maximum status age, relative to the last load,
                for a row to count as recent.
        """
        self._logger = logger or get_app_logger()
        self._recent_seconds = recent_seconds

    def execute(
        self,
        state: DashboardState,
        sort: ChannelSort = ChannelSort.DEPOSIT,
    ) -> list[ChannelRow]:
        """Return channel rows in the selected order.

        Args:
            state: Current dashboard state.
            sort: Sort key for the table.

        Returns:
            list[ChannelRow]: One row per channel, empty before load.
        """
        if not state.channels.has_value:
            return []
        rows = [
            self._build_row(record, state.last_loaded)
            for record in sort_channels(state.channels.value, sort)
        ]
        self._logger.info(
            f"Built {len(rows)} channel rows sorted by {sort.value}"
        )
        return rows

    def _build_row(
        self,
        record: ChannelRecord,
        last_loaded: datetime | None,
    ) -> ChannelRow:
        paid = record.status.balances_sum()
        leader = record.spec.leader
        return ChannelRow(
            id=record.id,
            id_prefix=record.id[:CHANNEL_ID_PREFIX_LENGTH],
            status_url=(
                f"{leader.url.rstrip('/')}/channel/{record.id}/status"
                if leader is not None
                else None
            ),
            usd_estimate=record.status.usd_estimate,
            deposit=record.deposit_amount,
            cpm=record.spec.min_per_impression.mul_scalar(PER_THOUSAND),
            paid=paid,
            paid_ratio=paid_ratio(paid, record.deposit_amount),
            status=record.status.status_type,
            created=record.spec.created,
            is_recent=self._is_recent(record, last_loaded),
            preview=record.spec.ad_units[0] if record.spec.ad_units else None,
        )

    def _is_recent(
        self,
        record: ChannelRecord,
        last_loaded: datetime | None,
    ) -> bool:
        if last_loaded is None:
            return True
        age = int(last_loaded.timestamp()) - int(
            record.status.last_checked.timestamp()
        )
        return age <= self._recent_seconds


__all__ = ["GetChannelTableUseCase", "ChannelRow"]
