"""Channel ordering for the channels table."""

from collections.abc import Callable, Iterable
from enum import Enum

from channel_explorer.domain.models import ChannelRecord


class ChannelSort(Enum):
    """Sort keys offered by the channels table."""

    DEPOSIT = "deposit"
    STATUS = "status"
    CREATED = "created"

    @property
    def label(self) -> str:
        """Return the selector label for the sort key."""
        return f"Sort by {self.value}"

    @classmethod
    def parse(cls, name: str | None) -> "ChannelSort":
        """Map a selector value to a sort key, defaulting to deposit."""
        if not name:
            return cls.DEPOSIT
        try:
            return cls(name.strip().lower())
        except ValueError:
            return cls.DEPOSIT


_COMPARATORS: dict[ChannelSort, tuple[Callable[[ChannelRecord], object], bool]] = {
    ChannelSort.DEPOSIT: (lambda record: record.deposit_amount.value, True),
    ChannelSort.STATUS: (lambda record: record.status.status_type.rank, False),
    ChannelSort.CREATED: (lambda record: record.spec.created, True),
}


def sort_channels(
    records: Iterable[ChannelRecord],
    sort: ChannelSort = ChannelSort.DEPOSIT,
) -> list[ChannelRecord]:
    """Return channels ordered by the selected key.

    Args:
        records: Channel snapshot.
        sort: Sort key; deposit and created sort newest/largest first,
            status follows market status order.

    Returns:
        list[ChannelRecord]: Stable-sorted channels.
    """
    key_fn, reverse = _COMPARATORS[sort]
    return sorted(records, key=key_fn, reverse=reverse)


__all__ = ["ChannelSort", "sort_channels"]
