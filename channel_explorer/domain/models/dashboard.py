"""Explicit dashboard state passed between refreshes."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Generic, TypeVar

from channel_explorer.domain.models.amounts import BigAmount
from channel_explorer.domain.models.analytics import AnalyticsSeries
from channel_explorer.domain.models.channels import ChannelRecord

T = TypeVar("T")


class LoadStatus(Enum):
    """Lifecycle of a dashboard data source."""

    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class Loadable(Generic[T]):
    """Data source value together with its load status.

    A failed refresh keeps the last value so the dashboard can keep
    showing it next to the error.
    """

    status: LoadStatus = LoadStatus.LOADING
    value: T | None = None
    error: str | None = None

    @classmethod
    def loading(cls) -> "Loadable[T]":
        """Return a source that has not loaded yet."""
        return cls()

    @classmethod
    def ready(cls, value: T) -> "Loadable[T]":
        """Return a successfully loaded source."""
        return cls(status=LoadStatus.READY, value=value)

    def failed(self, error: str) -> "Loadable[T]":
        """Return this source marked as failed, keeping its value."""
        return replace(self, status=LoadStatus.FAILED, error=error)

    @property
    def has_value(self) -> bool:
        """Return True when a value has been loaded at least once."""
        return self.value is not None


@dataclass(frozen=True)
class DashboardState:
    """Snapshot of every data source the dashboard renders."""

    channels: Loadable[tuple[ChannelRecord, ...]] = field(
        default_factory=Loadable.loading
    )
    core_balance: Loadable[BigAmount] = field(default_factory=Loadable.loading)
    daily_volume: Loadable[AnalyticsSeries] = field(
        default_factory=Loadable.loading
    )
    monthly_impressions: Loadable[AnalyticsSeries] = field(
        default_factory=Loadable.loading
    )
    last_loaded: datetime | None = None


__all__ = ["LoadStatus", "Loadable", "DashboardState"]
