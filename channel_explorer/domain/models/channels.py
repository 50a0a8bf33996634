"""Domain models for advertising payment channels."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType

from channel_explorer.domain.models.amounts import BigAmount


class StatusType(Enum):
    """Market status of a channel, declared in market order."""

    INITIALIZING = "Initializing"
    READY = "Ready"
    ACTIVE = "Active"
    OFFLINE = "Offline"
    DISCONNECTED = "Disconnected"
    UNHEALTHY = "Unhealthy"
    WITHDRAW = "Withdraw"
    EXPIRED = "Expired"
    EXHAUSTED = "Exhausted"

    @property
    def rank(self) -> int:
        """Return the position of the status in market order."""
        return _STATUS_ORDER.index(self)


_STATUS_ORDER = tuple(StatusType)


@dataclass(frozen=True)
class ChannelStatus:
    """Latest validator status observed for a channel.

    Attributes:
        status_type: Market status of the channel.
        balances: Approved paid balances keyed by party identity.
        last_checked: When the market last observed the channel.
        usd_estimate: Optional USD estimate reported by the market.
    """

    status_type: StatusType
    balances: Mapping[str, BigAmount]
    last_checked: datetime
    usd_estimate: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "balances",
            MappingProxyType(dict(self.balances)),
        )

    def balances_sum(self) -> BigAmount:
        """Return the total amount paid out to all parties."""
        return BigAmount.sum(self.balances.values())


@dataclass(frozen=True)
class AdUnit:
    """Ad unit attached to a channel spec."""

    ipfs: str
    category: str
    media_url: str = ""
    media_mime: str = ""
    target_url: str = ""

    @property
    def is_video(self) -> bool:
        """Return True when the unit media is a video."""
        return self.media_mime.startswith("video/")


@dataclass(frozen=True)
class ValidatorDesc:
    """Validator taking part in a channel."""

    id: str
    url: str
    fee: BigAmount = field(default_factory=BigAmount.zero)


@dataclass(frozen=True)
class TargetingTag:
    """Targeting tag with a score between 0 and 100."""

    tag: str
    score: int

    def __post_init__(self) -> None:
        if isinstance(self.score, bool) or not isinstance(self.score, int):
            raise ValueError(f"Targeting score must be an int: {self.score!r}")
        if not 0 <= self.score <= 100:
            raise ValueError(
                f"Targeting score should be between 0 and 100: {self.score}"
            )


@dataclass(frozen=True)
class ChannelSpec:
    """Campaign specification of a channel."""

    validators: tuple[ValidatorDesc, ...]
    min_per_impression: BigAmount
    max_per_impression: BigAmount
    created: datetime
    withdraw_period_start: datetime | None = None
    title: str | None = None
    targeting: tuple[TargetingTag, ...] = ()
    min_targeting_score: int | None = None
    ad_units: tuple[AdUnit, ...] = ()

    @property
    def leader(self) -> ValidatorDesc | None:
        """Return the leading validator when one is declared."""
        return self.validators[0] if self.validators else None


@dataclass(frozen=True)
class ChannelRecord:
    """Market channel snapshot consumed by the aggregation services."""

    id: str
    creator: str
    deposit_asset: str
    deposit_amount: BigAmount
    status: ChannelStatus
    spec: ChannelSpec

    @property
    def is_active(self) -> bool:
        """Return True when the channel status is Active."""
        return self.status.status_type is StatusType.ACTIVE


__all__ = [
    "StatusType",
    "ChannelStatus",
    "AdUnit",
    "ValidatorDesc",
    "TargetingTag",
    "ChannelSpec",
    "ChannelRecord",
]
