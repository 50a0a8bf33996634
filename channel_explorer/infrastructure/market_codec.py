"""Decoding of market, analytics and Etherscan JSON payloads."""

from collections.abc import Mapping
from datetime import datetime, timezone

from channel_explorer.domain.models import (
    AdUnit,
    AnalyticsPoint,
    AnalyticsSeries,
    BigAmount,
    ChannelRecord,
    ChannelSpec,
    ChannelStatus,
    StatusType,
    TargetingTag,
    ValidatorDesc,
)
from channel_explorer.utils.amount_utils import coerce_amount


class MarketPayloadError(ValueError):
    """Raised when a payload does not match the expected shape."""


def decode_channels(payload) -> list[ChannelRecord]:
    """Decode the market campaigns listing.

    Args:
        payload: Parsed JSON list returned by `/campaigns`.

    Returns:
        list[ChannelRecord]: Decoded channels in payload order.

    Raises:
        MarketPayloadError: If any channel is malformed.
    """
    if not isinstance(payload, list):
        raise MarketPayloadError(
            f"Expected a list of channels, got {type(payload).__name__}"
        )
    return [decode_channel(item) for item in payload]


def decode_channel(payload) -> ChannelRecord:
    """Decode a single market channel.

    Args:
        payload: Parsed JSON object for one channel.

    Returns:
        ChannelRecord: Decoded channel.

    Raises:
        MarketPayloadError: If required fields are missing or invalid.
    """
    data = _mapping(payload, "channel")
    channel_id = _string(data, "id", "channel")
    context = f"channel {channel_id}"
    return ChannelRecord(
        id=channel_id,
        creator=_string(data, "creator", context),
        deposit_asset=_string(data, "depositAsset", context),
        deposit_amount=_amount(data, "depositAmount", context),
        status=decode_status(_field(data, "status", context), context),
        spec=decode_spec(_field(data, "spec", context), context),
    )


def decode_status(payload, context: str = "status") -> ChannelStatus:
    """Decode the market status of a channel."""
    data = _mapping(payload, context)
    raw_name = _string(data, "name", context)
    try:
        status_type = StatusType(raw_name)
    except ValueError as exc:
        raise MarketPayloadError(
            f"{context}: unknown status '{raw_name}'"
        ) from exc
    raw_balances = data.get("lastApprovedBalances") or {}
    balances = {
        str(identity): _to_amount(value, f"{context} balance {identity}")
        for identity, value in _mapping(raw_balances, context).items()
    }
    usd_estimate = data.get("usdEstimate")
    if usd_estimate is not None:
        try:
            usd_estimate = float(usd_estimate)
        except (TypeError, ValueError) as exc:
            raise MarketPayloadError(
                f"{context}: invalid usdEstimate {usd_estimate!r}"
            ) from exc
    return ChannelStatus(
        status_type=status_type,
        balances=balances,
        last_checked=_timestamp_ms(
            _field(data, "lastChecked", context),
            f"{context} lastChecked",
        ),
        usd_estimate=usd_estimate,
    )


def decode_spec(payload, context: str = "spec") -> ChannelSpec:
    """Decode the campaign spec of a channel."""
    data = _mapping(payload, context)
    validators = tuple(
        ValidatorDesc(
            id=_string(item, "id", context),
            url=_string(item, "url", context),
            fee=_to_amount(item.get("fee"), f"{context} validator fee"),
        )
        for item in _sequence(data.get("validators"), context)
    )
    targeting = []
    for item in _sequence(data.get("targeting"), context):
        try:
            targeting.append(
                TargetingTag(
                    tag=_string(item, "tag", context),
                    score=item.get("score"),
                )
            )
        except ValueError as exc:
            raise MarketPayloadError(f"{context}: {exc}") from exc
    withdraw_start = data.get("withdrawPeriodStart")
    return ChannelSpec(
        validators=validators,
        min_per_impression=_amount(data, "minPerImpression", context),
        max_per_impression=_amount(data, "maxPerImpression", context),
        created=_timestamp_ms(
            _field(data, "created", context),
            f"{context} created",
        ),
        withdraw_period_start=(
            _timestamp_ms(withdraw_start, f"{context} withdrawPeriodStart")
            if withdraw_start is not None
            else None
        ),
        title=data.get("title"),
        targeting=tuple(targeting),
        min_targeting_score=data.get("minTargetingScore"),
        ad_units=tuple(
            decode_ad_unit(item, context)
            for item in _sequence(data.get("adUnits"), context)
        ),
    )


def decode_ad_unit(payload, context: str = "ad unit") -> AdUnit:
    """Decode an ad unit."""
    data = _mapping(payload, context)
    return AdUnit(
        ipfs=str(data.get("ipfs") or ""),
        category=_string(data, "type", context),
        media_url=str(data.get("mediaUrl") or ""),
        media_mime=str(data.get("mediaMime") or ""),
        target_url=str(data.get("targetUrl") or ""),
    )


def decode_analytics(
    payload,
    metric: str,
    timeframe: str,
) -> AnalyticsSeries:
    """Decode an analytics response into a time-ordered series.

    Args:
        payload: Parsed JSON object with an `aggr` list.
        metric: Metric name requested.
        timeframe: Timeframe requested.

    Returns:
        AnalyticsSeries: Buckets sorted by time.
    """
    context = f"analytics {metric}/{timeframe}"
    data = _mapping(payload, context)
    points = [
        AnalyticsPoint(
            time=_timestamp_ms(_field(item, "time", context), context),
            value=_amount(item, "value", context),
        )
        for item in _sequence(data.get("aggr"), context)
    ]
    points.sort(key=lambda point: point.time)
    return AnalyticsSeries(
        metric=metric,
        timeframe=timeframe,
        points=tuple(points),
    )


def decode_token_balance(payload) -> BigAmount:
    """Decode an Etherscan `tokenbalance` response."""
    data = _mapping(payload, "token balance")
    if str(data.get("status", "1")) != "1":
        raise MarketPayloadError(
            f"token balance: {data.get('message') or 'request failed'}: "
            f"{data.get('result')}"
        )
    return _amount(data, "result", "token balance")


def _mapping(value, context: str) -> Mapping:
    if not isinstance(value, Mapping):
        raise MarketPayloadError(
            f"{context}: expected an object, got {type(value).__name__}"
        )
    return value


def _sequence(value, context: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise MarketPayloadError(
            f"{context}: expected a list, got {type(value).__name__}"
        )
    return value


def _field(data: Mapping, key: str, context: str):
    if key not in data or data[key] is None:
        raise MarketPayloadError(f"{context}: missing field '{key}'")
    return data[key]


def _string(data, key: str, context: str) -> str:
    value = _field(_mapping(data, context), key, context)
    if not isinstance(value, str):
        raise MarketPayloadError(f"{context}: field '{key}' must be a string")
    return value


def _amount(data: Mapping, key: str, context: str) -> BigAmount:
    return _to_amount(_field(data, key, context), f"{context} {key}")


def _to_amount(value, context: str) -> BigAmount:
    try:
        return coerce_amount(value)
    except ValueError as exc:
        raise MarketPayloadError(f"{context}: {exc}") from exc


def _timestamp_ms(value, context: str) -> datetime:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise MarketPayloadError(f"{context}: invalid timestamp {value!r}")
    try:
        millis = int(value)
        return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
    except (ValueError, OverflowError, OSError) as exc:
        raise MarketPayloadError(
            f"{context}: invalid timestamp {value!r}"
        ) from exc


__all__ = [
    "MarketPayloadError",
    "decode_channels",
    "decode_channel",
    "decode_status",
    "decode_spec",
    "decode_ad_unit",
    "decode_analytics",
    "decode_token_balance",
]
