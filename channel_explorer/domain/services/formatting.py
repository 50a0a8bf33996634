"""Human-readable formatting of dashboard figures."""

from datetime import datetime

from channel_explorer.domain.constants import (
    DEFAULT_TOKEN_SYMBOL,
    DISPLAY_DECIMALS,
    DISPLAY_DIVISOR_DECIMALS,
    NOT_AVAILABLE,
    PAID_RATIO_DECIMALS,
    PER_THOUSAND,
    SATURATION_MARKER,
    TOKEN_DECIMALS,
)
from channel_explorer.domain.errors import PrecisionLoss
from channel_explorer.domain.models import BigAmount


def currency_display(
    amount: BigAmount,
    decimals: int = DISPLAY_DIVISOR_DECIMALS,
    display_decimals: int = DISPLAY_DECIMALS,
) -> str:
    """Format an amount scaled down by a power of ten.

    Args:
        amount: Amount in the smallest token unit.
        decimals: Power of ten the amount is floor-divided by.
        display_decimals: Fractional digits in the output.

    Returns:
        str: Formatted quotient, or ">max" when the quotient cannot be
        shown without losing precision.
    """
    quotient = amount.div_floor(10**decimals)
    try:
        value = quotient.to_display_float()
    except PrecisionLoss:
        return SATURATION_MARKER
    return f"{value:.{display_decimals}f}"


def token_display(
    amount: BigAmount,
    symbol: str = DEFAULT_TOKEN_SYMBOL,
    token_decimals: int = TOKEN_DECIMALS,
    display_decimals: int = DISPLAY_DECIMALS,
) -> str:
    """Format a token amount in whole tokens, e.g. "12.34 DAI".

    Args:
        amount: Amount in the smallest token unit.
        symbol: Token symbol appended to the value.
        token_decimals: Decimals of the token.
        display_decimals: Fractional digits in the output.

    Returns:
        str: Readable amount, or ">max" when it cannot be displayed.
    """
    kept_decimals = min(token_decimals, display_decimals)
    units = amount.div_floor(10**(token_decimals - kept_decimals))
    try:
        value = units.to_display_float()
    except PrecisionLoss:
        return SATURATION_MARKER
    return f"{value / 10**kept_decimals:.{display_decimals}f} {symbol}"


def cpm_display(
    price_per_impression: BigAmount,
    symbol: str = DEFAULT_TOKEN_SYMBOL,
) -> str:
    """Format a per-impression price per thousand impressions."""
    return token_display(
        price_per_impression.mul_scalar(PER_THOUSAND),
        symbol=symbol,
    )


def paid_ratio_display(units: BigAmount | None) -> str:
    """Format a paid ratio given in thousandths of a percent.

    Args:
        units: Ratio from `paid_ratio`, or None when undefined.

    Returns:
        str: Percentage with three decimals, e.g. "12.345%", or "N/A".
    """
    if units is None:
        return NOT_AVAILABLE
    scale = 10**PAID_RATIO_DECIMALS
    whole, fraction = divmod(units.value, scale)
    return f"{whole}.{fraction:0{PAID_RATIO_DECIMALS}d}%"


def relative_time_label(now: datetime, observed_at: datetime) -> str:
    """Describe how long ago a timestamp was, relative to `now`.

    Args:
        now: Reference time supplied by the caller.
        observed_at: Timestamp to describe.

    Returns:
        str: "just now", "N seconds/minutes/hours ago" or the
        observed date as YYYY-MM-DD.
    """
    elapsed = int(now.timestamp()) - int(observed_at.timestamp())
    if elapsed < 0:
        return "just now"
    if elapsed < 60:
        return f"{elapsed} seconds ago"
    if elapsed < 3600:
        return f"{elapsed // 60} minutes ago"
    if elapsed < 86400:
        return f"{elapsed // 3600} hours ago"
    return observed_at.strftime("%Y-%m-%d")


def count_display(value: int | None) -> str:
    """Format an integer count with thousands separators."""
    if value is None:
        return NOT_AVAILABLE
    return f"{value:,}"


def usd_display(value: float | None) -> str:
    """Format a USD estimate or N/A when missing."""
    if value is None:
        return NOT_AVAILABLE
    return f"${value:.2f}"


def to_http_url(url: str, ipfs_gateway: str) -> str:
    """Rewrite ipfs:// media URLs to an HTTP gateway."""
    if url.startswith("ipfs://"):
        return url.replace("ipfs://", ipfs_gateway, 1)
    return url


__all__ = [
    "currency_display",
    "token_display",
    "cpm_display",
    "paid_ratio_display",
    "relative_time_label",
    "count_display",
    "usd_display",
    "to_http_url",
]
