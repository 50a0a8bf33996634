"""Helpers for BigAmount normalization."""

from channel_explorer.domain.models import BigAmount


def coerce_amount(value) -> BigAmount:
    """Normalize raw payload values to BigAmount.

    Args:
        value: Decimal string, integer, BigAmount or None from adapters.

    Returns:
        BigAmount: Normalized amount.

    Raises:
        ValueError: If the value is not a non-negative integer amount.
    """
    if value is None:
        return BigAmount.zero()
    if isinstance(value, BigAmount):
        return value
    return BigAmount.from_json(value)


__all__ = ["coerce_amount"]
