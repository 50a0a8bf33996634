"""Domain constants for channel statistics."""

# Token amounts are 18-decimal integers; display divides by 10**16 and
# shows the quotient in hundredths.
TOKEN_DECIMALS = 18
DISPLAY_DECIMALS = 2
DISPLAY_DIVISOR_DECIMALS = 16
DEFAULT_TOKEN_SYMBOL = "DAI"
SATURATION_MARKER = ">max"
NOT_AVAILABLE = "N/A"

PER_THOUSAND = 1000
PAID_RATIO_BASE = 100_000
PAID_RATIO_DECIMALS = 3

RECENT_STATUS_SECONDS = 180
CHANNEL_ID_PREFIX_LENGTH = 6

SPARKLINE_WIDTH = 250
SPARKLINE_HEIGHT = 60

U64_MAX = 2**64 - 1


__all__ = [
    "TOKEN_DECIMALS",
    "DISPLAY_DECIMALS",
    "DISPLAY_DIVISOR_DECIMALS",
    "DEFAULT_TOKEN_SYMBOL",
    "SATURATION_MARKER",
    "NOT_AVAILABLE",
    "PER_THOUSAND",
    "PAID_RATIO_BASE",
    "PAID_RATIO_DECIMALS",
    "RECENT_STATUS_SECONDS",
    "CHANNEL_ID_PREFIX_LENGTH",
    "SPARKLINE_WIDTH",
    "SPARKLINE_HEIGHT",
    "U64_MAX",
]
