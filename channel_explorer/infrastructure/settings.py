"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from channel_explorer.infrastructure.logging.logger import get_app_logger

DEFAULT_MARKET_URL = "https://market.adex.network"
DEFAULT_ANALYTICS_URL = "https://tom.adex.network/analytics"
DEFAULT_ETHERSCAN_URL = "https://api.etherscan.io/api"
DEFAULT_IPFS_GATEWAY = "https://ipfs.adex.network/ipfs/"
DEFAULT_TOKEN_ADDRESS = "0x6B175474E89094C44Da98b954EedeAC495271d0F"
DEFAULT_CORE_ADDRESS = "0x333420fc6a897356e69b62417cd17ff012177d2b"
DEFAULT_REFRESH_SECONDS = 30
DEFAULT_REQUEST_TIMEOUT = 10.0


@dataclass(frozen=True)
class MarketSettings:
    """Settings for the market, analytics and on-chain data sources.

    Attributes:
        market_url: Base URL of the market API.
        analytics_url: Analytics endpoint of the validator.
        etherscan_url: Etherscan API endpoint for token balances.
        etherscan_api_key: Etherscan API key, empty when unset.
        token_address: Deposit token contract address.
        core_address: Core contract holding locked deposits.
        ipfs_gateway: HTTP gateway used for ipfs:// media.
        refresh_seconds: Minimum age before the dashboard refetches.
        request_timeout: HTTP timeout in seconds.
    """

    market_url: str = DEFAULT_MARKET_URL
    analytics_url: str = DEFAULT_ANALYTICS_URL
    etherscan_url: str = DEFAULT_ETHERSCAN_URL
    etherscan_api_key: str = ""
    token_address: str = DEFAULT_TOKEN_ADDRESS
    core_address: str = DEFAULT_CORE_ADDRESS
    ipfs_gateway: str = DEFAULT_IPFS_GATEWAY
    refresh_seconds: int = DEFAULT_REFRESH_SECONDS
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    @classmethod
    def from_env(cls) -> "MarketSettings":
        """Build settings from `.env` and environment variables.

        Returns:
            MarketSettings: Settings sourced from the environment.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        api_key = os.getenv("ETHERSCAN_API_KEY", "").strip()
        if not api_key:
            logger.warning(
                "ETHERSCAN_API_KEY is not set; on-chain balance requests "
                "may be rate limited."
            )
        return cls(
            market_url=cls._url("MARKET_URL", DEFAULT_MARKET_URL),
            analytics_url=cls._url("ANALYTICS_URL", DEFAULT_ANALYTICS_URL),
            etherscan_url=cls._url("ETHERSCAN_URL", DEFAULT_ETHERSCAN_URL),
            etherscan_api_key=api_key,
            token_address=os.getenv("TOKEN_ADDRESS", DEFAULT_TOKEN_ADDRESS),
            core_address=os.getenv("CORE_ADDRESS", DEFAULT_CORE_ADDRESS),
            ipfs_gateway=os.getenv("IPFS_GATEWAY", DEFAULT_IPFS_GATEWAY),
            refresh_seconds=int(
                cls._number(
                    "REFRESH_SECONDS",
                    DEFAULT_REFRESH_SECONDS,
                    int,
                    logger,
                )
            ),
            request_timeout=float(
                cls._number(
                    "REQUEST_TIMEOUT",
                    DEFAULT_REQUEST_TIMEOUT,
                    float,
                    logger,
                )
            ),
        )

    @staticmethod
    def _url(name: str, default: str) -> str:
        """Read a base URL without a trailing slash.

        Args:
            name: Environment variable name.
            default: Value used when the variable is unset or blank.

        Returns:
            str: Normalized URL.
        """
        raw = os.getenv(name, "").strip()
        return (raw or default).rstrip("/")

    @staticmethod
    def _number(name: str, default, parser, logger):
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = parser(raw.strip())
        except ValueError:
            logger.warning(
                f"Invalid {name}='{raw}'. Falling back to {default}."
            )
            return default
        if value <= 0:
            logger.warning(
                f"{name} must be positive, got {value}. "
                f"Falling back to {default}."
            )
            return default
        return value


__all__ = ["MarketSettings"]
