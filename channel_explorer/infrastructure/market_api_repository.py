"""HTTP repository reading the market, analytics and Etherscan APIs."""

import requests

from channel_explorer.application.ports.market_repository import (
    MarketRepositoryPort,
)
from channel_explorer.domain.models import (
    AnalyticsSeries,
    BigAmount,
    ChannelRecord,
)
from channel_explorer.infrastructure.logging.logger import get_app_logger
from channel_explorer.infrastructure.market_codec import (
    decode_analytics,
    decode_channels,
    decode_token_balance,
)
from channel_explorer.infrastructure.settings import MarketSettings


class MarketApiError(RuntimeError):
    """Raised when a market data request fails."""


class RequestsMarketRepository(MarketRepositoryPort):
    """MarketRepositoryPort implementation backed by `requests`."""

    def __init__(
        self,
        settings: MarketSettings,
        session: requests.Session | None = None,
        logger=None,
    ) -> None:
        """Initialize the repository.

        Args:
            settings: Endpoints, addresses and timeouts.
            session: Optional HTTP session, created when omitted.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._settings = settings
        self._session = session or requests.Session()
        self._logger = logger or get_app_logger()

    def fetch_channels(self) -> list[ChannelRecord]:
        """Return every channel listed on the market."""
        payload = self._get_json(
            f"{self._settings.market_url}/campaigns",
            {"all": ""},
        )
        channels = decode_channels(payload)
        self._logger.info(f"Fetched {len(channels)} market channels")
        return channels

    def fetch_core_balance(self) -> BigAmount:
        """Return the deposit token balance of the core contract."""
        payload = self._get_json(
            self._settings.etherscan_url,
            {
                "module": "account",
                "action": "tokenbalance",
                "contractAddress": self._settings.token_address,
                "address": self._settings.core_address,
                "tag": "latest",
                "apikey": self._settings.etherscan_api_key,
            },
        )
        return decode_token_balance(payload)

    def fetch_analytics(self, metric: str, timeframe: str) -> AnalyticsSeries:
        """Return the analytics series for a metric and timeframe."""
        payload = self._get_json(
            self._settings.analytics_url,
            {"metric": metric, "timeframe": timeframe},
        )
        return decode_analytics(payload, metric, timeframe)

    def _get_json(self, url: str, params: dict[str, str]):
        """Issue a GET request and parse the JSON body.

        Args:
            url: Endpoint URL.
            params: Query string parameters.

        Returns:
            Parsed JSON payload.

        Raises:
            MarketApiError: On transport errors, HTTP errors or invalid JSON.
        """
        try:
            response = self._session.get(
                url,
                params=params,
                timeout=self._settings.request_timeout,
            )
            response.raise_for_status()
            return response.json()
        except requests.RequestException as exc:
            raise MarketApiError(f"Request to {url} failed: {exc}") from exc
        except ValueError as exc:
            raise MarketApiError(
                f"Invalid JSON returned by {url}: {exc}"
            ) from exc


__all__ = ["MarketApiError", "RequestsMarketRepository"]
