"""Composition root for wiring infrastructure adapters."""

from channel_explorer.application.ports.market_repository import (
    MarketRepositoryPort,
)
from channel_explorer.infrastructure.logging.logger import get_app_logger
from channel_explorer.infrastructure.market_api_repository import (
    RequestsMarketRepository,
)
from channel_explorer.infrastructure.settings import MarketSettings


def build_settings() -> MarketSettings:
    """Return settings sourced from the environment."""
    return MarketSettings.from_env()


def build_market_repository(
    settings: MarketSettings | None = None,
) -> MarketRepositoryPort:
    """Return the configured market repository."""
    resolved = settings or build_settings()
    return RequestsMarketRepository(resolved, logger=get_app_logger())


__all__ = ["build_settings", "build_market_repository"]
