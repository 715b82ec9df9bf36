"""Infrastructure layer - API clients and repositories."""
from .api import (
    RiotAPIClient,
    DataDragonClient,
    RateLimiter,
    RiotAPIError,
    TransportError,
    RequestError,
    RateLimitExceededError,
    CatalogueUnavailableError,
)
from .repositories import MatchRepository, PlayerRepository

__all__ = [
    'RiotAPIClient',
    'DataDragonClient',
    'RateLimiter',
    'RiotAPIError',
    'TransportError',
    'RequestError',
    'RateLimitExceededError',
    'CatalogueUnavailableError',
    'MatchRepository',
    'PlayerRepository',
]
