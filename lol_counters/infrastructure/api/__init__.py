"""Infrastructure API module."""
from .riot_client import RiotAPIClient
from .ddragon_client import DataDragonClient
from .rate_limiter import RateLimiter
from .errors import (
    RiotAPIError,
    TransportError,
    RequestError,
    RateLimitExceededError,
    CatalogueUnavailableError,
)

__all__ = [
    'RiotAPIClient',
    'DataDragonClient',
    'RateLimiter',
    'RiotAPIError',
    'TransportError',
    'RequestError',
    'RateLimitExceededError',
    'CatalogueUnavailableError',
]
