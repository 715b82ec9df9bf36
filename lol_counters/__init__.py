"""
League of Legends Counter Statistics
====================================

Batch job that samples high-ranked ranked-solo matches from the Riot API and
derives, per champion and lane, statistically validated counter relationships.

Layers (Domain → Infrastructure → Application):
- domain          entities, enums, repository interfaces
- infrastructure  rate-limited Riot API client, Data Dragon client, repositories
- application     discovery, collection, matchup extraction, counter statistics
"""

__version__ = "1.0.0"

from .domain import (
    PlayerRef, MatchRecord, ParticipantRecord, Champion,
    MatchupObservation, MatchupSample, ChampionStats, CounterRecord,
    Region, QueueType, Tier, Lane, CounterStrength,
)
from .infrastructure import (
    RiotAPIClient,
    DataDragonClient,
    RateLimiter,
    RiotAPIError,
    TransportError,
    RequestError,
    RateLimitExceededError,
    CatalogueUnavailableError,
)
from .application import (
    PlayerDiscoveryService,
    MatchCollectorService,
    CounterStatsEngine,
    CounterThresholds,
    TierLimits,
    extract_matchups,
    BuildCounterStatsUseCase,
    CounterReport,
)
from .config import settings

__all__ = [
    '__version__',

    # Domain
    'PlayerRef',
    'MatchRecord',
    'ParticipantRecord',
    'Champion',
    'MatchupObservation',
    'MatchupSample',
    'ChampionStats',
    'CounterRecord',
    'Region',
    'QueueType',
    'Tier',
    'Lane',
    'CounterStrength',

    # Infrastructure
    'RiotAPIClient',
    'DataDragonClient',
    'RateLimiter',
    'RiotAPIError',
    'TransportError',
    'RequestError',
    'RateLimitExceededError',
    'CatalogueUnavailableError',

    # Application
    'PlayerDiscoveryService',
    'MatchCollectorService',
    'CounterStatsEngine',
    'CounterThresholds',
    'TierLimits',
    'extract_matchups',
    'BuildCounterStatsUseCase',
    'CounterReport',

    # Config
    'settings',
]
