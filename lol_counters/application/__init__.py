"""Application layer - Services and use cases."""
from .services import (
    PlayerDiscoveryService,
    MatchCollectorService,
    CounterStatsEngine,
    CounterThresholds,
    TierLimits,
    extract_matchups,
    SampleCounterBuilder,
)
from .use_cases import BuildCounterStatsUseCase, CounterReport, RunMetadata

__all__ = [
    'PlayerDiscoveryService',
    'MatchCollectorService',
    'CounterStatsEngine',
    'CounterThresholds',
    'TierLimits',
    'extract_matchups',
    'SampleCounterBuilder',
    'BuildCounterStatsUseCase',
    'CounterReport',
    'RunMetadata',
]
