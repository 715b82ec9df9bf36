"""Use cases."""
from .build_counter_stats import BuildCounterStatsUseCase, CounterReport, RunMetadata

__all__ = [
    'BuildCounterStatsUseCase',
    'CounterReport',
    'RunMetadata',
]
