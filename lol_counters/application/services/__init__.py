"""Application services root exports."""
from .player_discovery_service import PlayerDiscoveryService, TierLimits
from .match_collector_service import MatchCollectorService, CollectionStats, is_valid_match
from .matchup_extractor import extract_matchups, iter_matchups, group_by_lane
from .significance import SignificanceResult, normal_cdf, significance_test
from .counter_stats_engine import (
    CounterStatsEngine,
    CounterThresholds,
    accumulate_samples,
    classify_counter_strength,
)
from .sample_counters import SampleCounterBuilder, champion_tags

__all__ = [
    "PlayerDiscoveryService",
    "TierLimits",
    "MatchCollectorService",
    "CollectionStats",
    "is_valid_match",
    "extract_matchups",
    "iter_matchups",
    "group_by_lane",
    "SignificanceResult",
    "normal_cdf",
    "significance_test",
    "CounterStatsEngine",
    "CounterThresholds",
    "accumulate_samples",
    "classify_counter_strength",
    "SampleCounterBuilder",
    "champion_tags",
]
