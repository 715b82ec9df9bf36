"""Domain layer - Business entities, enums, and interfaces."""
from .entities import (
    PlayerRef, MatchRecord, ParticipantRecord, Champion,
    MatchupObservation, MatchupSample,
    ChampionStats, CounterRecord, LaneStats, OverallStats,
)
from .enums import Region, QueueType, Tier, Lane, Role, CounterStrength, ChampionTag
from .interfaces import IMatchRepository, IPlayerRepository

__all__ = [
    # Entities
    'PlayerRef',
    'MatchRecord',
    'ParticipantRecord',
    'Champion',
    'MatchupObservation',
    'MatchupSample',
    'ChampionStats',
    'CounterRecord',
    'LaneStats',
    'OverallStats',
    # Enums
    'Region',
    'QueueType',
    'Tier',
    'Lane',
    'Role',
    'CounterStrength',
    'ChampionTag',
    # Interfaces
    'IMatchRepository',
    'IPlayerRepository',
]
