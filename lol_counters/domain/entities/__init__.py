"""Domain entities."""
from .player import PlayerRef
from .match import MatchRecord, ParticipantRecord
from .champion import Champion
from .matchup import MatchupObservation, MatchupSample
from .stats import ChampionStats, CounterRecord, LaneStats, OverallStats

__all__ = [
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
]
