"""Counter statistics output records."""
from dataclasses import dataclass, field

from ..enums import CounterStrength, Lane


@dataclass(frozen=True)
class CounterRecord:
    """One significant matchup seen from the owning champion's side.

    ``win_rate`` is always the owning champion's win rate against
    ``opponent_id``; ``enemy_win_rate`` is the opponent's.
    """

    opponent_id: int
    lane: Lane
    win_rate: float
    sample_size: int
    p_value: float
    strength: CounterStrength
    opponent_name: str = ""

    @property
    def enemy_win_rate(self) -> float:
        return 1.0 - self.win_rate

    def to_dict(self) -> dict:
        return {
            'opponent_id': self.opponent_id,
            'opponent_name': self.opponent_name,
            'lane': self.lane.value,
            'win_rate': self.win_rate,
            'enemy_win_rate': self.enemy_win_rate,
            'sample_size': self.sample_size,
            'p_value': self.p_value,
            'strength': self.strength.value,
        }


@dataclass
class OverallStats:
    total_games: int = 0
    wins: int = 0
    win_rate: float = 0.5
    is_reliable: bool = False

    def record(self, win: bool) -> None:
        self.total_games += 1
        if win:
            self.wins += 1

    def finalize(self, min_sample_size: int) -> None:
        if self.total_games > 0:
            self.win_rate = self.wins / self.total_games
        self.is_reliable = self.total_games >= min_sample_size

    def to_dict(self) -> dict:
        return {
            'total_games': self.total_games,
            'wins': self.wins,
            'win_rate': self.win_rate,
            'is_reliable': self.is_reliable,
        }


@dataclass
class LaneStats(OverallStats):
    """Per-lane breakdown of a champion's overall record."""


@dataclass
class ChampionStats:
    id: int
    name: str = ""
    key: str = ""
    tags: tuple[str, ...] = field(default_factory=tuple)
    overall: OverallStats = field(default_factory=OverallStats)
    strong_counters: list[CounterRecord] = field(default_factory=list)
    counters: list[CounterRecord] = field(default_factory=list)
    countered_by: list[CounterRecord] = field(default_factory=list)
    lane_performance: dict[Lane, LaneStats] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'key': self.key,
            'tags': list(self.tags),
            'overall': self.overall.to_dict(),
            'counter_relationships': {
                'strong_counters': [c.to_dict() for c in self.strong_counters],
                'counters': [c.to_dict() for c in self.counters],
                'countered_by': [c.to_dict() for c in self.countered_by],
            },
            'lane_performance': {
                lane.value: stats.to_dict() for lane, stats in self.lane_performance.items()
            },
        }
