"""Lane matchup observations and the samples they accumulate into."""
from dataclasses import dataclass

from ..enums import Lane


@dataclass(frozen=True)
class MatchupObservation:
    """One same-lane 1v1 pairing in one match."""

    lane: Lane
    champion_a: int
    champion_b: int
    winner_is_a: bool
    match_id: str = ""


@dataclass
class MatchupSample:
    """Wins of ``champion_id`` against ``opponent_id`` in ``lane``. Only ever grows."""

    champion_id: int
    opponent_id: int
    lane: Lane
    wins: int = 0
    total: int = 0

    @property
    def win_rate(self) -> float:
        if self.total == 0:
            return 0.0
        return self.wins / self.total

    def record(self, win: bool) -> None:
        self.total += 1
        if win:
            self.wins += 1
