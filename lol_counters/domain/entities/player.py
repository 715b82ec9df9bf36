"""High-ranked player reference produced by discovery."""
from dataclasses import dataclass

from ..enums import Tier


@dataclass(frozen=True)
class PlayerRef:
    """A ladder entry resolved to a stable account identifier (PUUID)."""

    account_id: str
    tier: Tier
    rank: str
    league_points: int
    summoner_id: str = ""

    def to_dict(self) -> dict:
        return {
            'account_id': self.account_id,
            'summoner_id': self.summoner_id,
            'tier': self.tier.value,
            'rank': self.rank,
            'league_points': self.league_points,
        }
