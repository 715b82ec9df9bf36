"""Apex ranked tiers used as the match sample source."""
from enum import Enum


class Tier(Enum):
    """Apex tiers in the order discovery walks them (best first)."""

    CHALLENGER = "CHALLENGER"
    GRANDMASTER = "GRANDMASTER"
    MASTER = "MASTER"

    @property
    def league_path(self) -> str:
        """Path segment of the league-v4 apex endpoint, e.g. ``challengerleagues``."""
        return f"{self.value.lower()}leagues"

    @classmethod
    def apex_order(cls) -> list['Tier']:
        return [cls.CHALLENGER, cls.GRANDMASTER, cls.MASTER]
