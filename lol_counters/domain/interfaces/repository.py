"""Repository interfaces for data access."""
from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities import MatchRecord
from ..enums import QueueType, Tier


class IPlayerRepository(ABC):
    """Ladder and account lookups."""

    @abstractmethod
    async def get_league_entries(self, tier: Tier) -> List[dict]:
        """Raw ladder entries for an apex tier."""
        pass

    @abstractmethod
    async def resolve_puuid(self, summoner_id: str) -> str:
        """Resolve a ranking-system summoner id to a PUUID."""
        pass


class IMatchRepository(ABC):
    """Match-ID listing and match detail lookups."""

    @abstractmethod
    async def get_match_ids(self, puuid: str, queue_type: QueueType, count: int) -> List[str]:
        """Most recent match IDs for a player."""
        pass

    @abstractmethod
    async def get_match(self, match_id: str) -> Optional[MatchRecord]:
        """A single parsed match, or None if the payload cannot be parsed."""
        pass
