"""Player (ladder + summoner) repository implementation."""
import logging
from typing import List

from lol_counters.domain.enums import QueueType, Tier
from lol_counters.domain.interfaces import IPlayerRepository
from lol_counters.infrastructure.api import RiotAPIClient

logger = logging.getLogger(__name__)


class PlayerRepository(IPlayerRepository):
    """Repository for ladder entries and account resolution using Riot API."""

    def __init__(self, api_client: RiotAPIClient, queue_type: QueueType = QueueType.RANKED_SOLO_5x5):
        """
        Initialize player repository.

        Args:
            api_client: Riot API client instance
            queue_type: Ladder queue to read
        """
        self.api_client = api_client
        self.queue_type = queue_type

    async def get_league_entries(self, tier: Tier) -> List[dict]:
        """Raw entries of an apex league, in API order."""
        league = await self.api_client.get_league(tier, self.queue_type)
        entries = (league.get('entries') or []) if isinstance(league, dict) else []
        logger.debug(f"{tier.value}: {len(entries)} ladder entries")
        return entries

    async def resolve_puuid(self, summoner_id: str) -> str:
        """
        Resolve a summoner id to the account PUUID.

        Raises:
            RiotAPIError: the summoner lookup failed
            ValueError: the response carried no PUUID
        """
        summoner = await self.api_client.get_summoner_by_id(summoner_id)
        puuid = summoner.get('puuid') if isinstance(summoner, dict) else None
        if not puuid:
            raise ValueError(f"Summoner {summoner_id} has no puuid")
        return puuid
