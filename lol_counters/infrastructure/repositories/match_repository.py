"""Match repository implementation."""
import logging
from typing import List, Optional

from lol_counters.domain.entities import MatchRecord
from lol_counters.domain.enums import QueueType
from lol_counters.domain.interfaces import IMatchRepository
from lol_counters.infrastructure.api import RiotAPIClient

logger = logging.getLogger(__name__)


class MatchRepository(IMatchRepository):
    """Repository for match data using Riot API."""

    def __init__(self, api_client: RiotAPIClient):
        """
        Initialize match repository.

        Args:
            api_client: Riot API client instance
        """
        self.api_client = api_client

    async def get_match_ids(self, puuid: str, queue_type: QueueType, count: int) -> List[str]:
        """Get the most recent match IDs for a player."""
        return await self.api_client.get_match_ids_by_puuid(puuid, queue=queue_type, count=count)

    async def get_match(self, match_id: str) -> Optional[MatchRecord]:
        """
        Get a single match by ID.

        Args:
            match_id: Match identifier

        Returns:
            Parsed match, or None if the payload is malformed

        Raises:
            RiotAPIError: the fetch itself failed
        """
        data = await self.api_client.get_match_by_id(match_id)
        try:
            return MatchRecord.from_api(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Error parsing match {match_id}: {e}")
            return None
