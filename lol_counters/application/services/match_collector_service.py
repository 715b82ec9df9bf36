"""Match collector - bounded, de-duplicated ranked match collection."""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import AsyncIterator, Iterable, List, Optional, Set

from lol_counters.config import settings
from lol_counters.core.logging import log_context
from lol_counters.domain.entities import MatchRecord, PlayerRef
from lol_counters.domain.enums import QueueType
from lol_counters.domain.interfaces import IMatchRepository
from lol_counters.infrastructure.api import RiotAPIError

logger = logging.getLogger(__name__)

STANDARD_GAME_MODE = "CLASSIC"
MATCH_PARTICIPANTS = 10


def is_valid_match(
    match: MatchRecord,
    *,
    min_duration: int = settings.MIN_GAME_DURATION,
    max_duration: int = settings.MAX_GAME_DURATION,
) -> bool:
    """Ranked solo, Summoner's Rift, 15–60 minutes, full lobby."""
    return (
        match.queue_id == QueueType.RANKED_SOLO_5x5.queue_id
        and match.game_mode == STANDARD_GAME_MODE
        and min_duration <= match.duration_seconds <= max_duration
        and len(match.participants) == MATCH_PARTICIPANTS
    )


@dataclass
class CollectionStats:
    players_processed: int = 0
    match_ids_listed: int = 0
    duplicates_skipped: int = 0
    matches_fetched: int = 0
    matches_accepted: int = 0
    matches_rejected: int = 0
    fetch_failures: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


class MatchCollectorService:
    """
    Pulls recent ranked matches player by player.

    Design:
    - ``seen_match_ids`` lives as long as the service (one run). An ID in it
      is never requested again, whether its match was accepted or rejected.
    - ``iter_matches`` is an async generator; the consumer decides when it
      has enough. ``collect_matches`` is the bounded convenience wrapper.
    - Failures for one player or one match are logged and skipped.
    """

    def __init__(
        self,
        match_repo: IMatchRepository,
        *,
        matches_per_player: Optional[int] = None,
        queue_type: QueueType = QueueType.RANKED_SOLO_5x5,
        seen_match_ids: Optional[Set[str]] = None,
    ) -> None:
        self.match_repo = match_repo
        self.matches_per_player = settings.MATCHES_PER_PLAYER if matches_per_player is None else matches_per_player
        self.queue_type = queue_type
        self.seen_match_ids: Set[str] = seen_match_ids if seen_match_ids is not None else set()
        self.stats = CollectionStats()

    async def iter_matches(self, players: Iterable[PlayerRef]) -> AsyncIterator[MatchRecord]:
        for player in players:
            self.stats.players_processed += 1
            match_ids = await self._list_match_ids(player)
            for match_id in match_ids:
                if match_id in self.seen_match_ids:
                    self.stats.duplicates_skipped += 1
                    continue
                match = await self._fetch_match(match_id)
                if match is not None:
                    yield match

    async def collect_matches(self, players: Iterable[PlayerRef], target_count: int) -> List[MatchRecord]:
        """Accepted matches in discovery order, stopping at ``target_count``."""
        matches: List[MatchRecord] = []
        if target_count <= 0:
            return matches

        logger.info(f"Collecting up to {target_count} ranked matches")
        stream = self.iter_matches(players)
        try:
            async for match in stream:
                matches.append(match)
                if len(matches) >= target_count:
                    break
        finally:
            await stream.aclose()

        logger.info(f"Collected {len(matches)} valid matches ({self.stats.to_dict()})")
        return matches

    async def _list_match_ids(self, player: PlayerRef) -> List[str]:
        if self.matches_per_player <= 0:
            return []
        with log_context(puuid=player.account_id, tier=player.tier.value):
            try:
                match_ids = await self.match_repo.get_match_ids(
                    player.account_id, self.queue_type, self.matches_per_player
                )
            except RiotAPIError as exc:
                self.stats.fetch_failures += 1
                logger.warning(f"Failed to fetch matches for player {player.account_id}: {exc}")
                return []
        match_ids = list(match_ids)[:self.matches_per_player]
        self.stats.match_ids_listed += len(match_ids)
        return match_ids

    async def _fetch_match(self, match_id: str) -> Optional[MatchRecord]:
        with log_context(match_id=match_id):
            try:
                match = await self.match_repo.get_match(match_id)
            except RiotAPIError as exc:
                self.stats.fetch_failures += 1
                logger.warning(f"Failed to fetch match {match_id}: {exc}")
                return None

            self.seen_match_ids.add(match_id)
            self.stats.matches_fetched += 1
            if match is None or not is_valid_match(match):
                self.stats.matches_rejected += 1
                logger.debug(f"Discarded match {match_id}")
                return None

        self.stats.matches_accepted += 1
        return match
