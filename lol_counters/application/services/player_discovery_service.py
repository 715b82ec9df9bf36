"""Player discovery - top of the Challenger / Grandmaster / Master ladders."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from lol_counters.config import settings
from lol_counters.core.logging import log_context
from lol_counters.domain.entities import PlayerRef
from lol_counters.domain.enums import Tier
from lol_counters.domain.interfaces import IPlayerRepository
from lol_counters.infrastructure.api import RiotAPIError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TierLimits:
    """How many ladder entries to keep per apex tier."""

    challenger: int = settings.CHALLENGER_LIMIT
    grandmaster: int = settings.GRANDMASTER_LIMIT
    master: int = settings.MASTER_LIMIT

    def for_tier(self, tier: Tier) -> int:
        return {
            Tier.CHALLENGER: self.challenger,
            Tier.GRANDMASTER: self.grandmaster,
            Tier.MASTER: self.master,
        }[tier]


class PlayerDiscoveryService:
    """
    Resolves the best players of the three apex tiers into PUUIDs.

    Tiers are walked Challenger → Grandmaster → Master; inside a tier the
    entries are sorted by league points (highest first) and truncated to the
    tier cap. Each kept entry costs one summoner lookup. A tier that cannot
    be fetched, or an entry that cannot be resolved, is logged and skipped.
    """

    def __init__(self, player_repo: IPlayerRepository) -> None:
        self.player_repo = player_repo

    async def discover_top_players(self, limits: Optional[TierLimits] = None) -> List[PlayerRef]:
        limits = limits or TierLimits()
        players: List[PlayerRef] = []

        for tier in Tier.apex_order():
            cap = limits.for_tier(tier)
            if cap <= 0:
                continue
            with log_context(tier=tier.value):
                try:
                    entries = await self.player_repo.get_league_entries(tier)
                except RiotAPIError as exc:
                    logger.warning(f"Failed to fetch {tier.value} ladder: {exc}")
                    continue

                entries = [e for e in entries if isinstance(e, dict)]
                top = sorted(entries, key=_league_points, reverse=True)[:cap]
                logger.info(f"Found {len(top)} {tier.value} players")

                resolved = 0
                for entry in top:
                    player = await self._resolve(tier, entry)
                    if player is not None:
                        players.append(player)
                        resolved += 1
                if resolved < len(top):
                    logger.warning(f"{tier.value}: resolved {resolved}/{len(top)} players")

        logger.info(f"Discovered {len(players)} players")
        return players

    async def _resolve(self, tier: Tier, entry: dict) -> Optional[PlayerRef]:
        summoner_id = entry.get("summonerId") or ""
        if summoner_id:
            try:
                puuid = await self.player_repo.resolve_puuid(summoner_id)
            except (RiotAPIError, ValueError) as exc:
                logger.warning(f"Failed to get PUUID for summoner {summoner_id}: {exc}")
                return None
        else:
            # league-v4 payloads without summonerId already carry the puuid
            puuid = entry.get("puuid") or ""
            if not puuid:
                logger.warning(f"Ladder entry without summonerId or puuid skipped: {entry}")
                return None

        return PlayerRef(
            account_id=puuid,
            tier=tier,
            rank=entry.get("rank", "I"),
            league_points=_league_points(entry),
            summoner_id=summoner_id,
        )


def _league_points(entry: dict) -> int:
    """Missing or malformed points sort last instead of failing the tier."""
    try:
        return int(entry.get("leaguePoints") or 0)
    except (TypeError, ValueError):
        return 0
