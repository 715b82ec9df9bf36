"""Use case for one counter-statistics batch run."""
from __future__ import annotations

import logging
from collections import Counter
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional

from lol_counters.config import settings
from lol_counters.core.logging import log_context
from lol_counters.domain.entities import ChampionStats, MatchRecord, MatchupObservation, PlayerRef
from lol_counters.domain.enums import Lane
from lol_counters.domain.interfaces import IMatchRepository, IPlayerRepository
from lol_counters.infrastructure import DataDragonClient, MatchRepository, PlayerRepository, RiotAPIClient
from lol_counters.application.services import (
    CounterStatsEngine,
    CounterThresholds,
    MatchCollectorService,
    PlayerDiscoveryService,
    SampleCounterBuilder,
    TierLimits,
    extract_matchups,
)

logger = logging.getLogger(__name__)

LIVE_MODE = "live"
SAMPLE_MODE = "sample"


@dataclass
class RunMetadata:
    fetched_at: str
    region: str
    patch_version: str
    mode: str = LIVE_MODE
    champions: int = 0
    target_matches: int = 0
    players_discovered: int = 0
    matches_processed: int = 0
    unique_players: int = 0
    matchups_extracted: int = 0
    api_calls: int = 0
    match_patches: Dict[str, int] = field(default_factory=dict)
    coverage_by_lane: Dict[str, int] = field(default_factory=dict)
    average_sample_size: float = 0.0
    reliable_champions: int = 0
    collection: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class CounterReport:
    stats: Dict[int, ChampionStats]
    metadata: RunMetadata
    players: List[PlayerRef] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            'metadata': self.metadata.to_dict(),
            'players': [p.to_dict() for p in self.players],
            'champions': {str(cid): s.to_dict() for cid, s in sorted(self.stats.items())},
        }


class BuildCounterStatsUseCase:
    """
    Catalogue → players → matches → matchups → counter stats.

    Only a missing champion catalogue aborts the run. Failed tiers, players
    and matches are skipped, so the returned statistics may be thin or even
    all defaults; that is still a valid report.

    Without an API client the run is in sample mode: the catalogue is still
    fetched, but counters come from ``SampleCounterBuilder`` and no Riot API
    call is made.
    """

    def __init__(
        self,
        api_client: Optional[RiotAPIClient],
        ddragon_client: DataDragonClient,
        *,
        player_repo: Optional[IPlayerRepository] = None,
        match_repo: Optional[IMatchRepository] = None,
        tier_limits: Optional[TierLimits] = None,
        target_matches: Optional[int] = None,
        target_matches_per_player: Optional[int] = settings.TARGET_MATCHES_PER_PLAYER,
        matches_per_player: Optional[int] = None,
        thresholds: Optional[CounterThresholds] = None,
        sample_builder: Optional[SampleCounterBuilder] = None,
    ):
        self.api_client = api_client
        self.ddragon_client = ddragon_client
        self.tier_limits = tier_limits or TierLimits()
        self.target_matches = settings.TARGET_MATCHES if target_matches is None else target_matches
        self.target_matches_per_player = target_matches_per_player
        self.engine = CounterStatsEngine(thresholds)
        self.sample_builder = sample_builder or SampleCounterBuilder(thresholds)

        self.discovery: Optional[PlayerDiscoveryService] = None
        self.collector: Optional[MatchCollectorService] = None
        if api_client is not None:
            self.discovery = PlayerDiscoveryService(player_repo or PlayerRepository(api_client))
            self.collector = MatchCollectorService(
                match_repo or MatchRepository(api_client),
                matches_per_player=matches_per_player,
            )

    @property
    def mode(self) -> str:
        return SAMPLE_MODE if self.api_client is None else LIVE_MODE

    def effective_target(self, player_count: int) -> int:
        """Configured target, shrunk to ``players x per-player factor`` on a thin ladder."""
        if self.target_matches_per_player is None:
            return self.target_matches
        return min(self.target_matches, player_count * self.target_matches_per_player)

    async def execute(self) -> CounterReport:
        started = datetime.now(timezone.utc)
        region = self.api_client.region.value if self.api_client else ""
        players: List[PlayerRef] = []
        matches: List[MatchRecord] = []
        observations: List[MatchupObservation] = []
        target = 0

        with log_context(region=region or None, mode=self.mode):
            version = await self.ddragon_client.get_latest_version()
            logger.info(f"Latest version: {version}")
            champions = await self.ddragon_client.get_champion_catalogue(version)

            if self.api_client is None:
                logger.info("Sample mode: building counters from champion tags")
                stats = self.sample_builder.build(champions)
            else:
                players = await self.discovery.discover_top_players(self.tier_limits)
                target = self.effective_target(len(players))
                matches = await self.collector.collect_matches(players, target)
                observations = extract_matchups(matches)
                logger.info(f"Extracted {len(observations)} matchups from {len(matches)} matches")
                stats = self.engine.compute_stats(observations, champions)

        metadata = RunMetadata(
            fetched_at=started.isoformat(),
            region=region,
            patch_version=version,
            mode=self.mode,
            champions=len(champions),
            target_matches=target,
            players_discovered=len(players),
            matches_processed=len(matches),
            unique_players=_unique_players(matches),
            matchups_extracted=len(observations),
            api_calls=self.api_client.call_count if self.api_client else 0,
            match_patches=dict(sorted(Counter(m.patch_version for m in matches).items())),
            coverage_by_lane=_coverage_by_lane(observations),
            average_sample_size=_average_sample_size(stats),
            reliable_champions=sum(1 for s in stats.values() if s.overall.is_reliable),
            collection=self.collector.stats.to_dict() if self.collector else {},
        )
        logger.info(
            f"run-done mode={metadata.mode} matches={metadata.matches_processed} "
            f"players={metadata.players_discovered} api_calls={metadata.api_calls}"
        )
        return CounterReport(stats=stats, metadata=metadata, players=players)


def _unique_players(matches: List[MatchRecord]) -> int:
    return len({p.puuid for m in matches for p in m.participants if p.puuid})


def _coverage_by_lane(observations: List[MatchupObservation]) -> Dict[str, int]:
    counts = Counter(obs.lane for obs in observations)
    return {lane.value: counts.get(lane, 0) for lane in Lane.known_lanes()}


def _average_sample_size(stats: Dict[int, ChampionStats]) -> float:
    sizes = [
        record.sample_size
        for champion in stats.values()
        for record in (*champion.strong_counters, *champion.counters)
    ]
    if not sizes:
        return 0.0
    return sum(sizes) / len(sizes)
