"""Sample counter statistics from champion tags, for runs without an API key."""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Optional

from lol_counters.config import settings
from lol_counters.domain.entities import Champion, ChampionStats, CounterRecord, LaneStats, OverallStats
from lol_counters.domain.enums import ChampionTag, Lane
from .counter_stats_engine import CounterThresholds, classify_counter_strength
from .significance import significance_test

logger = logging.getLogger(__name__)

# champion-specific additions to the archetype table, by Data Dragon key
SPECIFIC_COUNTERS: Dict[str, tuple[str, ...]] = {
    "Yasuo": ("Annie", "Malphite", "Rammus"),
    "Zed": ("Kayle", "Malphite", "Lissandra"),
    "Katarina": ("Diana", "Kassadin", "Galio"),
    "Akali": ("Diana", "Galio", "Malzahar"),
    "Fizz": ("Diana", "Galio", "Vladimir"),
    "Leblanc": ("Galio", "Kassadin", "Malzahar"),
    "Vayne": ("Hecarim", "Malphite", "Rammus"),
    "Jinx": ("Hecarim", "Zed", "Talon"),
    "Ashe": ("Hecarim", "Zed", "Nocturne"),
    "Darius": ("Vayne", "Gnar", "Kennen"),
    "Garen": ("Vayne", "Darius", "Fiora"),
    "Nasus": ("Vayne", "Darius", "Gnar"),
}

SAMPLE_WIN_RATE = 0.67
SAMPLE_SIZE = 89
SAMPLE_LANE = Lane.MIDDLE
MAX_STRONG_AGAINST_TAGS = 3


def champion_tags(champion: Champion) -> List[ChampionTag]:
    """Known tags in catalogue order; unrecognised tags are ignored."""
    tags = []
    for raw in champion.tags:
        tag = ChampionTag.from_string(raw)
        if tag is not None and tag not in tags:
            tags.append(tag)
    return tags


def primary_tag(champion: Champion) -> Optional[ChampionTag]:
    tags = champion_tags(champion)
    return tags[0] if tags else None


def _unique(items: Iterable) -> list:
    seen = []
    for item in items:
        if item not in seen:
            seen.append(item)
    return seen


class SampleCounterBuilder:
    """
    Heuristic ``ChampionStats`` built from archetype tables instead of matches.

    - countered_by: champions listed against any of the champion's tags, then
      the champion-specific list, resolved through the catalogue by key
    - strong_counters: catalogue champions (lowest id first) whose primary tag
      is one of the archetypes the champion's tags are strong against

    Every record uses the same fixed rate and sample size and is classified by
    the same significance test and thresholds as measured samples.
    """

    def __init__(
        self,
        thresholds: Optional[CounterThresholds] = None,
        per_list: Optional[int] = None,
    ) -> None:
        self.thresholds = thresholds or CounterThresholds()
        self.per_list = settings.SAMPLE_COUNTERS_PER_LIST if per_list is None else per_list

    def build(self, champions: Mapping[int, Champion]) -> Dict[int, ChampionStats]:
        by_key = {c.key: c for c in champions.values()}
        ordered = [champions[cid] for cid in sorted(champions)]

        stats = {}
        for champion in ordered:
            stats[champion.id] = self._build_one(champion, by_key, ordered)
        logger.info(f"Built sample counter stats for {len(stats)} champions")
        return stats

    def _build_one(
        self,
        champion: Champion,
        by_key: Mapping[str, Champion],
        ordered: List[Champion],
    ) -> ChampionStats:
        tags = champion_tags(champion)

        counter_keys = _unique(
            [key for tag in tags for key in tag.countered_by]
            + list(SPECIFIC_COUNTERS.get(champion.key, ()))
        )
        beaten_by = [
            by_key[key] for key in counter_keys
            if key in by_key and key != champion.key
        ][:self.per_list]

        targets = _unique(t for tag in tags for t in tag.strong_against)[:MAX_STRONG_AGAINST_TAGS]
        excluded = {champion.id} | {c.id for c in beaten_by}
        beats = [
            other for other in ordered
            if other.id not in excluded and primary_tag(other) in targets
        ][:self.per_list]

        overall = OverallStats(total_games=150, wins=75)
        overall.finalize(self.thresholds.min_sample_size)
        top = LaneStats(total_games=125, wins=65)
        top.finalize(self.thresholds.min_sample_size)

        return ChampionStats(
            id=champion.id,
            name=champion.name,
            key=champion.key,
            tags=champion.tags,
            overall=overall,
            strong_counters=[self._record(other, SAMPLE_WIN_RATE) for other in beats],
            countered_by=[self._record(other, round(1.0 - SAMPLE_WIN_RATE, 10)) for other in beaten_by],
            lane_performance={Lane.TOP: top},
        )

    def _record(self, opponent: Champion, win_rate: float) -> CounterRecord:
        result = significance_test(win_rate, SAMPLE_SIZE, alpha=self.thresholds.significance_level)
        return CounterRecord(
            opponent_id=opponent.id,
            lane=SAMPLE_LANE,
            win_rate=win_rate,
            sample_size=SAMPLE_SIZE,
            p_value=result.p_value,
            strength=classify_counter_strength(win_rate, SAMPLE_SIZE, result, self.thresholds),
            opponent_name=opponent.name,
        )
