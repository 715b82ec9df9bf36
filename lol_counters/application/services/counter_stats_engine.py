"""Counter statistics engine - matchup samples to per-champion counter lists."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union

from lol_counters.config import settings
from lol_counters.domain.entities import (
    Champion,
    ChampionStats,
    CounterRecord,
    LaneStats,
    MatchupObservation,
    MatchupSample,
)
from lol_counters.domain.enums import CounterStrength, Lane
from .significance import SignificanceResult, SignificanceTest, significance_test

logger = logging.getLogger(__name__)

SampleKey = Tuple[int, int, Lane]
KnownChampions = Union[Mapping[int, Champion], Iterable[Union[Champion, int]]]

# absorbs float noise such as 0.6 - 0.5 == 0.09999999999999998
_PRECISION = 10


@dataclass(frozen=True)
class CounterThresholds:
    min_sample_size: int = settings.MIN_SAMPLE_SIZE
    significance_level: float = settings.SIGNIFICANCE_LEVEL
    strong_counter_win_rate: float = settings.STRONG_COUNTER_WIN_RATE
    counter_win_rate: float = settings.COUNTER_WIN_RATE
    hard_counter_margin: float = settings.HARD_COUNTER_MARGIN
    strong_counter_margin: float = settings.STRONG_COUNTER_MARGIN
    soft_counter_margin: float = settings.SOFT_COUNTER_MARGIN

    @property
    def countered_by_win_rate(self) -> float:
        """A row champion at or below this rate is countered by its opponent."""
        return round(1.0 - self.counter_win_rate, _PRECISION)


def classify_counter_strength(
    win_rate: float,
    sample_size: int,
    significance: Optional[SignificanceResult],
    thresholds: CounterThresholds = CounterThresholds(),
) -> CounterStrength:
    if sample_size < thresholds.min_sample_size or significance is None or not significance.is_significant:
        return CounterStrength.INSUFFICIENT_DATA

    margin = round(abs(win_rate - 0.5), _PRECISION)
    if margin >= thresholds.hard_counter_margin:
        return CounterStrength.HARD_COUNTER
    if margin >= thresholds.strong_counter_margin:
        return CounterStrength.STRONG_COUNTER
    if margin >= thresholds.soft_counter_margin:
        return CounterStrength.SOFT_COUNTER
    return CounterStrength.NEUTRAL


def accumulate_samples(observations: Iterable[MatchupObservation]) -> Dict[SampleKey, MatchupSample]:
    """Both directions of every observation, keyed by (champion, opponent, lane)."""
    samples: Dict[SampleKey, MatchupSample] = {}
    for obs in observations:
        for champion, opponent, win in (
            (obs.champion_a, obs.champion_b, obs.winner_is_a),
            (obs.champion_b, obs.champion_a, not obs.winner_is_a),
        ):
            key = (champion, opponent, obs.lane)
            sample = samples.get(key)
            if sample is None:
                sample = samples[key] = MatchupSample(champion, opponent, obs.lane)
            sample.record(win)
    return samples


class CounterStatsEngine:
    """
    Turns lane matchup observations into ``ChampionStats`` for every known champion.

    For a sample of champion C against opponent O in a lane, once the sample
    is large enough and significantly different from 50%:
      - rate >= strong threshold (0.65)  → O in C.strong_counters
      - rate >= counter threshold (0.56) → O in C.counters
      - rate <= 1 - counter threshold    → O in C.countered_by

    Output is a pure function of the observation multiset: lists are sorted,
    so feeding the same observations in any order gives identical results.
    """

    def __init__(
        self,
        thresholds: Optional[CounterThresholds] = None,
        significance: SignificanceTest = significance_test,
    ) -> None:
        self.thresholds = thresholds or CounterThresholds()
        self.significance = significance

    def compute_stats(
        self,
        observations: Iterable[MatchupObservation],
        known_champions: KnownChampions,
    ) -> Dict[int, ChampionStats]:
        stats = self._initialize(known_champions)
        observations = list(observations)

        for obs in observations:
            self._record_game(stats, obs.champion_a, obs.lane, obs.winner_is_a)
            self._record_game(stats, obs.champion_b, obs.lane, not obs.winner_is_a)

        samples = accumulate_samples(observations)
        for sample in samples.values():
            self._apply_sample(stats, sample)

        for champion in stats.values():
            self._finalize(champion)

        logger.info(
            f"Computed counter stats for {len(stats)} champions "
            f"from {len(observations)} matchups / {len(samples)} samples"
        )
        return stats

    def evaluate(self, sample: MatchupSample) -> Tuple[CounterStrength, Optional[SignificanceResult]]:
        """Strength class of one sample (and its test result when it was large enough to test)."""
        if sample.total < self.thresholds.min_sample_size:
            return CounterStrength.INSUFFICIENT_DATA, None
        result = self.significance(
            sample.win_rate, sample.total, alpha=self.thresholds.significance_level
        )
        strength = classify_counter_strength(sample.win_rate, sample.total, result, self.thresholds)
        return strength, result

    # ------------------------------------------------------------------ #

    @staticmethod
    def _initialize(known_champions: KnownChampions) -> Dict[int, ChampionStats]:
        if isinstance(known_champions, Mapping):
            known_champions = known_champions.values()
        stats: Dict[int, ChampionStats] = {}
        for champion in known_champions:
            if isinstance(champion, Champion):
                stats[champion.id] = ChampionStats(
                    id=champion.id, name=champion.name, key=champion.key, tags=champion.tags
                )
            else:
                stats[int(champion)] = ChampionStats(id=int(champion))
        return stats

    @staticmethod
    def _record_game(stats: Dict[int, ChampionStats], champion_id: int, lane: Lane, win: bool) -> None:
        champion = stats.get(champion_id)
        if champion is None:
            return
        champion.overall.record(win)
        lane_stats = champion.lane_performance.get(lane)
        if lane_stats is None:
            lane_stats = champion.lane_performance[lane] = LaneStats()
        lane_stats.record(win)

    def _apply_sample(self, stats: Dict[int, ChampionStats], sample: MatchupSample) -> None:
        """Every list lands on the row champion; ``countered_by`` holds the opponents that beat it."""
        champion = stats.get(sample.champion_id)
        if champion is None:
            return
        strength, result = self.evaluate(sample)
        if result is None or not result.is_significant:
            return

        opponent = stats.get(sample.opponent_id)
        record = CounterRecord(
            opponent_id=sample.opponent_id,
            lane=sample.lane,
            win_rate=sample.win_rate,
            sample_size=sample.total,
            p_value=result.p_value,
            strength=strength,
            opponent_name=opponent.name if opponent else "",
        )

        win_rate = sample.win_rate
        if win_rate >= self.thresholds.strong_counter_win_rate:
            champion.strong_counters.append(record)
        elif win_rate >= self.thresholds.counter_win_rate:
            champion.counters.append(record)
        if win_rate <= self.thresholds.countered_by_win_rate:
            champion.countered_by.append(record)

    def _finalize(self, champion: ChampionStats) -> None:
        min_size = self.thresholds.min_sample_size
        champion.overall.finalize(min_size)
        for lane_stats in champion.lane_performance.values():
            lane_stats.finalize(min_size)
        champion.lane_performance = {
            lane: champion.lane_performance[lane]
            for lane in Lane
            if lane in champion.lane_performance
        }

        def beats(record: CounterRecord):
            return (-record.win_rate, -record.sample_size, record.opponent_id, record.lane.value)

        def beaten_by(record: CounterRecord):
            return (record.win_rate, -record.sample_size, record.opponent_id, record.lane.value)

        champion.strong_counters.sort(key=beats)
        champion.counters.sort(key=beats)
        champion.countered_by.sort(key=beaten_by)
