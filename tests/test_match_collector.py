"""Tests for bounded, de-duplicated match collection."""
import dataclasses

import pytest

from lol_counters.application.services import MatchCollectorService, is_valid_match
from lol_counters.domain.entities import PlayerRef
from lol_counters.domain.enums import Tier
from lol_counters.domain.interfaces import IMatchRepository
from lol_counters.infrastructure.api import RequestError

pytestmark = pytest.mark.anyio


class FakeMatchRepository(IMatchRepository):
    def __init__(self, ids_by_puuid, matches, failing_players=(), failing_matches=()):
        self.ids_by_puuid = ids_by_puuid
        self.matches = matches
        self.failing_players = set(failing_players)
        self.failing_matches = set(failing_matches)
        self.id_requests = []
        self.match_requests = []

    async def get_match_ids(self, puuid, queue_type, count):
        self.id_requests.append((puuid, queue_type.queue_id, count))
        if puuid in self.failing_players:
            raise RequestError(500, "oops", puuid)
        return self.ids_by_puuid.get(puuid, [])[:count]

    async def get_match(self, match_id):
        self.match_requests.append(match_id)
        if match_id in self.failing_matches:
            raise RequestError(503, "unavailable", match_id)
        return self.matches.get(match_id)


def player(puuid, tier=Tier.CHALLENGER):
    return PlayerRef(account_id=puuid, tier=tier, rank="I", league_points=1000)


@pytest.fixture
def matches(make_match):
    return {f"M{i}": make_match(match_id=f"M{i}") for i in range(1, 10)}


async def test_shared_match_is_fetched_once(matches):
    repo = FakeMatchRepository({"p1": ["M1", "M2"], "p2": ["M2", "M3"]}, matches)
    collector = MatchCollectorService(repo, matches_per_player=40)

    result = await collector.collect_matches([player("p1"), player("p2")], target_count=10)

    assert [m.match_id for m in result] == ["M1", "M2", "M3"]
    assert repo.match_requests == ["M1", "M2", "M3"]
    assert collector.stats.duplicates_skipped == 1


async def test_requests_ranked_solo_ids_capped_per_player(matches):
    repo = FakeMatchRepository({"p1": [f"M{i}" for i in range(1, 10)]}, matches)
    collector = MatchCollectorService(repo, matches_per_player=3)

    result = await collector.collect_matches([player("p1")], target_count=100)

    assert repo.id_requests == [("p1", 420, 3)]
    assert len(result) == 3


async def test_invalid_match_is_discarded_but_marked_seen(matches, make_match):
    matches["M1"] = make_match(match_id="M1", queue_id=440)
    repo = FakeMatchRepository({"p1": ["M1", "M2"], "p2": ["M1"]}, matches)
    collector = MatchCollectorService(repo)

    result = await collector.collect_matches([player("p1"), player("p2")], target_count=10)

    assert [m.match_id for m in result] == ["M2"]
    assert "M1" in collector.seen_match_ids
    assert repo.match_requests.count("M1") == 1
    assert collector.stats.matches_rejected == 1


async def test_stops_exactly_at_target_mid_player(matches):
    repo = FakeMatchRepository({"p1": ["M1", "M2", "M3"], "p2": ["M4", "M5", "M6"]}, matches)
    collector = MatchCollectorService(repo)

    result = await collector.collect_matches([player("p1"), player("p2")], target_count=4)

    assert [m.match_id for m in result] == ["M1", "M2", "M3", "M4"]
    assert repo.match_requests == ["M1", "M2", "M3", "M4"]
    assert [r[0] for r in repo.id_requests] == ["p1", "p2"]


async def test_zero_target_makes_no_calls(matches):
    repo = FakeMatchRepository({"p1": ["M1"]}, matches)
    result = await MatchCollectorService(repo).collect_matches([player("p1")], target_count=0)
    assert result == []
    assert repo.id_requests == []


async def test_failures_are_skipped(matches):
    repo = FakeMatchRepository(
        {"p1": ["M1"], "p2": ["M2", "M3"], "p3": ["M2"]},
        matches,
        failing_players=["p1"],
        failing_matches=["M2"],
    )
    collector = MatchCollectorService(repo)

    result = await collector.collect_matches([player("p1"), player("p2"), player("p3")], 10)

    assert [m.match_id for m in result] == ["M3"]
    # a failed fetch is not marked seen, so a later listing tries again
    assert "M2" not in collector.seen_match_ids
    assert repo.match_requests == ["M2", "M3", "M2"]
    assert collector.stats.fetch_failures == 3


async def test_unparseable_match_counts_as_rejected(matches):
    repo = FakeMatchRepository({"p1": ["missing", "M1"]}, matches)
    collector = MatchCollectorService(repo)

    result = await collector.collect_matches([player("p1")], 10)

    assert [m.match_id for m in result] == ["M1"]
    assert "missing" in collector.seen_match_ids


async def test_iter_matches_can_be_consumed_lazily(matches):
    repo = FakeMatchRepository({"p1": ["M1", "M2", "M3"]}, matches)
    collector = MatchCollectorService(repo)

    stream = collector.iter_matches([player("p1")])
    first = await stream.__anext__()
    await stream.aclose()

    assert first.match_id == "M1"
    assert repo.match_requests == ["M1"]


@pytest.mark.parametrize(
    "changes, expected",
    [
        ({}, True),
        ({"duration_seconds": 900}, True),
        ({"duration_seconds": 3600}, True),
        ({"duration_seconds": 899}, False),
        ({"duration_seconds": 3601}, False),
        ({"queue_id": 440}, False),
        ({"game_mode": "ARAM"}, False),
    ],
)
def test_is_valid_match(make_match, changes, expected):
    match = dataclasses.replace(make_match(), **changes)
    assert is_valid_match(match) is expected


def test_is_valid_match_requires_full_lobby(make_match):
    match = make_match()
    short = dataclasses.replace(match, participants=match.participants[:9])
    assert is_valid_match(short) is False


async def test_zero_matches_per_player_lists_nothing(matches):
    repo = FakeMatchRepository({"p1": ["M1"]}, matches)
    collector = MatchCollectorService(repo, matches_per_player=0)

    result = await collector.collect_matches([player("p1")], target_count=10)

    assert collector.matches_per_player == 0
    assert result == []
    assert repo.id_requests == []
