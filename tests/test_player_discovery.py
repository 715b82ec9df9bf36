"""Tests for apex-tier player discovery."""
import pytest

from lol_counters.application.services import PlayerDiscoveryService, TierLimits
from lol_counters.domain.enums import Tier
from lol_counters.domain.interfaces import IPlayerRepository
from lol_counters.infrastructure.api import RequestError, TransportError

pytestmark = pytest.mark.anyio


class FakePlayerRepository(IPlayerRepository):
    def __init__(self, leagues, failing_tiers=(), failing_summoners=()):
        self.leagues = leagues
        self.failing_tiers = set(failing_tiers)
        self.failing_summoners = set(failing_summoners)
        self.resolved = []

    async def get_league_entries(self, tier):
        if tier in self.failing_tiers:
            raise RequestError(503, "unavailable", tier.league_path)
        return list(self.leagues.get(tier, []))

    async def resolve_puuid(self, summoner_id):
        self.resolved.append(summoner_id)
        if summoner_id in self.failing_summoners:
            raise TransportError(summoner_id)
        return f"puuid-{summoner_id}"


def entry(summoner_id, points, rank="I"):
    return {"summonerId": summoner_id, "leaguePoints": points, "rank": rank}


async def test_one_player_per_tier_comes_back_in_tier_order():
    repo = FakePlayerRepository({
        Tier.MASTER: [entry("m1", 2000)],
        Tier.GRANDMASTER: [entry("g1", 900)],
        Tier.CHALLENGER: [entry("c1", 100)],
    })

    players = await PlayerDiscoveryService(repo).discover_top_players()

    assert [p.tier for p in players] == [Tier.CHALLENGER, Tier.GRANDMASTER, Tier.MASTER]
    assert [p.account_id for p in players] == ["puuid-c1", "puuid-g1", "puuid-m1"]


async def test_sorted_by_points_and_truncated_per_tier():
    repo = FakePlayerRepository({
        Tier.CHALLENGER: [entry("c-low", 1000), entry("c-top", 1500), entry("c-mid", 1200)],
        Tier.GRANDMASTER: [entry("g1", 700), entry("g2", 800)],
        Tier.MASTER: [entry("m1", 10)],
    })
    limits = TierLimits(challenger=2, grandmaster=1, master=0)

    players = await PlayerDiscoveryService(repo).discover_top_players(limits)

    assert [p.summoner_id for p in players] == ["c-top", "c-mid", "g2"]
    assert [p.league_points for p in players] == [1500, 1200, 800]
    # only kept entries cost a lookup
    assert repo.resolved == ["c-top", "c-mid", "g2"]


async def test_failed_tier_is_skipped():
    repo = FakePlayerRepository(
        {Tier.CHALLENGER: [entry("c1", 100)], Tier.MASTER: [entry("m1", 50)]},
        failing_tiers=[Tier.GRANDMASTER],
    )

    players = await PlayerDiscoveryService(repo).discover_top_players()

    assert [p.tier for p in players] == [Tier.CHALLENGER, Tier.MASTER]


async def test_unresolvable_entry_is_dropped():
    repo = FakePlayerRepository(
        {Tier.CHALLENGER: [entry("c1", 300), entry("c2", 200), entry("c3", 100)]},
        failing_summoners=["c2"],
    )

    players = await PlayerDiscoveryService(repo).discover_top_players()

    assert [p.summoner_id for p in players] == ["c1", "c3"]


async def test_entry_with_puuid_only_needs_no_lookup():
    repo = FakePlayerRepository({
        Tier.CHALLENGER: [{"puuid": "direct-puuid", "leaguePoints": 999, "rank": "I"}],
    })

    players = await PlayerDiscoveryService(repo).discover_top_players()

    assert players[0].account_id == "direct-puuid"
    assert repo.resolved == []


async def test_every_tier_failing_gives_empty_list():
    repo = FakePlayerRepository({}, failing_tiers=list(Tier))
    assert await PlayerDiscoveryService(repo).discover_top_players() == []


async def test_null_points_and_junk_entries_do_not_break_the_tier():
    repo = FakePlayerRepository({
        Tier.CHALLENGER: [
            {"summonerId": "c-null", "leaguePoints": None, "rank": "I"},
            entry("c-top", 100),
            None,
            {"summonerId": "c-bad", "leaguePoints": "n/a", "rank": "I"},
        ],
        Tier.MASTER: [entry("m1", 10)],
    })

    players = await PlayerDiscoveryService(repo).discover_top_players()

    assert [p.summoner_id for p in players] == ["c-top", "c-null", "c-bad", "m1"]
    assert [p.league_points for p in players] == [100, 0, 0, 10]
