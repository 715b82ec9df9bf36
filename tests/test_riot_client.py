"""Tests for the Riot API client (fetch client)."""
import httpx
import pytest

from lol_counters.domain.enums import Region, Tier
from lol_counters.infrastructure.api import (
    RateLimiter,
    RateLimitExceededError,
    RequestError,
    RiotAPIClient,
    TransportError,
)

pytestmark = pytest.mark.anyio

URL = "https://jp1.api.riotgames.com/lol/status/v4/platform-data"


def build_client(handler, clock, **kwargs):
    limiter = RateLimiter(20, 100, clock=clock, sleep=clock.sleep)
    return RiotAPIClient(
        "test-key",
        Region.JP1,
        rate_limiter=limiter,
        transport=httpx.MockTransport(handler),
        sleep=clock.sleep,
        **kwargs,
    )


async def test_returns_json_and_sends_credential(clock):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    async with build_client(handler, clock) as client:
        data = await client.request(URL)

    assert data == {"ok": True}
    assert seen[0].headers["X-Riot-Token"] == "test-key"
    assert client.call_count == 1
    assert client.rate_limiter.granted == 1


async def test_429_waits_retry_after_then_reissues_same_request(clock):
    seen = []

    def handler(request):
        seen.append(request)
        if len(seen) == 1:
            return httpx.Response(429, headers={"Retry-After": "2"})
        return httpx.Response(200, json=[1, 2])

    async with build_client(handler, clock, max_rate_limit_retries=1) as client:
        data = await client.request(URL)

    assert data == [1, 2]
    assert len(seen) == 2
    assert seen[0].url == seen[1].url
    assert clock.sleeps == [2.0]
    # the retry went through the limiter too
    assert client.rate_limiter.granted == 2


async def test_429_without_retry_after_defaults_to_one_second(clock):
    responses = iter([httpx.Response(429), httpx.Response(200, json={})])

    async with build_client(lambda request: next(responses), clock) as client:
        await client.request(URL)

    assert clock.sleeps == [1.0]


async def test_429_retry_budget_exhausted(clock):
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(429, headers={"Retry-After": "2"}, text="slow down")

    async with build_client(handler, clock, max_rate_limit_retries=1) as client:
        with pytest.raises(RateLimitExceededError) as excinfo:
            await client.request(URL)

    assert len(calls) == 2
    assert excinfo.value.status_code == 429
    assert excinfo.value.attempts == 1


async def test_unbounded_retries_keep_going(clock):
    calls = []

    def handler(request):
        calls.append(request)
        if len(calls) <= 6:
            return httpx.Response(429, headers={"Retry-After": "1"})
        return httpx.Response(200, json={"done": True})

    async with build_client(handler, clock, max_rate_limit_retries=None) as client:
        assert await client.request(URL) == {"done": True}

    assert len(calls) == 7
    assert clock.sleeps == [1.0] * 6


async def test_non_2xx_raises_request_error_with_status_and_body(clock):
    def handler(request):
        return httpx.Response(404, text='{"status": "Data not found"}')

    async with build_client(handler, clock) as client:
        with pytest.raises(RequestError) as excinfo:
            await client.request(URL)

    assert excinfo.value.status_code == 404
    assert "Data not found" in excinfo.value.body
    assert clock.sleeps == []


async def test_network_failure_raises_transport_error(clock):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with build_client(handler, clock) as client:
        with pytest.raises(TransportError):
            await client.request(URL)


async def test_request_outside_context_is_rejected(clock):
    client = build_client(lambda request: httpx.Response(200, json={}), clock)
    with pytest.raises(RuntimeError):
        await client.request(URL)


async def test_endpoint_urls(clock):
    seen = []

    def handler(request):
        seen.append(request)
        if "/ids" in request.url.path:
            return httpx.Response(200, json=["JP1_1"])
        return httpx.Response(200, json={"entries": []})

    async with build_client(handler, clock) as client:
        await client.get_league(Tier.GRANDMASTER)
        await client.get_summoner_by_id("sid-1")
        ids = await client.get_match_ids_by_puuid("puuid-1", count=40)
        await client.get_match_by_id("JP1_1")

    assert ids == ["JP1_1"]
    assert str(seen[0].url) == (
        "https://jp1.api.riotgames.com/lol/league/v4/grandmasterleagues/by-queue/RANKED_SOLO_5x5"
    )
    assert str(seen[1].url) == "https://jp1.api.riotgames.com/lol/summoner/v4/summoners/sid-1"
    assert seen[2].url.host == "asia.api.riotgames.com"
    assert seen[2].url.path == "/lol/match/v5/matches/by-puuid/puuid-1/ids"
    assert seen[2].url.params["queue"] == "420"
    assert seen[2].url.params["count"] == "40"
    assert str(seen[3].url) == "https://asia.api.riotgames.com/lol/match/v5/matches/JP1_1"
