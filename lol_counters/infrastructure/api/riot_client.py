"""Riot Games API client."""
import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

import httpx

from lol_counters.config import settings
from lol_counters.domain.enums import QueueType, Region, Tier
from .errors import RateLimitExceededError, RequestError, TransportError
from .rate_limiter import RateLimiter

logger = logging.getLogger(__name__)

_RATE_LIMIT_HEADERS = (
    "X-App-Rate-Limit",
    "X-App-Rate-Limit-Count",
    "X-Method-Rate-Limit",
    "X-Method-Rate-Limit-Count",
)


class RiotAPIClient:
    """Asynchronous Riot API client.

    Every attempt, retries included, passes through the shared ``RateLimiter``.
    A 429 is retried after the server's ``Retry-After`` delay up to
    ``max_rate_limit_retries`` times (``None`` retries forever). Any other
    non-2xx response raises ``RequestError``; network failures raise
    ``TransportError``.

    Use as an async context manager::

        async with RiotAPIClient(api_key, Region.JP1) as client:
            league = await client.get_league(Tier.CHALLENGER)
    """

    def __init__(
        self,
        api_key: str,
        region: Region,
        *,
        rate_limiter: Optional[RateLimiter] = None,
        timeout: Optional[float] = None,
        max_rate_limit_retries: Optional[int] = settings.MAX_RATE_LIMIT_RETRIES,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.api_key  = api_key
        self.region   = region
        self.timeout  = settings.REQUEST_TIMEOUT if timeout is None else timeout
        self.max_rate_limit_retries = max_rate_limit_retries
        self.rate_limiter = rate_limiter or RateLimiter()
        self.session: Optional[httpx.AsyncClient] = None
        self.call_count = 0
        self._transport = transport
        self._sleep = sleep

    async def __aenter__(self) -> "RiotAPIClient":
        self.session = httpx.AsyncClient(
            timeout=self.timeout,
            headers={"X-Riot-Token": self.api_key, "User-Agent": settings.USER_AGENT},
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self.session:
            await self.session.aclose()
            self.session = None

    # ── Core request ───────────────────────────────────────────────────

    async def request(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """GET ``url`` and return the decoded JSON body."""
        if self.session is None:
            raise RuntimeError("RiotAPIClient must be used inside 'async with'")

        rate_limited = 0
        while True:
            await self.rate_limiter.acquire()
            try:
                response = await self.session.get(url, params=params)
            except httpx.TransportError as exc:
                logger.error(f"Network error for {url}: {exc}")
                raise TransportError(url, exc) from exc

            self.call_count += 1
            self._log_rate_limit_headers(response)

            if response.status_code == 429:
                if self.max_rate_limit_retries is not None and rate_limited >= self.max_rate_limit_retries:
                    logger.error(f"429 persisted after {rate_limited} retries — giving up on {url}")
                    raise RateLimitExceededError(url, response.text, rate_limited)
                retry_after = self._retry_after(response)
                rate_limited += 1
                logger.warning(f"429 rate-limited — retrying in {retry_after:g}s ({url})")
                await self._sleep(retry_after)
                continue

            if not response.is_success:
                raise RequestError(response.status_code, response.text, url)

            try:
                return response.json()
            except ValueError as exc:
                raise RequestError(response.status_code, response.text, url) from exc

    @staticmethod
    def _retry_after(response: httpx.Response) -> float:
        raw = response.headers.get("Retry-After")
        if raw is None:
            return settings.DEFAULT_RETRY_AFTER
        try:
            return max(0.0, float(raw))
        except ValueError:
            return settings.DEFAULT_RETRY_AFTER

    def _log_rate_limit_headers(self, response: httpx.Response) -> None:
        if not logger.isEnabledFor(logging.DEBUG):
            return
        headers = {h: response.headers[h] for h in _RATE_LIMIT_HEADERS if h in response.headers}
        if headers:
            logger.debug(f"Rate limit headers: {headers}")

    # ── League API ─────────────────────────────────────────────────────

    async def get_league(self, tier: Tier, queue: QueueType = QueueType.RANKED_SOLO_5x5) -> Dict:
        url = f"{self.region.platform_url}/lol/league/v4/{tier.league_path}/by-queue/{queue.api_queue_name}"
        return await self.request(url)

    # ── Summoner API ───────────────────────────────────────────────────

    async def get_summoner_by_id(self, summoner_id: str) -> Dict:
        return await self.request(f"{self.region.platform_url}/lol/summoner/v4/summoners/{summoner_id}")

    # ── Match API ──────────────────────────────────────────────────────

    async def get_match_ids_by_puuid(
        self,
        puuid: str,
        queue: QueueType = QueueType.RANKED_SOLO_5x5,
        start: int = 0,
        count: int = 20,
    ) -> List[str]:
        url = f"{self.region.regional_url}/lol/match/v5/matches/by-puuid/{puuid}/ids"
        params = {"queue": queue.queue_id, "start": start, "count": min(count, 100)}
        result = await self.request(url, params=params)
        return result if isinstance(result, list) else []

    async def get_match_by_id(self, match_id: str) -> Dict:
        return await self.request(f"{self.region.regional_url}/lol/match/v5/matches/{match_id}")
