"""Data Dragon (static data) client. No credential, no rate accounting."""
import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, Optional

import httpx

from lol_counters.config import settings
from lol_counters.domain.entities import Champion
from .errors import CatalogueUnavailableError, RequestError, RiotAPIError, TransportError

logger = logging.getLogger(__name__)


class DataDragonClient:
    """Fetches the patch version and champion catalogue from the Data Dragon CDN."""

    def __init__(
        self,
        *,
        base_url: str = settings.DDRAGON_BASE_URL,
        locale: str = settings.DDRAGON_LOCALE,
        batch_size: int = settings.DDRAGON_BATCH_SIZE,
        batch_pause: float = 0.1,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.base_url = base_url.rstrip("/")
        self.locale = locale
        self.batch_size = max(1, batch_size)
        self.batch_pause = batch_pause
        self.timeout = settings.REQUEST_TIMEOUT if timeout is None else timeout
        self.session: Optional[httpx.AsyncClient] = None
        self._transport = transport
        self._sleep = sleep

    async def __aenter__(self) -> "DataDragonClient":
        self.session = httpx.AsyncClient(timeout=self.timeout, transport=self._transport)
        return self

    async def __aexit__(self, *_) -> None:
        if self.session:
            await self.session.aclose()
            self.session = None

    async def _get_json(self, url: str) -> Any:
        if self.session is None:
            raise RuntimeError("DataDragonClient must be used inside 'async with'")
        try:
            response = await self.session.get(url)
        except httpx.TransportError as exc:
            raise TransportError(url, exc) from exc
        if not response.is_success:
            raise RequestError(response.status_code, response.text, url)
        return response.json()

    async def get_latest_version(self) -> str:
        try:
            versions = await self._get_json(f"{self.base_url}/api/versions.json")
            return versions[0]
        except (RiotAPIError, ValueError, IndexError) as exc:
            logger.warning(f"Failed to fetch latest version ({exc}), using {settings.DDRAGON_FALLBACK_VERSION}")
            return settings.DDRAGON_FALLBACK_VERSION

    async def get_champion_catalogue(self, version: str) -> Dict[int, Champion]:
        """Every champion keyed by numeric id.

        The summary document is required; per-champion detail documents are
        fetched ``batch_size`` at a time and fall back to the summary entry.
        """
        url = f"{self.base_url}/cdn/{version}/data/{self.locale}/champion.json"
        try:
            summary = (await self._get_json(url))["data"]
            if not isinstance(summary, dict):
                raise ValueError("champion.json 'data' is not an object")
        except (RiotAPIError, ValueError, KeyError, TypeError) as exc:
            raise CatalogueUnavailableError(version, exc) from exc

        slugs = list(summary)
        detailed: Dict[str, dict] = {}
        for i in range(0, len(slugs), self.batch_size):
            batch = slugs[i:i + self.batch_size]
            results = await asyncio.gather(
                *(self._get_champion_detail(version, slug, summary[slug]) for slug in batch)
            )
            for slug, data in zip(batch, results):
                detailed[slug] = data
            if i + self.batch_size < len(slugs) and self.batch_pause:
                await self._sleep(self.batch_pause)

        catalogue = {}
        for slug, data in detailed.items():
            champion = self._parse_champion(slug, data, summary[slug])
            if champion is not None:
                catalogue[champion.id] = champion
        if not catalogue:
            raise CatalogueUnavailableError(version, ValueError("no parseable champion entries"))
        logger.info(f"Fetched {len(catalogue)} champions for {version}")
        return catalogue

    @staticmethod
    def _parse_champion(slug: str, data: Any, fallback: Any) -> Optional[Champion]:
        for candidate in (data, fallback):
            try:
                return Champion.from_ddragon(candidate)
            except (KeyError, TypeError, ValueError) as exc:
                logger.warning(f"Unusable champion entry for {slug}: {exc!r}")
        return None

    async def _get_champion_detail(self, version: str, slug: str, fallback: dict) -> dict:
        url = f"{self.base_url}/cdn/{version}/data/{self.locale}/champion/{slug}.json"
        try:
            return (await self._get_json(url))["data"][slug]
        except (RiotAPIError, ValueError, KeyError, TypeError) as exc:
            logger.warning(f"Failed to fetch details for {slug}: {exc}")
            return fallback
