"""Two-window rate limiter matching Riot's personal API key limits."""
import asyncio
import logging
import time
from collections import deque
from typing import Awaitable, Callable, Deque, Optional, Tuple

from lol_counters.config import settings

logger = logging.getLogger(__name__)

Clock = Callable[[], float]
Sleep = Callable[[float], Awaitable[None]]


class RateLimiter:
    """
    Request log with two quotas:
      - Short : N requests per 1 second   → pause a fixed cool-down (~1.1s)
      - Long  : N requests per 120 seconds → pause the whole window, then
                start a fresh log

    ``acquire`` never fails and never reorders callers; it only delays them.
    Every granted request is timestamped. The log is owned by the instance and
    guarded by a lock, so one limiter can be shared by concurrent callers.
    """

    def __init__(
        self,
        requests_per_1_sec: Optional[int] = None,
        requests_per_2_min: Optional[int] = None,
        *,
        cooldown: Optional[float] = None,
        long_window: Optional[float] = None,
        short_window: float = 1.0,
        clock: Clock = time.monotonic,
        sleep: Sleep = asyncio.sleep,
    ):
        self.requests_per_1_sec = settings.RATE_LIMIT_PER_1_SEC if requests_per_1_sec is None else requests_per_1_sec
        self.requests_per_2_min = settings.RATE_LIMIT_PER_2_MIN if requests_per_2_min is None else requests_per_2_min
        self.cooldown    = settings.RATE_LIMIT_COOLDOWN_SEC if cooldown is None else cooldown
        self.long_window = settings.RATE_LIMIT_LONG_WINDOW_SEC if long_window is None else long_window
        self.short_window = short_window

        self._clock = clock
        self._sleep = sleep
        self._times: Deque[float] = deque()
        self._lock = asyncio.Lock()
        self.granted = 0

    def _prune(self, now: float) -> None:
        while self._times and now - self._times[0] >= self.long_window:
            self._times.popleft()

    def _recent(self, now: float) -> int:
        return sum(1 for t in self._times if now - t < self.short_window)

    async def acquire(self) -> None:
        async with self._lock:
            now = self._clock()
            self._prune(now)

            if self._recent(now) >= self.requests_per_1_sec:
                logger.debug(f"Short rate limit reached — waiting {self.cooldown:.2f}s")
                await self._sleep(self.cooldown)

            if len(self._times) >= self.requests_per_2_min:
                logger.warning(f"Long rate limit reached — waiting {self.long_window:.0f}s")
                await self._sleep(self.long_window)
                self._times.clear()

            self._times.append(self._clock())
            self.granted += 1

    def get_status(self) -> Tuple[int, int, int, int]:
        """(used in short window, short quota, used in long window, long quota)."""
        now = self._clock()
        used_long = sum(1 for t in self._times if now - t < self.long_window)
        return self._recent(now), self.requests_per_1_sec, used_long, self.requests_per_2_min

    async def reset(self) -> None:
        async with self._lock:
            self._times.clear()
