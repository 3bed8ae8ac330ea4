"""
Rate limiter for outbound search calls: minimum spacing between call starts.

One instance is owned by the agent and shared by every concurrent request.
"""

import asyncio
import logging
import time
from typing import Awaitable, Callable

from websearch_agent.core.config import RATE_LIMIT_DELAY

logger = logging.getLogger(__name__)


class RateLimiter:
    """
    Enforce at least `min_interval` seconds between the starts of two provider calls.

    The recorded time is when a call is admitted, not when it completes, so a slow
    response never lengthens the next caller's wait beyond the interval. The slot is
    reserved before suspending (no await between reading and writing `_last_call`),
    so callers arriving together on the event loop are spaced out as well.
    """

    def __init__(
        self,
        min_interval: float = RATE_LIMIT_DELAY,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.min_interval = min_interval
        self._clock = clock
        self._sleep = sleep
        self._last_call: float | None = None

    async def wait(self) -> float:
        """Suspend until the next call may start. Returns the delay that was applied (seconds)."""
        now = self._clock()
        if self._last_call is None:
            start = now
        else:
            start = max(now, self._last_call + self.min_interval)
        self._last_call = start
        delay = start - now
        if delay > 0:
            logger.info("[rate_limiter:wait] delaying provider call by %.3fs", delay)
            await self._sleep(delay)
        return delay
