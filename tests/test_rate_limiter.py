"""
Unit tests for RateLimiter: spacing between call starts on a fake clock.
"""

import asyncio

import pytest

from websearch_agent.services.rate_limiter import RateLimiter


def _limiter(clock) -> RateLimiter:
    return RateLimiter(min_interval=2.0, clock=clock, sleep=clock.sleep)


def test_first_call_is_not_delayed(clock) -> None:
    """The very first call starts immediately."""
    limiter = _limiter(clock)
    assert asyncio.run(limiter.wait()) == 0
    assert clock.sleeps == []


def test_back_to_back_calls_start_at_least_interval_apart(clock) -> None:
    """Two consecutive calls start at least 2s apart."""
    limiter = _limiter(clock)
    starts = []

    async def two_calls() -> None:
        for _ in range(2):
            await limiter.wait()
            starts.append(clock())

    asyncio.run(two_calls())
    assert starts[1] - starts[0] >= 2.0
    assert clock.sleeps == [pytest.approx(2.0)]


def test_waits_only_for_the_remaining_delta(clock) -> None:
    """A call 0.5s after the previous one waits the remaining 1.5s."""
    limiter = _limiter(clock)
    asyncio.run(limiter.wait())
    clock.now += 0.5
    assert asyncio.run(limiter.wait()) == pytest.approx(1.5)


def test_no_wait_after_interval_elapsed(clock) -> None:
    """Once the interval has passed since the last start, no wait is applied."""
    limiter = _limiter(clock)
    asyncio.run(limiter.wait())
    # A slow provider call: completion time is not what is recorded
    clock.now += 3.0
    assert asyncio.run(limiter.wait()) == 0
    assert clock.sleeps == []


def test_concurrent_callers_reserve_successive_slots(clock) -> None:
    """Callers arriving together get slots 0s, 2s and 4s out."""
    recorded = []

    async def no_time_passes(seconds: float) -> None:
        recorded.append(seconds)

    limiter = RateLimiter(min_interval=2.0, clock=clock, sleep=no_time_passes)

    async def three_at_once() -> list[float]:
        return list(await asyncio.gather(limiter.wait(), limiter.wait(), limiter.wait()))

    delays = asyncio.run(three_at_once())
    assert delays == [pytest.approx(0.0), pytest.approx(2.0), pytest.approx(4.0)]
    assert recorded == [pytest.approx(2.0), pytest.approx(4.0)]
