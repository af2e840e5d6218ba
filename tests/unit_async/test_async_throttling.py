from __future__ import annotations

import asyncio

import pytest

from oecd_sdmx_client.core.async_throttling import AsyncMinIntervalThrottler
from tests.shared.transport import FakeClock


@pytest.mark.asyncio
async def test_first_admission_does_not_wait(fake_clock: FakeClock):
    throttler = AsyncMinIntervalThrottler(1.5, clock=fake_clock, sleeper=fake_clock.sleep)
    admitted = await throttler.admit()
    assert admitted == fake_clock.now
    assert fake_clock.sleeps == []


@pytest.mark.asyncio
async def test_waits_for_remaining_interval(fake_clock: FakeClock):
    throttler = AsyncMinIntervalThrottler(1.5, clock=fake_clock, sleeper=fake_clock.sleep)
    await throttler.admit()
    fake_clock.now += 0.5
    await throttler.admit()
    assert fake_clock.sleeps == [pytest.approx(1.0)]


@pytest.mark.asyncio
async def test_no_wait_when_interval_already_elapsed(fake_clock: FakeClock):
    throttler = AsyncMinIntervalThrottler(1.5, clock=fake_clock, sleeper=fake_clock.sleep)
    await throttler.admit()
    fake_clock.now += 10.0
    await throttler.admit()
    assert fake_clock.sleeps == []


@pytest.mark.asyncio
@pytest.mark.parametrize("count", [2, 5, 25])
async def test_concurrent_admissions_are_spaced_by_min_interval(fake_clock: FakeClock, count: int):
    throttler = AsyncMinIntervalThrottler(1.5, clock=fake_clock, sleeper=fake_clock.sleep)

    stamps = sorted(await asyncio.gather(*(throttler.admit() for _ in range(count))))

    assert len(stamps) == count
    for earlier, later in zip(stamps, stamps[1:]):
        assert later - earlier >= 1.5 - 1e-9


@pytest.mark.asyncio
async def test_admissions_are_granted_in_call_order(fake_clock: FakeClock):
    throttler = AsyncMinIntervalThrottler(1.5, clock=fake_clock, sleeper=fake_clock.sleep)
    order: list[int] = []

    async def caller(idx: int) -> float:
        stamp = await throttler.admit()
        order.append(idx)
        return stamp

    tasks = [asyncio.create_task(caller(idx)) for idx in range(6)]
    stamps = await asyncio.gather(*tasks)

    assert order == list(range(6))
    assert list(stamps) == sorted(stamps)


@pytest.mark.asyncio
async def test_concurrent_admissions_with_real_clock_are_spaced():
    throttler = AsyncMinIntervalThrottler(0.05)
    stamps = sorted(await asyncio.gather(*(throttler.admit() for _ in range(4))))
    for earlier, later in zip(stamps, stamps[1:]):
        assert later - earlier >= 0.05 - 1e-3


@pytest.mark.asyncio
async def test_independent_throttlers_do_not_share_state(fake_clock: FakeClock):
    first = AsyncMinIntervalThrottler(1.5, clock=fake_clock, sleeper=fake_clock.sleep)
    second = AsyncMinIntervalThrottler(1.5, clock=fake_clock, sleeper=fake_clock.sleep)
    await first.admit()
    await second.admit()
    assert fake_clock.sleeps == []


@pytest.mark.asyncio
async def test_reset_clears_last_admission(fake_clock: FakeClock):
    throttler = AsyncMinIntervalThrottler(1.5, clock=fake_clock, sleeper=fake_clock.sleep)
    await throttler.admit()
    throttler.reset()
    await throttler.admit()
    assert fake_clock.sleeps == []


def test_negative_interval_is_clamped_to_zero():
    assert AsyncMinIntervalThrottler(-1.0).min_interval_seconds == 0.0
