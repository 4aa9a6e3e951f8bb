"""Rate-Limit Sweeper: one-shot eviction and background task lifecycle."""

import asyncio

from portfolio_api.infrastructure.rate_limit_store import InMemoryRateLimitStore
from portfolio_api.infrastructure.rate_limit_sweeper import RateLimitSweeper

NOW = 1_700_000_000_000
HOUR_MS = 3_600_000


def _store_with_entries():
    store = InMemoryRateLimitStore()
    store.acquire("stale", NOW - HOUR_MS - 1)
    store.acquire("fresh", NOW - 1_000)
    return store


def test_run_once_evicts_entries_older_than_max_age():
    store = _store_with_entries()
    sweeper = RateLimitSweeper(store, max_age_seconds=3600, clock=lambda: NOW)
    assert sweeper.run_once() == 1
    assert "stale" not in store
    assert "fresh" in store


def test_run_once_on_empty_store():
    sweeper = RateLimitSweeper(InMemoryRateLimitStore(), clock=lambda: NOW)
    assert sweeper.run_once() == 0


async def test_start_and_stop_lifecycle():
    sweeper = RateLimitSweeper(InMemoryRateLimitStore(), interval_seconds=3600)
    assert not sweeper.running
    sweeper.start()
    assert sweeper.running
    first_task = sweeper._task
    sweeper.start()
    assert sweeper._task is first_task
    await sweeper.stop()
    assert not sweeper.running


async def test_stop_without_start_is_noop():
    await RateLimitSweeper(InMemoryRateLimitStore()).stop()


async def test_loop_sweeps_periodically():
    store = _store_with_entries()
    sweeper = RateLimitSweeper(
        store, interval_seconds=0.01, max_age_seconds=3600, clock=lambda: NOW,
    )
    sweeper.start()
    for _ in range(100):
        if "stale" not in store:
            break
        await asyncio.sleep(0.01)
    await sweeper.stop()
    assert "stale" not in store


async def test_loop_survives_failing_sweep():
    calls = []

    def flaky_clock():
        calls.append(1)
        if len(calls) == 1:
            raise RuntimeError("clock unavailable")
        return NOW

    store = _store_with_entries()
    sweeper = RateLimitSweeper(
        store, interval_seconds=0.01, max_age_seconds=3600, clock=flaky_clock,
    )
    sweeper.start()
    for _ in range(100):
        if "stale" not in store:
            break
        await asyncio.sleep(0.01)
    assert sweeper.running
    await sweeper.stop()
    assert len(calls) >= 2
    assert "stale" not in store
