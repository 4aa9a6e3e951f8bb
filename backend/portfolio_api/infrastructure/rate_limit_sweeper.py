"""Rate-Limit Sweeper: periodic eviction of stale rate-limit entries.

Invariants:
    - start() is idempotent; stop() cancels and awaits the loop
    - run_once() is the unit of work; the loop only adds the sleep
    - A failing sweep is logged and the loop keeps running
"""

import asyncio
import logging
from typing import Callable

from portfolio_api.infrastructure.rate_limit_store import (
    InMemoryRateLimitStore, epoch_ms,
)

logger = logging.getLogger(__name__)


class RateLimitSweeper:
    """Evicts entries idle longer than max_age_seconds every interval_seconds."""

    def __init__(
        self,
        store: InMemoryRateLimitStore,
        interval_seconds: float = 3600,
        max_age_seconds: float = 3600,
        clock: Callable[[], int] = epoch_ms,
    ):
        self.store = store
        self.interval_seconds = interval_seconds
        self.max_age_seconds = max_age_seconds
        self._clock = clock
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def run_once(self) -> int:
        cutoff = self._clock() - int(self.max_age_seconds * 1000)
        removed = self.store.sweep(cutoff)
        logger.info(
            f"Rate-limit sweep removed {removed} entries",
            extra={"removed": removed, "remaining": len(self.store)},
        )
        return removed

    async def _loop(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            try:
                self.run_once()
            except Exception as e:
                logger.error(f"Rate-limit sweep failed: {e}", exc_info=True)

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._loop(), name="rate-limit-sweeper")

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
