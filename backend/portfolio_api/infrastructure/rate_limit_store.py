"""Rate-Limit Store: in-memory map of client key to last accepted submission time.

Invariants:
    - At most one acquire() per key succeeds within window_ms
    - acquire() checks and records under one lock, so same-key races cannot both pass
    - Entries only leave through sweep(); nothing expires on read

Design Decisions:
    - Owned object instead of module state: the lifespan creates one per app and
      tests inject their own
    - Epoch milliseconds throughout, matching the formStartTime the browser sends
"""

import threading
import time

from portfolio_api.core.domain_types import EpochMillis


def epoch_ms() -> EpochMillis:
    return EpochMillis(int(time.time() * 1000))


class InMemoryRateLimitStore:
    """Fixed-window throttle: one accepted hit per key per window."""

    def __init__(self, window_ms: int = 30_000):
        self.window_ms = window_ms
        self._entries: dict[str, int] = {}
        self._lock = threading.Lock()

    def acquire(self, key: str, now_ms: EpochMillis) -> tuple[bool, int]:
        with self._lock:
            last = self._entries.get(key)
            if last is not None:
                elapsed = now_ms - last
                if elapsed < self.window_ms:
                    return False, self.window_ms - elapsed
            self._entries[key] = now_ms
            return True, 0

    def sweep(self, cutoff_ms: int) -> int:
        """Drop entries recorded before cutoff_ms. Returns how many were removed."""
        with self._lock:
            stale = [k for k, ts in self._entries.items() if ts < cutoff_ms]
            for key in stale:
                del self._entries[key]
            return len(stale)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries
