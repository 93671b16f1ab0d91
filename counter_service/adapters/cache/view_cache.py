"""In-process counter view cache — implements CounterViewCache."""

from __future__ import annotations

import time
from collections.abc import Callable

from counter_service.application.ports.view_cache import CounterViewCache


class InMemoryCounterViewCache(CounterViewCache):
    """Per-process cache of rendered counts with a TTL.

    Each worker process holds its own copy, so the TTL bounds how stale a view
    can get when another process performed the increment.
    """

    def __init__(self, ttl_seconds: float = 30.0, clock: Callable[[], float] = time.monotonic):
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[int, tuple[int, float]] = {}

    def get(self, counter_id: int) -> int | None:
        entry = self._entries.get(counter_id)
        if entry is None:
            return None
        count, expires_at = entry
        if self._clock() >= expires_at:
            self._entries.pop(counter_id, None)
            return None
        return count

    def set(self, counter_id: int, count: int) -> None:
        if self._ttl <= 0:
            return
        self._entries[counter_id] = (count, self._clock() + self._ttl)

    def invalidate(self, counter_id: int) -> None:
        self._entries.pop(counter_id, None)
