"""In-process cache of resolved Pokemon results.

Concurrent requests for a name that is not cached yet share a single computation
(single-flight): the first caller starts it as an asyncio Task and every other
caller awaits that same Task. Coordination is per key, so unrelated names never
wait on each other.
"""

import asyncio
import functools
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from pokedex.models import PokemonResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    key: str
    value: PokemonResult
    created_at: float


@dataclass
class _Flight:
    task: asyncio.Task
    waiters: int = 0
    abandoned: bool = False


class ResultCache:
    def __init__(
        self,
        ttl_seconds: float | None = None,
        max_size: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self.max_size = max_size
        self._clock = clock
        # Insertion ordered, so the first key is always the oldest entry
        self._entries: dict[str, CacheEntry] = {}
        self._in_flight: dict[str, _Flight] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    @property
    def in_flight(self) -> frozenset[str]:
        """Keys with a computation currently running."""
        return frozenset(self._in_flight)

    def get(self, key: str) -> PokemonResult | None:
        """Returns the cached result, or None on a miss (absent or expired)."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self.ttl_seconds is not None and self._clock() - entry.created_at >= self.ttl_seconds:
            del self._entries[key]
            logger.debug(f"Cache entry expired for: {key}")
            return None
        return entry.value

    async def get_or_compute(self, key: str, compute: Callable[[], Awaitable[PokemonResult]]) -> PokemonResult:
        """
        Returns the cached result for key, running compute() at most once on a miss.

        Every concurrent caller for the same key receives the same value or the same
        exception. Failures are never stored. Cancelling one caller leaves the shared
        computation running for the others; it is only cancelled with the last one.
        """
        cached = self.get(key)
        if cached is not None:
            logger.debug(f"Cache hit for: {key}")
            return cached

        flight = self._in_flight.get(key)
        if flight is None or flight.abandoned or flight.task.done():
            logger.debug(f"Cache miss for: {key}")
            flight = _Flight(task=asyncio.create_task(self._compute_and_store(key, compute)))
            self._in_flight[key] = flight
            flight.task.add_done_callback(functools.partial(self._forget, key, flight))
        else:
            logger.debug(f"Waiting on in-flight computation for: {key}")

        flight.waiters += 1
        try:
            # shield: a cancelled caller must not cancel the Task other callers share
            return await asyncio.shield(flight.task)
        finally:
            flight.waiters -= 1
            if flight.waiters == 0 and not flight.task.done():
                logger.debug(f"Last waiter gone, cancelling computation for: {key}")
                flight.abandoned = True
                flight.task.cancel()

    async def _compute_and_store(self, key: str, compute: Callable[[], Awaitable[PokemonResult]]) -> PokemonResult:
        value = await compute()
        self._store(key, value)
        return value

    def _store(self, key: str, value: PokemonResult) -> None:
        self._entries.pop(key, None)
        if self.max_size is not None:
            while len(self._entries) >= self.max_size:
                oldest_key = next(iter(self._entries))
                del self._entries[oldest_key]
                logger.debug(f"Evicted oldest cache entry: {oldest_key}")
        self._entries[key] = CacheEntry(key=key, value=value, created_at=self._clock())

    def _forget(self, key: str, flight: _Flight, task: asyncio.Task) -> None:
        if self._in_flight.get(key) is flight:
            del self._in_flight[key]
        # Marks the exception as retrieved even if every waiter was cancelled
        if not task.cancelled() and task.exception() is not None:
            logger.debug(f"Computation failed for '{key}', nothing cached: {task.exception()!r}")

    def invalidate(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        """Drop every cached result. In-flight computations are left alone."""
        self._entries.clear()
