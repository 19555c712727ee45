"""Cache repository - in-process TTL cache with single-flight lookups."""

import threading
import time
from collections.abc import Callable
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Any, TypeVar

from loguru import logger

T = TypeVar("T")


@dataclass
class _Entry:
    value: Any
    expires_at: float


class CacheRepository:
    """Key-value cache where each key is computed at most once at a time.

    Concurrent callers asking for a key that is being computed wait for the
    in-flight computation and receive its value, or its exception. Failed
    computations are never stored, and neither are results of computations
    that were invalidated while running. Expired entries are swept on every
    miss.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: dict[str, _Entry] = {}
        self._inflight: dict[str, Future] = {}
        # Bumped by invalidate()/clear(); a result is stored only if unchanged since compute began
        self._generations: dict[str, int] = {}
        self._epoch = 0
        logger.debug("{} initialized", self.__class__.__name__)

    def _generation(self, key: str) -> tuple[int, int]:
        return self._epoch, self._generations.get(key, 0)

    def _sweep(self, now: float) -> None:
        expired = [k for k, e in self._entries.items() if e.expires_at <= now]
        for k in expired:
            del self._entries[k]
        if expired:
            logger.debug("Cache swept {} expired entries", len(expired))

    def get(self, key: str, ttl: int, compute_fn: Callable[[], T]) -> T:
        """Return the cached value for key, computing it with compute_fn on a miss."""
        with self._lock:
            now = self._clock()
            entry = self._entries.get(key)
            if entry is not None and entry.expires_at > now:
                logger.debug("Cache hit: {}", key)
                return entry.value
            self._sweep(now)

            future = self._inflight.get(key)
            owner = future is None
            if owner:
                future = Future()
                self._inflight[key] = future
                generation = self._generation(key)

        if not owner:
            logger.debug("Cache wait: {}", key)
            return future.result()

        logger.debug("Cache miss: {}", key)
        try:
            value = compute_fn()
        except BaseException as e:
            with self._lock:
                self._release(key, future)
            future.set_exception(e)
            raise

        with self._lock:
            if ttl > 0 and self._generation(key) == generation:
                self._entries[key] = _Entry(value, self._clock() + ttl)
            elif ttl > 0:
                logger.debug("Cache result discarded, invalidated while computing: {}", key)
            self._release(key, future)
        future.set_result(value)
        return value

    def _release(self, key: str, future: Future) -> None:
        if self._inflight.get(key) is future:
            del self._inflight[key]

    def invalidate(self, key: str) -> None:
        """Drop a single key. A computation running for it will not be stored."""
        with self._lock:
            self._entries.pop(key, None)
            self._inflight.pop(key, None)
            self._generations[key] = self._generations.get(key, 0) + 1
        logger.debug("Cache invalidated: {}", key)

    def clear(self) -> None:
        """Drop all entries. Running computations complete but are not stored."""
        with self._lock:
            self._entries.clear()
            self._inflight.clear()
            self._generations.clear()
            self._epoch += 1
        logger.info("All cache cleared")

    def __contains__(self, key: str) -> bool:
        with self._lock:
            entry = self._entries.get(key)
            return entry is not None and entry.expires_at > self._clock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
