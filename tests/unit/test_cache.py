"""Tests for the single-flight TTL cache."""

import threading
import time

import pytest

from app.repositories.common import CacheRepository


class TestCacheBasics:
    def test_computes_once(self, clock):
        cache = CacheRepository(clock=clock)
        calls = []

        def compute():
            calls.append(1)
            return {"a": 1}

        assert cache.get("k", 60, compute) == {"a": 1}
        assert cache.get("k", 60, compute) == {"a": 1}
        assert len(calls) == 1
        assert "k" in cache

    def test_expires_after_ttl(self, clock):
        cache = CacheRepository(clock=clock)
        values = iter([1, 2])

        assert cache.get("k", 60, lambda: next(values)) == 1
        clock.now += 59
        assert cache.get("k", 60, lambda: next(values)) == 1
        clock.now += 1
        assert cache.get("k", 60, lambda: next(values)) == 2

    def test_keys_are_independent(self, clock):
        cache = CacheRepository(clock=clock)
        assert cache.get("a", 60, lambda: "A") == "A"
        assert cache.get("b", 60, lambda: "B") == "B"
        assert len(cache) == 2

    def test_zero_ttl_is_not_stored(self, clock):
        cache = CacheRepository(clock=clock)
        cache.get("k", 0, lambda: 1)
        assert "k" not in cache

    def test_invalidate_and_clear(self, clock):
        cache = CacheRepository(clock=clock)
        cache.get("a", 60, lambda: 1)
        cache.get("b", 60, lambda: 2)
        cache.invalidate("a")
        assert "a" not in cache
        assert "b" in cache
        cache.clear()
        assert len(cache) == 0


class TestCacheFailures:
    def test_failure_is_not_cached(self, clock):
        cache = CacheRepository(clock=clock)

        def fail():
            raise RuntimeError("index down")

        with pytest.raises(RuntimeError):
            cache.get("k", 60, fail)
        assert "k" not in cache
        assert cache.get("k", 60, lambda: "ok") == "ok"


class TestSingleFlight:
    def test_concurrent_callers_share_one_computation(self):
        cache = CacheRepository()
        started = threading.Event()
        release = threading.Event()
        calls = []

        def compute():
            calls.append(1)
            started.set()
            release.wait(5)
            return object()

        results = []

        def worker():
            results.append(cache.get("k", 60, compute))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        threads[0].start()
        assert started.wait(5)
        for t in threads[1:]:
            t.start()
        time.sleep(0.05)
        release.set()
        for t in threads:
            t.join(5)

        assert len(calls) == 1
        assert len(results) == 8
        assert all(r is results[0] for r in results)

    def test_waiters_receive_the_failure(self):
        cache = CacheRepository()
        started = threading.Event()
        release = threading.Event()
        errors = []

        def compute():
            started.set()
            release.wait(5)
            raise ValueError("boom")

        def worker():
            try:
                cache.get("k", 60, compute)
            except ValueError as e:
                errors.append(e)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        threads[0].start()
        assert started.wait(5)
        for t in threads[1:]:
            t.start()
        time.sleep(0.05)
        release.set()
        for t in threads:
            t.join(5)

        assert len(errors) == 4
        assert "k" not in cache


class TestExpirySweep:
    def test_expired_entries_are_dropped_on_miss(self, clock):
        cache = CacheRepository(clock=clock)
        for i in range(1000):
            cache.get(f"feed-{i}", 60, lambda: i)
        assert len(cache) == 1000

        clock.now += 10000
        cache.get("new", 60, lambda: "x")

        assert len(cache) == 1

    def test_live_entries_survive_sweep(self, clock):
        cache = CacheRepository(clock=clock)
        cache.get("short", 10, lambda: 1)
        cache.get("long", 100, lambda: 2)
        clock.now += 50
        cache.get("other", 100, lambda: 3)
        assert "short" not in cache
        assert "long" in cache
        assert len(cache) == 2


def _run_blocked(cache, key, value):
    """Start a computation for key in a thread; returns (thread, release event)."""
    started = threading.Event()
    release = threading.Event()
    results = []

    def compute():
        started.set()
        release.wait(5)
        return value

    thread = threading.Thread(target=lambda: results.append(cache.get(key, 60, compute)))
    thread.start()
    assert started.wait(5)
    return thread, release, results


class TestInvalidateWhileComputing:
    def test_running_result_is_not_stored(self):
        cache = CacheRepository()
        thread, release, results = _run_blocked(cache, "k", "stale")

        cache.invalidate("k")
        release.set()
        thread.join(5)

        assert results == ["stale"]
        assert "k" not in cache
        assert cache.get("k", 60, lambda: "fresh") == "fresh"

    def test_new_caller_does_not_join_invalidated_computation(self):
        cache = CacheRepository()
        thread, release, _ = _run_blocked(cache, "k", "stale")

        cache.invalidate("k")
        assert cache.get("k", 60, lambda: "fresh") == "fresh"

        release.set()
        thread.join(5)
        assert cache.get("k", 60, lambda: "other") == "fresh"

    def test_clear_discards_running_result(self):
        cache = CacheRepository()
        thread, release, _ = _run_blocked(cache, "k", "stale")

        cache.clear()
        release.set()
        thread.join(5)

        assert cache.get("k", 60, lambda: "fresh") == "fresh"

    def test_other_keys_still_stored(self):
        cache = CacheRepository()
        thread, release, _ = _run_blocked(cache, "k", "value")

        cache.invalidate("other")
        release.set()
        thread.join(5)

        assert "k" in cache
