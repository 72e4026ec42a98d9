"""Tests for the interval estimation cache."""

import math
import threading

from src.calculations.cache import EstimationCache


class Counter:
    """Callable that records how often it runs."""

    def __init__(self, value: float = 42.0):
        self.value = value
        self.calls = 0

    def __call__(self) -> float:
        self.calls += 1
        return self.value


class TestEstimationCache:
    """Tests for memoization and invalidation."""

    def test_second_lookup_is_a_hit(self):
        cache = EstimationCache()
        compute = Counter()

        assert cache.get_or_compute("count", 1.0, 2.0, compute) == 42.0
        assert cache.get_or_compute("count", 1.0, 2.0, compute) == 42.0

        assert compute.calls == 1
        assert cache.hits == 1
        assert cache.misses == 1

    def test_keys_are_rounded(self):
        """Bounds equal after rounding share an entry."""
        cache = EstimationCache(precision=2)
        assert cache.key("count", 1.001, 2.0) == cache.key("count", 1.004, 2.0)
        assert cache.key("count", 1.001, 2.0) != cache.key("count", 1.02, 2.0)

    def test_estimator_name_is_part_of_key(self):
        cache = EstimationCache()
        cache.get_or_compute("count", 1.0, 2.0, Counter(1.0))
        assert cache.get_or_compute("average", 1.0, 2.0, Counter(2.0)) == 2.0
        assert len(cache) == 2

    def test_infinite_bounds_are_keyed(self):
        cache = EstimationCache()
        compute = Counter()
        cache.get_or_compute("count", 1.0, math.inf, compute)
        cache.get_or_compute("count", 1.0, math.inf, compute)
        assert compute.calls == 1
        assert ("count", 1.0, math.inf) in cache

    def test_invalidate_clears_everything(self):
        cache = EstimationCache()
        compute = Counter()
        cache.get_or_compute("count", 1.0, 2.0, compute)

        cache.invalidate()

        assert len(cache) == 0
        assert cache.hits == 0
        cache.get_or_compute("count", 1.0, 2.0, compute)
        assert compute.calls == 2

    def test_concurrent_access(self):
        """Many threads reading the same keys see consistent values."""
        cache = EstimationCache()
        results = []

        def worker():
            for i in range(100):
                results.append(cache.get_or_compute("count", float(i), float(i + 1), lambda i=i: i * 2.0))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(cache) == 100
        assert len(results) == 800
        assert cache.get_or_compute("count", 7.0, 8.0, lambda: -1.0) == 14.0
