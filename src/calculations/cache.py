"""Memoization of interval estimates.

Counts and average values are pure functions of the interval and the
calibration, so they are cached under (estimator name, rounded lower,
rounded upper). The owner calls invalidate() whenever the configuration
that feeds downstream tax math changes.
"""

import logging
import math
import threading
from typing import Callable, Dict, Hashable, Tuple

logger = logging.getLogger(__name__)

CacheKey = Tuple[str, float, float]


class EstimationCache:
    """Thread-safe dict of interval results with explicit invalidation."""

    def __init__(self, precision: int = 2):
        self.precision = precision
        self._values: Dict[Hashable, float] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def key(self, name: str, lower: float, upper: float) -> CacheKey:
        """Deterministic key for an estimator and interval."""
        return (name, self._round(lower), self._round(upper))

    def _round(self, bound: float) -> float:
        return bound if math.isinf(bound) else round(bound, self.precision)

    def get_or_compute(
        self,
        name: str,
        lower: float,
        upper: float,
        compute: Callable[[], float],
    ) -> float:
        """Return the cached value, computing and storing it on a miss.

        The computation runs outside the lock; concurrent misses for the
        same key may both compute, and both write the same value.
        """
        key = self.key(name, lower, upper)
        with self._lock:
            if key in self._values:
                self.hits += 1
                return self._values[key]
            self.misses += 1

        value = compute()
        with self._lock:
            self._values[key] = value
        return value

    def invalidate(self) -> None:
        """Drop every cached value."""
        with self._lock:
            size = len(self._values)
            self._values.clear()
            self.hits = 0
            self.misses = 0
        logger.debug("Estimation cache invalidated (%d entries dropped)", size)

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._values
