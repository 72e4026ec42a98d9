"""Combined property count: stamp duty flow plus ATED stock."""

import math
from typing import Optional, Tuple

from .cache import EstimationCache
from .flow import FlowDistribution
from .stock import StockEstimator


class CombinedEstimator:
    """Single source of truth for how many properties fall in a band.

    Args:
        flow: Rescaled stamp duty distribution.
        stock: ATED stock estimator.
        band_start: Band H threshold; lower bounds are raised to it.
        value_cap: Replaces an unbounded upper bound.
        cache: Optional memoization table.
    """

    cache_name = "count"

    def __init__(
        self,
        flow: FlowDistribution,
        stock: StockEstimator,
        band_start: float,
        value_cap: float,
        cache: Optional[EstimationCache] = None,
    ):
        self.flow = flow
        self.stock = stock
        self.band_start = band_start
        self.value_cap = value_cap
        self.cache = cache

    def clamp(self, lower: float, upper: float) -> Tuple[float, float]:
        """Raise lower to the band start and replace an infinite upper by the cap."""
        lower = max(lower, self.band_start)
        upper = upper if math.isfinite(upper) else self.value_cap
        return lower, upper

    def estimate(self, lower: float, upper: float) -> float:
        """Estimated number of properties valued in [lower, upper].

        Empty intervals (upper below lower after clamping) give 0.
        """
        if self.cache is None:
            return self._estimate(lower, upper)
        return self.cache.get_or_compute(
            self.cache_name, lower, upper, lambda: self._estimate(lower, upper)
        )

    def _estimate(self, lower: float, upper: float) -> float:
        lower, upper = self.clamp(lower, upper)
        if upper < lower:
            return 0.0
        flow_count = self.flow.count_below(upper) - self.flow.count_below(lower)
        return flow_count + self.stock.estimate(lower, upper)
