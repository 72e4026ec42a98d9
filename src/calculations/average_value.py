"""Average property value within a band by numerical integration."""

from typing import Callable, Optional, Tuple

import numpy as np

from .cache import EstimationCache

DEFAULT_SLICES = 100


class AverageValueEstimator:
    """Mean value of the properties in an interval.

    Splits the interval into equal-width slices and weights each slice
    midpoint by its estimated count:

        avg = sum(count(slice) * midpoint(slice)) / count(interval)

    Args:
        count: Interval count function, e.g. CombinedEstimator.estimate.
        clamp: Maps raw bounds onto the modeled domain.
        slices: Number of integration slices.
        cache: Optional memoization table.
    """

    cache_name = "average"

    def __init__(
        self,
        count: Callable[[float, float], float],
        clamp: Callable[[float, float], Tuple[float, float]],
        slices: int = DEFAULT_SLICES,
        cache: Optional[EstimationCache] = None,
    ):
        if slices < 1:
            raise ValueError("Average value needs at least one slice")
        self.count = count
        self.clamp = clamp
        self.slices = slices
        self.cache = cache

    def average_value(self, lower: float, upper: float) -> float:
        """Estimated mean property value in [lower, upper].

        Falls back to the interval midpoint when fewer than one property
        is expected in the band.
        """
        if self.cache is None:
            return self._average_value(lower, upper)
        return self.cache.get_or_compute(
            self.cache_name, lower, upper, lambda: self._average_value(lower, upper)
        )

    def _average_value(self, lower: float, upper: float) -> float:
        lower, upper = self.clamp(lower, upper)
        total = self.count(lower, upper)
        if total < 1:
            return (lower + upper) / 2

        edges = np.linspace(lower, upper, self.slices + 1)
        total_value = 0.0
        for slice_low, slice_high in zip(edges[:-1], edges[1:]):
            midpoint = (slice_low + slice_high) / 2
            total_value += self.count(float(slice_low), float(slice_high)) * midpoint
        return total_value / total
