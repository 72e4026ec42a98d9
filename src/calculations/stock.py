"""Stock model of properties held in companies and trusts (ATED returns).

ATED returns give the standing count of enveloped dwellings above a handful
of valuation thresholds. Between thresholds the cumulative count is
interpolated linearly; above the top threshold a Pareto tail
N * (threshold / v) ** alpha extrapolates to the value cap.
"""

import logging

from src.models.calibration import StockCalibration
from .interpolation import SampleTable

logger = logging.getLogger(__name__)


class StockEstimator:
    """Count of enveloped dwellings valued within an interval."""

    def __init__(self, calibration: StockCalibration, value_cap: float):
        calibration.validate()
        self.calibration = calibration
        self.value_cap = value_cap
        self._table = SampleTable.from_points(calibration.values, calibration.cumulative_counts)
        if self._table(calibration.pareto_threshold) != calibration.pareto_count:
            logger.warning(
                "Stock table gives %.1f at the Pareto threshold but the tail starts at %.1f",
                self._table(calibration.pareto_threshold),
                calibration.pareto_count,
            )

    def cumulative_above(self, value: float) -> float:
        """Number of properties valued above `value` (capped at the value cap)."""
        cal = self.calibration
        capped = min(value, self.value_cap)
        if capped <= cal.pareto_threshold:
            return self._table(capped)
        return cal.pareto_count * (cal.pareto_threshold / capped) ** cal.pareto_alpha

    def estimate(self, lower: float, upper: float) -> float:
        """Estimate properties valued in [lower, upper].

        Args:
            lower: Lower bound; raised to the minimum modeled value.
            upper: Upper bound; may be math.inf.

        Returns:
            Non-negative property count. Zero for intervals entirely below
            the minimum modeled value or empty after clamping.
        """
        min_value = self.calibration.min_value
        if upper < min_value:
            return 0.0
        lower = max(lower, min_value)
        if upper < lower:
            return 0.0

        count = self.cumulative_above(lower) - self.cumulative_above(upper)
        return max(count, 0.0)

    def total(self) -> float:
        """Count over the full modeled domain, minimum value to value cap."""
        return self.estimate(self.calibration.min_value, self.value_cap)
