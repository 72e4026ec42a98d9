"""Flow model of owner-occupied high-value sales (stamp duty returns).

The stamp duty tables report how many sales fell below a few reference
prices. Those counts are rescaled so that, together with the ATED stock,
they add up to the known total of properties over the band H threshold.
The bulk of the range is interpolated in log-log space; above the seam
price (10m) a truncated Pareto tail spreads the remaining count up to the
value cap.
"""

import logging
import math
from dataclasses import dataclass

from src.models.calibration import FlowCalibration
from src.models.errors import CalibrationError
from .interpolation import SampleTable

logger = logging.getLogger(__name__)

MILLION = 1_000_000


@dataclass(frozen=True)
class FlowDistribution:
    """Cumulative count of sales below a price.

    Immutable once built; create with build_flow_distribution().

    Attributes:
        scaling_factor: Shrink applied to the source counts.
        scaled_counts: Source cumulative counts after rescaling.
        scaled_tail_total: Count above the seam price after rescaling.
        seam_price_m: Seam price in millions.
        max_price_m: Value cap in millions.
        alpha: Pareto tail exponent.
    """

    scaling_factor: float
    scaled_counts: tuple
    scaled_tail_total: float
    seam_price_m: float
    max_price_m: float
    alpha: float
    log_table: SampleTable
    tail_denominator: float

    @property
    def scaled_total(self) -> float:
        """Count below the value cap."""
        return self.scaled_counts[-1] + self.scaled_tail_total

    def count_below(self, price: float) -> float:
        """Number of sales below `price` (capped at the value cap)."""
        price_m = min(price, self.max_price_m * MILLION) / MILLION
        if price_m <= self.seam_price_m:
            if price_m <= 0:
                return 0.0
            return math.expm1(self.log_table(math.log(price_m)))

        numerator = self.seam_price_m ** -self.alpha - price_m ** -self.alpha
        return self.scaled_counts[-1] + self.scaled_tail_total * (numerator / self.tail_denominator)


def build_flow_distribution(
    calibration: FlowCalibration,
    total_properties: float,
    stock_total: float,
    value_cap: float,
) -> FlowDistribution:
    """Build the flow distribution once for a calibration set.

    The source total overlaps the ATED stock, so the flow counts are shrunk
    by (total_properties - stock_total) / baseline_total to avoid counting
    enveloped dwellings twice.

    Args:
        calibration: Stamp duty table and tail parameters.
        total_properties: All properties over the band H threshold.
        stock_total: Stock model count over its full domain.
        value_cap: Highest modeled property value.

    Returns:
        FlowDistribution ready for count_below() queries.

    Raises:
        CalibrationError: Non-positive scaling factor or degenerate tail.
    """
    calibration.validate()

    adjusted_total = total_properties - stock_total
    scaling_factor = adjusted_total / calibration.baseline_total
    if not scaling_factor > 0:
        raise CalibrationError(
            f"Flow scaling factor is {scaling_factor:.4f}: stock total {stock_total:,.0f} "
            f"leaves no room within {total_properties:,.0f} properties"
        )

    source_total = calibration.cumulative_counts[-1] + calibration.count_over_seam
    if not math.isclose(source_total, calibration.baseline_total, rel_tol=1e-9):
        logger.warning(
            "Flow table total %.1f differs from baseline total %.1f",
            source_total,
            calibration.baseline_total,
        )

    scaled_counts = tuple(c * scaling_factor for c in calibration.cumulative_counts)
    scaled_tail_total = calibration.count_over_seam * scaling_factor

    log_prices = [math.log(p) for p in calibration.prices_m]
    log_counts = [math.log1p(c) for c in scaled_counts]
    log_table = SampleTable.from_points(log_prices, log_counts)

    max_price_m = value_cap / MILLION
    alpha = calibration.pareto_alpha
    denominator = calibration.seam_price_m ** -alpha - max_price_m ** -alpha
    if not denominator > 0:
        raise CalibrationError(
            f"Pareto tail denominator is {denominator!r}; value cap must exceed the seam price"
        )

    logger.debug(
        "Built flow distribution: scaling factor %.4f, scaled total %.1f",
        scaling_factor,
        scaled_counts[-1] + scaled_tail_total,
    )

    return FlowDistribution(
        scaling_factor=scaling_factor,
        scaled_counts=scaled_counts,
        scaled_tail_total=scaled_tail_total,
        seam_price_m=calibration.seam_price_m,
        max_price_m=max_price_m,
        alpha=alpha,
        log_table=log_table,
        tail_denominator=denominator,
    )
