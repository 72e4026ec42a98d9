"""Revenue impact of splitting band H into sub-bands with their own rates."""

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from src.models.bands import PercentType, RevenueInputs, TaxMode
from src.models.calibration import CollectionBreakdown, EngineConfig
from src.models.errors import CalibrationError
from .average_value import AverageValueEstimator
from .combined import CombinedEstimator

logger = logging.getLogger(__name__)


def effective_collection_rate(breakdown: CollectionBreakdown) -> float:
    """Weighted average charge multiplier across occupancy categories.

    Not every band H property pays the nominal charge: single occupants get
    a 25% discount, disregarded occupants 50%, while empty and second homes
    pay a 100% premium.

    Raises:
        CalibrationError: Empty breakdown or missing weights.
    """
    breakdown.validate()
    weighted = sum(count * breakdown.weights[name] for name, count in breakdown.counts.items())
    return weighted / breakdown.total


def marginal_tax(
    average_value: float,
    edges: Sequence[float],
    rates: Sequence[float],
    band_index: int,
) -> float:
    """Progressive tax on a property worth `average_value` in band `band_index`.

    Each band's rate applies only to the slice of value that falls inside
    that band, as with marginal income tax.

    Args:
        average_value: Property value.
        edges: Band edges, len(rates) + 1 entries, last may be inf.
        rates: Decimal rate per band (0.005 for 0.5%).
        band_index: Band the property sits in.

    Returns:
        Tax on top of the existing band charge.
    """
    tax = 0.0
    for k in range(band_index):
        width = max(0.0, min(edges[k + 1], average_value) - edges[k])
        tax += rates[k] * width
    tax += rates[band_index] * max(0.0, average_value - edges[band_index])
    return tax


@dataclass
class BandResult:
    """Estimated outcome for one sub-band."""

    index: int
    lower: float
    upper: float  # math.inf for the open top band
    rate: float
    property_count: float
    average_value: Optional[float]  # Only computed in percentage mode
    average_new_tax: float
    average_increase: float
    revenue: float

    @property
    def name(self) -> str:
        return f"H{self.index + 1}"

    @property
    def is_open_ended(self) -> bool:
        return math.isinf(self.upper)


@dataclass
class RevenueResult:
    """Per-band results and the total additional revenue."""

    mode: TaxMode
    percent_type: PercentType
    effective_rate: float
    baseline_band_tax: float
    bands: List[BandResult] = field(default_factory=list)

    @property
    def total_revenue(self) -> float:
        return sum(b.revenue for b in self.bands)

    @property
    def total_properties(self) -> float:
        return sum(b.property_count for b in self.bands)

    def summary(self) -> str:
        """Return a text table of the results."""
        lines = [
            "BAND H RESTRUCTURING",
            "=" * 72,
            f"Mode: {self.mode.value}",
            f"Baseline band H tax: £{self.baseline_band_tax:,.0f}",
            f"Effective collection rate: {self.effective_rate:.4f}",
            "",
            f"{'Band':<6}{'From':>14}{'To':>14}{'Rate':>8}{'Properties':>12}"
            f"{'Avg rise':>10}{'Revenue':>14}",
            "-" * 78,
        ]
        for b in self.bands:
            upper = "-" if b.is_open_ended else f"£{b.upper:,.0f}"
            lines.append(
                f"{b.name:<6}{'£' + format(b.lower, ',.0f'):>14}{upper:>14}{b.rate:>8.2f}"
                f"{b.property_count:>12,.0f}{b.average_increase:>10,.0f}{b.revenue:>14,.0f}"
            )
        lines.append("-" * 78)
        lines.append(f"{'Total additional revenue':<40}£{self.total_revenue:>36,.0f}")
        return "\n".join(lines)


class RevenueModel:
    """Converts band counts and average values into revenue.

    Args:
        config: Engine configuration (band start, band D tax, breakdown).
        counts: Combined property count estimator.
        averages: Average value estimator.
    """

    def __init__(
        self,
        config: EngineConfig,
        counts: CombinedEstimator,
        averages: AverageValueEstimator,
    ):
        self.config = config
        self.counts = counts
        self.averages = averages
        self.effective_rate = effective_collection_rate(config.breakdown)
        if not self.effective_rate > 0:
            raise CalibrationError("Effective collection rate must be positive")

    def compute(self, inputs: RevenueInputs) -> RevenueResult:
        """Compute per-band and total revenue for a band configuration.

        Raises:
            BandConfigurationError: Invalid boundaries, rates or mode.
        """
        config = self.config
        inputs.validate(config.band_h_start, config.slider_max)

        edges = inputs.band_edges(config.band_h_start)
        baseline = config.baseline_band_tax
        decimal_rates = [r / 100 for r in inputs.rates]

        result = RevenueResult(
            mode=inputs.mode,
            percent_type=inputs.percent_type,
            effective_rate=self.effective_rate,
            baseline_band_tax=baseline,
        )

        for i, rate in enumerate(inputs.rates):
            lower, upper = edges[i], edges[i + 1]
            count = self.counts.estimate(lower, upper)
            average_value = None
            new_tax = baseline
            revenue = 0.0
            increase = 0.0

            if count > 0:
                if inputs.mode == TaxMode.MULTIPLIER:
                    new_tax = rate * config.band_d_tax
                else:
                    average_value = self.averages.average_value(lower, upper)
                    new_tax = baseline + marginal_tax(average_value, edges, decimal_rates, i)
                increase = new_tax - baseline
                revenue = count * increase * self.effective_rate

            result.bands.append(BandResult(
                index=i,
                lower=lower,
                upper=upper,
                rate=rate,
                property_count=count,
                average_value=average_value,
                average_new_tax=new_tax,
                average_increase=increase,
                revenue=revenue,
            ))

        logger.debug(
            "Computed %s revenue for boundaries %s: £%.0f",
            inputs.mode.value,
            list(inputs.boundaries),
            result.total_revenue,
        )
        return result
