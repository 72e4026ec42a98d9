"""Calibration constants for the high-value property count models.

The defaults are the published figures the calculator was built from:
- ATED returns (enveloped dwellings held by companies and trusts)
- Stamp duty land tax returns for residential sales over £1.5m
- Council tax base statistics for the band H occupancy breakdown
"""

import math
from dataclasses import dataclass, field
from typing import Dict, Tuple

from .errors import CalibrationError


def _check_increasing(name: str, values: Tuple[float, ...]) -> None:
    if len(values) < 2:
        raise CalibrationError(f"{name} needs at least 2 points, got {len(values)}")
    for a, b in zip(values, values[1:]):
        if not b > a:
            raise CalibrationError(f"{name} must be strictly increasing: {a} then {b}")


@dataclass(frozen=True)
class StockCalibration:
    """ATED-style stock of properties held in corporate or trust structures.

    Attributes:
        values: Reference property values, ascending.
        cumulative_counts: Count of properties valued above each reference value.
        min_value: Below this value the stock model reports nothing.
        pareto_threshold: Above this value the Pareto tail takes over.
        pareto_count: Count above the threshold (tail scale).
        pareto_alpha: Tail shape exponent.
    """

    values: Tuple[float, ...] = (1_000_000, 2_000_000, 5_000_000, 10_000_000, 20_000_000)
    cumulative_counts: Tuple[float, ...] = (3230, 1740, 680, 270, 120)
    min_value: float = 1_500_000
    pareto_threshold: float = 20_000_000
    pareto_count: float = 120
    pareto_alpha: float = 1.176

    def validate(self) -> None:
        """Raise CalibrationError if the table or tail is unusable."""
        _check_increasing("Stock values", self.values)
        if len(self.cumulative_counts) != len(self.values):
            raise CalibrationError("Stock values and cumulative counts differ in length")
        for a, b in zip(self.cumulative_counts, self.cumulative_counts[1:]):
            if b > a:
                raise CalibrationError("Stock counts above value must not increase with value")
        if any(c < 0 for c in self.cumulative_counts):
            raise CalibrationError("Stock cumulative counts must be non-negative")
        if self.pareto_alpha <= 0 or self.pareto_threshold <= 0 or self.pareto_count < 0:
            raise CalibrationError("Stock Pareto parameters must be positive")


@dataclass(frozen=True)
class FlowCalibration:
    """Stamp duty return flow of owner-occupied sales.

    Attributes:
        baseline_total: Count over the band H threshold in the source table.
        prices_m: Reference prices in £ millions, ascending.
        cumulative_counts: Count of sales below each reference price.
        count_over_seam: Count above the seam price in the source table.
        seam_price_m: Price (£m) where the Pareto tail replaces interpolation.
        pareto_alpha: Tail shape exponent.
    """

    baseline_total: float = 10_600.0
    prices_m: Tuple[float, ...] = (1.5, 2.0, 3.0, 4.0, 5.0, 10.0)
    cumulative_counts: Tuple[float, ...] = (0, 5100, 8200, 9200, 9600, 10300)
    count_over_seam: float = 300.0
    seam_price_m: float = 10.0
    pareto_alpha: float = 1.736966

    def validate(self) -> None:
        """Raise CalibrationError if the table or tail is unusable."""
        _check_increasing("Flow prices", self.prices_m)
        if len(self.cumulative_counts) != len(self.prices_m):
            raise CalibrationError("Flow prices and cumulative counts differ in length")
        if self.prices_m[0] <= 0:
            raise CalibrationError("Flow prices must be positive to take logarithms")
        for a, b in zip(self.cumulative_counts, self.cumulative_counts[1:]):
            if b < a:
                raise CalibrationError("Flow counts below price must not decrease with price")
        if self.cumulative_counts[0] < 0 or self.count_over_seam < 0:
            raise CalibrationError("Flow counts must be non-negative")
        if self.baseline_total <= 0:
            raise CalibrationError("Flow baseline total must be positive")
        if self.pareto_alpha <= 0:
            raise CalibrationError("Flow Pareto alpha must be positive")
        if not math.isclose(self.seam_price_m, self.prices_m[-1]):
            raise CalibrationError(
                f"Seam price {self.seam_price_m}m must be the last table price {self.prices_m[-1]}m"
            )


# Occupancy category -> multiplier applied to the nominal charge
COLLECTION_WEIGHTS: Dict[str, float] = {
    "standard": 1.0,
    "single": 0.75,  # Single person discount
    "disregarded": 0.5,  # All occupants disregarded
    "empty": 2.0,  # Long-term empty premium
    "second": 2.0,  # Second home premium
}


@dataclass(frozen=True)
class CollectionBreakdown:
    """Band H properties by occupancy category, with charge weights."""

    counts: Dict[str, float] = field(default_factory=lambda: {
        "standard": 125_000,
        "single": 16_000,
        "disregarded": 2_000,
        "empty": 2_000,
        "second": 5_000,
    })
    weights: Dict[str, float] = field(default_factory=lambda: dict(COLLECTION_WEIGHTS))

    @property
    def total(self) -> float:
        return sum(self.counts.values())

    def validate(self) -> None:
        """Raise CalibrationError if the effective rate cannot be derived."""
        missing = set(self.counts) - set(self.weights)
        if missing:
            raise CalibrationError(f"No collection weight for categories: {sorted(missing)}")
        if any(c < 0 for c in self.counts.values()):
            raise CalibrationError("Breakdown counts must be non-negative")
        if self.total <= 0:
            raise CalibrationError("Breakdown total is zero; effective collection rate undefined")


@dataclass(frozen=True)
class EngineConfig:
    """Complete configuration for the band estimation engine."""

    band_d_tax: float = 2_280  # Average band D charge
    band_h_multiplier: float = 2.0  # Band H pays 2x band D
    band_h_start: float = 1_500_000
    total_properties: float = 154_000  # All properties over 1.5m
    value_cap: float = 210_000_000  # No data beyond this value
    slider_max: float = 20_000_000
    slider_step: float = 250_000

    stock: StockCalibration = field(default_factory=StockCalibration)
    flow: FlowCalibration = field(default_factory=FlowCalibration)
    breakdown: CollectionBreakdown = field(default_factory=CollectionBreakdown)

    average_slices: int = 100
    cache_precision: int = 2  # Decimal places of interval bounds in cache keys

    @property
    def baseline_band_tax(self) -> float:
        """Average tax currently paid in the band being restructured."""
        return self.band_h_multiplier * self.band_d_tax

    def validate(self) -> None:
        """Validate every calibration record and the global bounds."""
        if self.band_h_start <= 0:
            raise CalibrationError("Band H start must be positive")
        if not self.band_h_start < self.slider_max <= self.value_cap:
            raise CalibrationError(
                "Expected band_h_start < slider_max <= value_cap, got "
                f"{self.band_h_start}, {self.slider_max}, {self.value_cap}"
            )
        if self.total_properties <= 0:
            raise CalibrationError("Total properties must be positive")
        if self.average_slices < 1:
            raise CalibrationError("Average value needs at least one slice")
        if self.value_cap / 1_000_000 <= self.flow.seam_price_m:
            raise CalibrationError("Value cap must lie above the flow seam price")
        self.stock.validate()
        self.flow.validate()
        self.breakdown.validate()


DEFAULT_CONFIG = EngineConfig()
