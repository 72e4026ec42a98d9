"""Band restructuring inputs: boundaries, rates and tax mode."""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple

from .errors import BandConfigurationError

BAND_COUNT = 4


class TaxMode(Enum):
    """How per-band rates are turned into a tax bill."""

    MULTIPLIER = "multiplier"  # Rate x band D charge
    PERCENTAGE = "percentage"  # Marginal % of value within each band


class PercentType(Enum):
    """Percentage variant selected in the UI.

    Stored on the inputs but does not change the marginal computation.
    """

    INSTEAD = "instead"  # Percentage replaces the band H charge
    ADDITIONAL = "additional"  # Percentage on top of the band H charge


@dataclass(frozen=True)
class RateSliderRange:
    """Allowed rate range for a mode."""

    min_value: float
    max_value: float
    step: float
    suffix: str
    label: str


RATE_SLIDER_RANGES: Dict[TaxMode, RateSliderRange] = {
    TaxMode.MULTIPLIER: RateSliderRange(2.0, 12.0, 0.1, "x", "Multiplier (vs Band D)"),
    TaxMode.PERCENTAGE: RateSliderRange(0.0, 5.0, 0.1, "%", "Tax Rate (%)"),
}

DEFAULT_BOUNDARIES: Tuple[float, float, float] = (3_000_000, 5_000_000, 10_000_000)

DEFAULT_RATES: Dict[TaxMode, Tuple[float, ...]] = {
    TaxMode.MULTIPLIER: (2.0, 2.0, 2.0, 2.0),
    TaxMode.PERCENTAGE: (0.0, 0.5, 0.5, 0.5),
}


@dataclass
class RevenueInputs:
    """Everything the revenue model needs besides calibration.

    Attributes:
        boundaries: Interior band boundaries, strictly increasing.
        rates: One rate per band. Multipliers in multiplier mode,
            percentages (0.5 = 0.5%) in percentage mode.
        mode: Tax mode.
        percent_type: Percentage variant; informational only.
    """

    boundaries: Tuple[float, ...] = DEFAULT_BOUNDARIES
    rates: Tuple[float, ...] = DEFAULT_RATES[TaxMode.MULTIPLIER]
    mode: TaxMode = TaxMode.MULTIPLIER
    percent_type: PercentType = PercentType.INSTEAD

    def validate(self, band_start: float, band_max: float) -> None:
        """Reject malformed configurations.

        Args:
            band_start: Lowest permitted boundary (band H threshold).
            band_max: Highest permitted boundary (slider maximum).

        Raises:
            BandConfigurationError: On any invalid field.
        """
        if not isinstance(self.mode, TaxMode):
            raise BandConfigurationError(f"Unknown tax mode: {self.mode!r}")
        if len(self.boundaries) != BAND_COUNT - 1:
            raise BandConfigurationError(
                f"Expected {BAND_COUNT - 1} boundaries, got {len(self.boundaries)}"
            )
        if len(self.rates) != BAND_COUNT:
            raise BandConfigurationError(f"Expected {BAND_COUNT} rates, got {len(self.rates)}")

        for b in self.boundaries:
            if not math.isfinite(b):
                raise BandConfigurationError(f"Boundary must be finite, got {b}")
            if b < band_start or b > band_max:
                raise BandConfigurationError(
                    f"Boundary {b:,.0f} outside [{band_start:,.0f}, {band_max:,.0f}]"
                )
        for lo, hi in zip(self.boundaries, self.boundaries[1:]):
            if not hi > lo:
                raise BandConfigurationError(
                    f"Boundaries must be strictly increasing: {lo:,.0f} then {hi:,.0f}"
                )

        for i, rate in enumerate(self.rates):
            if not math.isfinite(rate):
                raise BandConfigurationError(f"Rate for band {i + 1} must be finite, got {rate}")
            if rate < 0:
                raise BandConfigurationError(f"Rate for band {i + 1} is negative: {rate}")

    def band_edges(self, band_start: float) -> List[float]:
        """Full list of edges including the fixed start and an open top."""
        return [band_start, *self.boundaries, math.inf]


@dataclass
class RateState:
    """Last rates chosen for each mode, restored when switching back."""

    saved: Dict[TaxMode, List[float]] = field(
        default_factory=lambda: {mode: list(rates) for mode, rates in DEFAULT_RATES.items()}
    )

    def rates_for(self, mode: TaxMode) -> List[float]:
        return list(self.saved[mode])

    def set_rate(self, mode: TaxMode, band_index: int, value: float) -> None:
        self.saved[mode][band_index] = value
