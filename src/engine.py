"""Band H estimation engine: the entry point for the presentation layer.

Builds the whole estimator chain once from an EngineConfig:

    StockEstimator -> FlowDistribution -> CombinedEstimator
        -> AverageValueEstimator -> RevenueModel

and exposes the operations the UI needs. Interval results are memoized in
an EstimationCache owned by the engine; switching tax mode clears it.
"""

import logging
import math
from typing import Optional, Sequence

from .models.bands import PercentType, RevenueInputs, TaxMode
from .models.calibration import DEFAULT_CONFIG, EngineConfig
from .calculations.average_value import AverageValueEstimator
from .calculations.cache import EstimationCache
from .calculations.combined import CombinedEstimator
from .calculations.flow import build_flow_distribution
from .calculations.revenue import RevenueModel, RevenueResult
from .calculations.stock import StockEstimator

logger = logging.getLogger(__name__)


class BandEngine:
    """Estimates property counts, average values and band revenue.

    Args:
        config: Calibration and global bounds. Defaults to the published
            figures.

    Raises:
        CalibrationError: If the configuration cannot produce a coherent
            distribution.
    """

    def __init__(self, config: EngineConfig = DEFAULT_CONFIG):
        config.validate()
        self.config = config
        self.cache = EstimationCache(precision=config.cache_precision)
        self.mode: Optional[TaxMode] = None

        self.stock = StockEstimator(config.stock, value_cap=config.value_cap)
        stock_total = self.stock.estimate(config.band_h_start, config.value_cap)
        self.flow = build_flow_distribution(
            config.flow,
            total_properties=config.total_properties,
            stock_total=stock_total,
            value_cap=config.value_cap,
        )
        self.counts = CombinedEstimator(
            self.flow,
            self.stock,
            band_start=config.band_h_start,
            value_cap=config.value_cap,
            cache=self.cache,
        )
        self.averages = AverageValueEstimator(
            self.counts.estimate,
            self.counts.clamp,
            slices=config.average_slices,
            cache=self.cache,
        )
        self.revenue = RevenueModel(config, self.counts, self.averages)

        logger.info(
            "Band engine ready: stock total %.0f, flow scaling factor %.4f, "
            "effective collection rate %.4f",
            stock_total,
            self.flow.scaling_factor,
            self.revenue.effective_rate,
        )

    def estimate_count(self, lower: float, upper: float = math.inf) -> float:
        """Estimated number of properties valued in [lower, upper]."""
        return self.counts.estimate(lower, upper)

    def estimate_average_value(self, lower: float, upper: float = math.inf) -> float:
        """Estimated mean value of the properties in [lower, upper]."""
        return self.averages.average_value(lower, upper)

    def compute_band_results(
        self,
        boundaries: Sequence[float],
        rates: Sequence[float],
        mode: TaxMode,
        percent_type: PercentType = PercentType.INSTEAD,
    ) -> RevenueResult:
        """Per-band counts, average tax increase and revenue, plus the total.

        Args:
            boundaries: Three interior boundaries, strictly increasing.
            rates: Four rates, one per band.
            mode: Multiplier or percentage mode.
            percent_type: Percentage variant, carried on the result.

        Raises:
            BandConfigurationError: On invalid boundaries, rates or mode.
        """
        inputs = RevenueInputs(
            boundaries=tuple(boundaries),
            rates=tuple(rates),
            mode=mode,
            percent_type=percent_type,
        )
        return self.revenue.compute(inputs)

    def invalidate_cache(self) -> None:
        """Drop memoized counts and averages. Call after a mode switch."""
        self.cache.invalidate()

    def set_mode(self, mode: TaxMode) -> None:
        """Record a mode change, clearing the cache when the mode differs."""
        if mode != self.mode:
            logger.debug("Tax mode changed from %s to %s", self.mode, mode)
            self.mode = mode
            self.invalidate_cache()

    def baseline_revenue(self) -> float:
        """Revenue currently raised from band H."""
        config = self.config
        return config.total_properties * config.baseline_band_tax * self.revenue.effective_rate
