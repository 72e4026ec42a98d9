"""Data models for the band H restructuring engine."""

from .errors import CalibrationError, BandConfigurationError
from .calibration import (
    StockCalibration,
    FlowCalibration,
    CollectionBreakdown,
    COLLECTION_WEIGHTS,
    EngineConfig,
    DEFAULT_CONFIG,
)
from .bands import (
    BAND_COUNT,
    TaxMode,
    PercentType,
    RateSliderRange,
    RATE_SLIDER_RANGES,
    DEFAULT_BOUNDARIES,
    DEFAULT_RATES,
    RevenueInputs,
    RateState,
)

__all__ = [
    "CalibrationError",
    "BandConfigurationError",
    "StockCalibration",
    "FlowCalibration",
    "CollectionBreakdown",
    "COLLECTION_WEIGHTS",
    "EngineConfig",
    "DEFAULT_CONFIG",
    "BAND_COUNT",
    "TaxMode",
    "PercentType",
    "RateSliderRange",
    "RATE_SLIDER_RANGES",
    "DEFAULT_BOUNDARIES",
    "DEFAULT_RATES",
    "RevenueInputs",
    "RateState",
]
