"""Calculation modules for the band H estimation engine."""

from .interpolation import SampleTable, linear_interpolate
from .stock import StockEstimator
from .flow import FlowDistribution, build_flow_distribution
from .cache import EstimationCache
from .combined import CombinedEstimator
from .average_value import AverageValueEstimator, DEFAULT_SLICES
from .revenue import (
    effective_collection_rate,
    marginal_tax,
    BandResult,
    RevenueResult,
    RevenueModel,
)

__all__ = [
    "SampleTable",
    "linear_interpolate",
    "StockEstimator",
    "FlowDistribution",
    "build_flow_distribution",
    "EstimationCache",
    "CombinedEstimator",
    "AverageValueEstimator",
    "DEFAULT_SLICES",
    "effective_collection_rate",
    "marginal_tax",
    "BandResult",
    "RevenueResult",
    "RevenueModel",
]
