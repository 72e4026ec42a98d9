"""Tests for the band engine facade."""

import math
from dataclasses import replace

import pytest

from src.engine import BandEngine
from src.models.bands import TaxMode
from src.models.calibration import DEFAULT_CONFIG, FlowCalibration
from src.models.errors import CalibrationError
from tests.fixtures.calibration_inputs import (
    BASELINE_BAND_TAX,
    EFFECTIVE_RATE,
    FLOW_SCALING_FACTOR,
    get_empty_breakdown_config,
    get_overlapping_stock_config,
)


class TestBandEngineConstruction:
    """Tests for building the estimator chain."""

    def test_default_engine(self, shared_engine):
        assert shared_engine.flow.scaling_factor == pytest.approx(FLOW_SCALING_FACTOR)
        assert shared_engine.revenue.effective_rate == pytest.approx(EFFECTIVE_RATE)

    def test_overlapping_stock_is_fatal(self):
        with pytest.raises(CalibrationError):
            BandEngine(get_overlapping_stock_config())

    def test_empty_breakdown_is_fatal(self):
        with pytest.raises(CalibrationError):
            BandEngine(get_empty_breakdown_config())

    def test_inconsistent_bounds_are_fatal(self):
        with pytest.raises(CalibrationError):
            BandEngine(replace(DEFAULT_CONFIG, slider_max=300_000_000))

    def test_mismatched_seam_is_fatal(self):
        with pytest.raises(CalibrationError):
            BandEngine(replace(DEFAULT_CONFIG, flow=FlowCalibration(seam_price_m=8.0)))

    def test_inconsistent_flow_table_logs_warning(self, caplog):
        flow = FlowCalibration(count_over_seam=500.0)
        with caplog.at_level("WARNING", logger="src.calculations.flow"):
            BandEngine(replace(DEFAULT_CONFIG, flow=flow))
        assert "differs from baseline total" in caplog.text


class TestBandEngineOperations:
    """Tests for the operations used by the presentation layer."""

    def test_estimate_count_defaults_to_open_top(self, shared_engine):
        assert shared_engine.estimate_count(10_000_000) == pytest.approx(
            shared_engine.estimate_count(10_000_000, math.inf)
        )

    def test_estimate_count_full_band(self, shared_engine):
        assert shared_engine.estimate_count(0) == pytest.approx(154_000)

    def test_estimate_average_value(self, shared_engine):
        avg = shared_engine.estimate_average_value(5_000_000, 10_000_000)
        assert 5_000_000 < avg < 7_500_000

    def test_baseline_revenue(self, shared_engine):
        expected = 154_000 * BASELINE_BAND_TAX * EFFECTIVE_RATE
        assert shared_engine.baseline_revenue() == pytest.approx(expected)

    def test_compute_band_results_returns_four_bands(self, shared_engine):
        result = shared_engine.compute_band_results(
            (3_000_000, 5_000_000, 10_000_000), (2, 3, 4, 5), TaxMode.MULTIPLIER
        )
        assert len(result.bands) == 4
        assert result.total_revenue == pytest.approx(sum(b.revenue for b in result.bands))
        assert result.total_revenue > 0


class TestBandEngineCache:
    """Tests for cache ownership and invalidation."""

    def test_invalidate_cache(self, engine):
        engine.estimate_count(3_000_000, 5_000_000)
        assert len(engine.cache) > 0

        engine.invalidate_cache()

        assert len(engine.cache) == 0

    def test_mode_switch_clears_cache(self, engine):
        engine.set_mode(TaxMode.MULTIPLIER)
        engine.estimate_average_value(3_000_000, 5_000_000)
        assert len(engine.cache) > 0

        engine.set_mode(TaxMode.PERCENTAGE)

        assert len(engine.cache) == 0
        assert engine.mode == TaxMode.PERCENTAGE

    def test_same_mode_keeps_cache(self, engine):
        engine.set_mode(TaxMode.PERCENTAGE)
        engine.estimate_count(3_000_000, 5_000_000)
        size = len(engine.cache)

        engine.set_mode(TaxMode.PERCENTAGE)

        assert len(engine.cache) == size

    def test_flow_distribution_survives_invalidation(self, engine):
        flow = engine.flow
        engine.invalidate_cache()
        assert engine.flow is flow

    def test_results_unchanged_after_invalidation(self, engine):
        before = engine.estimate_average_value(3_000_000, 5_000_000)
        engine.invalidate_cache()
        assert engine.estimate_average_value(3_000_000, 5_000_000) == before
