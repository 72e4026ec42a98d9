"""Tests for the piecewise-linear sample table."""

import pytest

from src.calculations.interpolation import SampleTable, linear_interpolate
from src.models.errors import CalibrationError


XP = [1_000_000, 2_000_000, 5_000_000, 10_000_000, 20_000_000]
FP = [3230, 1740, 680, 270, 120]


class TestLinearInterpolate:
    """Tests for lookups inside and outside the table."""

    def test_endpoints_return_table_values(self):
        """Querying the first and last x gives the first and last y."""
        assert linear_interpolate(XP[0], XP, FP) == FP[0]
        assert linear_interpolate(XP[-1], XP, FP) == FP[-1]

    def test_flat_extrapolation(self):
        """Queries beyond either end return the boundary value."""
        assert linear_interpolate(0, XP, FP) == FP[0]
        assert linear_interpolate(-5, XP, FP) == FP[0]
        assert linear_interpolate(500_000_000, XP, FP) == FP[-1]

    def test_interior_points_are_exact(self):
        """Every sample point maps to its own value."""
        for x, y in zip(XP, FP):
            assert linear_interpolate(x, XP, FP) == pytest.approx(y)

    def test_midpoint_is_linear(self):
        """Halfway between two samples gives the mean of their values."""
        assert linear_interpolate(1_500_000, XP, FP) == pytest.approx(2485)
        assert linear_interpolate(1.5, [1, 2], [10, 20]) == pytest.approx(15.0)

    def test_values_lie_between_bracketing_samples(self):
        """Interpolated values never leave the bracketing y range."""
        for i in range(len(XP) - 1):
            for frac in (0.1, 0.37, 0.5, 0.9):
                x = XP[i] + frac * (XP[i + 1] - XP[i])
                y = linear_interpolate(x, XP, FP)
                lo, hi = sorted((FP[i], FP[i + 1]))
                assert lo <= y <= hi


class TestSampleTable:
    """Tests for table construction and validation."""

    def test_table_is_callable(self):
        table = SampleTable.from_points([0, 10], [0, 100])
        assert table(2.5) == pytest.approx(25.0)

    def test_table_arrays_are_read_only(self):
        table = SampleTable.from_points([0, 10], [0, 100])
        with pytest.raises(ValueError):
            table.xp[0] = 5

    def test_single_point_rejected(self):
        with pytest.raises(CalibrationError):
            SampleTable.from_points([1.0], [2.0])

    def test_non_increasing_x_rejected(self):
        with pytest.raises(CalibrationError):
            SampleTable.from_points([1, 3, 2], [0, 1, 2])

    def test_repeated_x_rejected(self):
        with pytest.raises(CalibrationError):
            SampleTable.from_points([1, 2, 2], [0, 1, 2])

    def test_mismatched_lengths_rejected(self):
        with pytest.raises(CalibrationError):
            SampleTable.from_points([1, 2, 3], [0, 1])

    def test_non_finite_rejected(self):
        with pytest.raises(CalibrationError):
            SampleTable.from_points([1, 2, float("nan")], [0, 1, 2])

    def test_calibration_error_is_value_error(self):
        """Callers catching ValueError also see calibration failures."""
        with pytest.raises(ValueError):
            linear_interpolate(1.0, [1.0], [1.0])
