"""Piecewise-linear lookup over ordered sample tables."""

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from src.models.errors import CalibrationError


@dataclass(frozen=True)
class SampleTable:
    """Ordered (x, y) samples with strictly increasing x.

    Built once from calibration constants and never mutated. Querying
    outside the table returns the nearest end value (flat extrapolation).
    """

    xp: np.ndarray
    fp: np.ndarray

    @classmethod
    def from_points(cls, xp: Sequence[float], fp: Sequence[float]) -> "SampleTable":
        """Build a table, validating the samples.

        Raises:
            CalibrationError: Fewer than 2 points, mismatched lengths,
                non-finite values or x not strictly increasing.
        """
        x = np.array(xp, dtype=float)
        y = np.array(fp, dtype=float)
        if x.ndim != 1 or y.ndim != 1 or x.size != y.size:
            raise CalibrationError(
                f"Sample table needs matching 1-D sequences, got {x.shape} and {y.shape}"
            )
        if x.size < 2:
            raise CalibrationError(f"Sample table needs at least 2 points, got {x.size}")
        if not (np.all(np.isfinite(x)) and np.all(np.isfinite(y))):
            raise CalibrationError("Sample table contains non-finite values")
        if np.any(np.diff(x) <= 0):
            raise CalibrationError("Sample table x-values must be strictly increasing")
        x.setflags(write=False)
        y.setflags(write=False)
        return cls(xp=x, fp=y)

    def __call__(self, x: float) -> float:
        # np.interp clamps to fp[0] / fp[-1] outside the table
        return float(np.interp(x, self.xp, self.fp))


def linear_interpolate(x: float, xp: Sequence[float], fp: Sequence[float]) -> float:
    """Interpolate x against the samples (xp, fp).

    Args:
        x: Query point.
        xp: Strictly increasing sample positions (at least 2).
        fp: Sample values, same length as xp.

    Returns:
        fp[0] at or below xp[0], fp[-1] at or above xp[-1], otherwise the
        straight-line value between the bracketing samples.

    Example:
        >>> linear_interpolate(1.5, [1, 2], [10, 20])
        15.0
    """
    return SampleTable.from_points(xp, fp)(x)
