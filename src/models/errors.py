"""Exceptions raised by the band estimation engine."""


class CalibrationError(ValueError):
    """Calibration data cannot produce a valid model.

    Raised at construction time. Indicates a mismatch in the supplied
    statistics rather than a transient condition, so callers should abort
    initialization instead of retrying.
    """


class BandConfigurationError(ValueError):
    """Band boundaries, rates or mode rejected before computation."""
