"""Input components for the Streamlit UI."""

from typing import List

import streamlit as st

from src.export.formatting import format_slider_label
from src.models.bands import (
    BAND_COUNT,
    DEFAULT_BOUNDARIES,
    RATE_SLIDER_RANGES,
    PercentType,
    RateState,
    TaxMode,
)
from src.models.calibration import EngineConfig


def render_mode_inputs() -> tuple[TaxMode, PercentType]:
    """Render the tax mode and percentage type selectors.

    Returns:
        Tuple of (mode, percent_type).
    """
    st.sidebar.header("Tax Mode")
    mode = st.sidebar.radio(
        "Mode",
        options=list(TaxMode),
        index=0,
        format_func=lambda m: {
            TaxMode.MULTIPLIER: "Multiplier of Band D",
            TaxMode.PERCENTAGE: "Percentage of value",
        }[m],
        key="mode",
    )

    percent_type = PercentType.INSTEAD
    if mode == TaxMode.PERCENTAGE:
        percent_type = st.sidebar.radio(
            "Percentage applies",
            options=list(PercentType),
            index=0,
            format_func=lambda p: {
                PercentType.INSTEAD: "Instead of the current charge",
                PercentType.ADDITIONAL: "In addition to the current charge",
            }[p],
            key="percent_type",
        )
    return mode, percent_type


def render_boundary_inputs(config: EngineConfig) -> List[float]:
    """Render one slider per interior band boundary.

    Returns:
        Boundaries in slider order. Ordering is validated by the engine.
    """
    st.sidebar.header("Band Boundaries")
    st.sidebar.caption(f"Band H starts at {format_slider_label(config.band_h_start)}")

    boundaries = []
    for i, default in enumerate(DEFAULT_BOUNDARIES):
        value = st.sidebar.slider(
            f"Top of H{i + 1}",
            min_value=int(config.band_h_start),
            max_value=int(config.slider_max),
            value=int(default),
            step=int(config.slider_step),
            format="£%d",
            key=f"boundary_{i}",
        )
        boundaries.append(float(value))
    return boundaries


def render_rate_inputs(mode: TaxMode) -> List[float]:
    """Render one rate slider per band, restoring the last rates for the mode.

    Returns:
        Rates, one per band.
    """
    if "rate_state" not in st.session_state:
        st.session_state["rate_state"] = RateState()
    rate_state: RateState = st.session_state["rate_state"]

    slider_range = RATE_SLIDER_RANGES[mode]
    st.sidebar.header(slider_range.label)

    rates = []
    saved = rate_state.rates_for(mode)
    for i in range(BAND_COUNT):
        value = st.sidebar.slider(
            f"H{i + 1} rate ({slider_range.suffix})",
            min_value=slider_range.min_value,
            max_value=slider_range.max_value,
            value=float(saved[i]),
            step=slider_range.step,
            format="%.1f",
            key=f"rate_{mode.value}_{i}",
        )
        rate_state.set_rate(mode, i, value)
        rates.append(value)
    return rates
