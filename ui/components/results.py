"""Results display components for the Streamlit UI."""

import pandas as pd
import streamlit as st

from src.calculations.revenue import RevenueResult
from src.export.formatting import format_band_range, format_currency, format_millions
from src.models.bands import TaxMode


def render_results_table(result: RevenueResult) -> None:
    """Render the per-band results table.

    Args:
        result: Revenue result from the engine.
    """
    suffix = "x" if result.mode == TaxMode.MULTIPLIER else "%"
    data = {
        "Band": [b.name for b in result.bands],
        "Range": [format_band_range(b.lower, b.upper) for b in result.bands],
        "Rate": [f"{b.rate:.1f}{suffix}" for b in result.bands],
        "Properties": [f"{round(b.property_count):,}" for b in result.bands],
        "Avg. Tax Increase": [format_currency(b.average_increase) for b in result.bands],
        "Additional Revenue": [format_millions(b.revenue) for b in result.bands],
    }

    df = pd.DataFrame(data)
    st.dataframe(df, use_container_width=True, hide_index=True)


def render_revenue_callout(result: RevenueResult, baseline_revenue: float) -> None:
    """Render the total additional revenue.

    Args:
        result: Revenue result from the engine.
        baseline_revenue: Revenue currently raised from band H.
    """
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Additional Revenue", format_millions(result.total_revenue))
    with col2:
        st.metric("Current Band H Revenue", format_millions(baseline_revenue))
    with col3:
        st.metric("Properties over £1.5m", f"{round(result.total_properties):,}")


def render_band_details(result: RevenueResult) -> None:
    """Render an expander per band with the figures behind its row."""
    suffix = "x" if result.mode == TaxMode.MULTIPLIER else "%"
    for band in result.bands:
        with st.expander(f"{band.name}: {format_band_range(band.lower, band.upper)}"):
            st.markdown(f"""
            - **Rate:** {band.rate:.1f}{suffix}
            - **Estimated properties:** {round(band.property_count):,}
            - **Average new tax:** {format_currency(band.average_new_tax)}
            - **Average increase:** {format_currency(band.average_increase)}
            - **Additional revenue:** {format_millions(band.revenue)}
            """)
            if band.average_value is not None:
                st.caption(f"Estimated average value: {format_currency(band.average_value)}")
