"""Main Streamlit application for the band H restructuring calculator."""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import streamlit as st

from src.engine import BandEngine
from src.export.band_report import export_results_to_csv, export_results_to_excel
from src.models.errors import BandConfigurationError
from ui.components import (
    render_mode_inputs,
    render_boundary_inputs,
    render_rate_inputs,
    render_results_table,
    render_revenue_callout,
    render_band_details,
    render_distribution_chart,
    render_revenue_chart,
)

# Page configuration
st.set_page_config(
    page_title="Council Tax Band H Calculator",
    page_icon="🏛️",
    layout="wide",
    initial_sidebar_state="expanded",
)


@st.cache_resource
def get_engine() -> BandEngine:
    """One engine per process; the flow distribution is built here once."""
    return BandEngine()


def main():
    """Main application entry point."""
    st.title("🏛️ Council Tax Band H Calculator")
    st.caption("Split band H into sub-bands and estimate the additional revenue")

    engine = get_engine()

    mode, percent_type = render_mode_inputs()
    engine.set_mode(mode)
    boundaries = render_boundary_inputs(engine.config)
    rates = render_rate_inputs(mode)

    try:
        result = engine.compute_band_results(boundaries, rates, mode, percent_type)
    except BandConfigurationError as e:
        st.error(f"Invalid band configuration: {e}")
        return

    render_revenue_callout(result, engine.baseline_revenue())

    tab1, tab2 = st.tabs(["📊 Bands", "📈 Distribution"])

    with tab1:
        render_results_table(result)
        render_band_details(result)
        render_revenue_chart(result)

        col1, col2 = st.columns(2)
        with col1:
            st.download_button(
                "Download CSV",
                data=export_results_to_csv(result),
                file_name="band_h_results.csv",
                mime="text/csv",
            )
        with col2:
            st.download_button(
                "Download Excel",
                data=export_results_to_excel(result, engine.baseline_revenue()),
                file_name="band_h_results.xlsx",
                mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            )

    with tab2:
        render_distribution_chart(engine, boundaries)


if __name__ == "__main__":
    main()
