"""Chart components for the Streamlit UI."""

from typing import Sequence

import numpy as np
import plotly.graph_objects as go
import streamlit as st

from src.calculations.revenue import RevenueResult
from src.engine import BandEngine


def render_distribution_chart(
    engine: BandEngine,
    boundaries: Sequence[float],
) -> None:
    """Render estimated property counts per price bucket with band boundaries.

    Args:
        engine: Band engine supplying counts.
        boundaries: Interior band boundaries to mark.
    """
    config = engine.config
    edges = np.arange(config.band_h_start, config.slider_max + config.slider_step, config.slider_step)
    mids = (edges[:-1] + edges[1:]) / 2 / 1_000_000
    counts = [engine.estimate_count(lo, hi) for lo, hi in zip(edges[:-1], edges[1:])]

    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=mids,
        y=counts,
        name='Estimated properties',
        marker=dict(color='#1f77b4'),
    ))
    for b in boundaries:
        fig.add_vline(x=b / 1_000_000, line_dash="dash", line_color="#d62728")

    fig.update_layout(
        title=f"Estimated Properties per £{config.slider_step / 1_000:,.0f}k",
        xaxis_title="Value (£m)",
        yaxis_title="Properties",
        yaxis_type="log",
        height=400,
        bargap=0.05,
    )

    st.plotly_chart(fig, use_container_width=True)


def render_revenue_chart(result: RevenueResult) -> None:
    """Render additional revenue by band.

    Args:
        result: Revenue result from the engine.
    """
    fig = go.Figure(data=[go.Bar(
        x=[b.name for b in result.bands],
        y=[b.revenue for b in result.bands],
        marker=dict(color=['#2ca02c' if b.revenue >= 0 else '#d62728' for b in result.bands]),
    )])

    fig.update_layout(
        title="Additional Revenue by Band",
        yaxis_title="Revenue (£)",
        yaxis_tickformat=",.0f",
        height=350,
    )

    st.plotly_chart(fig, use_container_width=True)
