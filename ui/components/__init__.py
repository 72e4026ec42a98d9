"""UI components for the band H restructuring calculator."""

from .inputs import render_mode_inputs, render_boundary_inputs, render_rate_inputs
from .results import render_results_table, render_revenue_callout, render_band_details
from .charts import render_distribution_chart, render_revenue_chart

__all__ = [
    "render_mode_inputs",
    "render_boundary_inputs",
    "render_rate_inputs",
    "render_results_table",
    "render_revenue_callout",
    "render_band_details",
    "render_distribution_chart",
    "render_revenue_chart",
]
