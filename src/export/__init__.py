"""Export and display formatting for band results."""

from .formatting import (
    format_millions,
    format_currency,
    format_slider_label,
    format_band_range,
)
from .band_report import (
    results_to_dataframe,
    export_results_to_csv,
    export_results_to_excel,
)

__all__ = [
    "format_millions",
    "format_currency",
    "format_slider_label",
    "format_band_range",
    "results_to_dataframe",
    "export_results_to_csv",
    "export_results_to_excel",
]
