"""Tests for formatting helpers and result export."""

import io
import math

import pytest
from openpyxl import load_workbook

from src.export.band_report import (
    export_results_to_csv,
    export_results_to_excel,
    results_to_dataframe,
)
from src.export.formatting import (
    format_band_range,
    format_currency,
    format_millions,
    format_slider_label,
)
from src.models.bands import TaxMode


class TestFormatting:
    """Tests for money and band labels."""

    def test_format_millions(self):
        assert format_millions(12_400_000) == "£12m"
        assert format_millions(12_500_000) == "£13m"
        assert format_millions(1_234_000_000) == "£1,234m"
        assert format_millions(0) == "£0m"

    def test_format_millions_small_negative_is_zero(self):
        assert format_millions(-100_000) == "£0m"

    def test_format_currency(self):
        assert format_currency(1234.6) == "£1,235"
        assert format_currency(4560) == "£4,560"

    def test_format_slider_label(self):
        assert format_slider_label(3_000_000) == "£3m"
        assert format_slider_label(2_500_000) == "£2.50m"
        assert format_slider_label(2_750_000) == "£2.75m"

    def test_format_band_range(self):
        assert format_band_range(3_000_000, 5_000_000) == "£3m – £5m"
        assert format_band_range(10_000_000, math.inf) == "£10m+"


@pytest.fixture
def percentage_result(shared_engine):
    return shared_engine.compute_band_results(
        (3_000_000, 5_000_000, 10_000_000), (0, 0.5, 0.5, 0.5), TaxMode.PERCENTAGE
    )


class TestExport:
    """Tests for CSV and Excel export."""

    def test_dataframe_has_row_per_band(self, percentage_result):
        df = results_to_dataframe(percentage_result)
        assert list(df["Band"]) == ["H1", "H2", "H3", "H4"]
        assert df["Additional Revenue"].sum() == pytest.approx(percentage_result.total_revenue)
        assert df["Range"].iloc[-1] == "£10m+"

    def test_csv_export(self, percentage_result):
        csv_text = export_results_to_csv(percentage_result)
        lines = csv_text.strip().splitlines()
        assert lines[0].startswith("Band,Range,Rate,Properties")
        assert len(lines) == 5

    def test_excel_export(self, shared_engine, percentage_result):
        data = export_results_to_excel(percentage_result, shared_engine.baseline_revenue())
        wb = load_workbook(io.BytesIO(data))

        assert wb.sheetnames == ["Summary", "Bands"]
        assert wb["Summary"]["A1"].value == "Band H Restructuring"
        assert wb["Summary"]["B4"].value == "percentage"
        bands = wb["Bands"]
        assert bands.cell(row=1, column=1).value == "Band"
        assert bands.cell(row=5, column=1).value == "H4"

    def test_excel_export_multiplier_has_blank_average_value(self, shared_engine):
        result = shared_engine.compute_band_results(
            (3_000_000, 5_000_000, 10_000_000), (2, 3, 4, 5), TaxMode.MULTIPLIER
        )
        wb = load_workbook(io.BytesIO(export_results_to_excel(result, 0.0)))
        assert wb["Bands"].cell(row=2, column=5).value is None
