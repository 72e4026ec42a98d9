"""Export band restructuring results to CSV and Excel."""

import io
from datetime import datetime

import pandas as pd
from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils.dataframe import dataframe_to_rows

from src.calculations.revenue import RevenueResult
from .formatting import format_band_range


def results_to_dataframe(result: RevenueResult) -> pd.DataFrame:
    """Band table with one row per band."""
    rows = []
    for band in result.bands:
        rows.append({
            "Band": band.name,
            "Range": format_band_range(band.lower, band.upper),
            "Rate": band.rate,
            "Properties": band.property_count,
            "Average Value": band.average_value,
            "Average Tax": band.average_new_tax,
            "Average Increase": band.average_increase,
            "Additional Revenue": band.revenue,
        })
    return pd.DataFrame(rows)


def export_results_to_csv(result: RevenueResult) -> str:
    """Band table as CSV text."""
    return results_to_dataframe(result).to_csv(index=False)


def _add_header_style(ws, row: int, cols: int) -> None:
    """Apply header styling to a row."""
    header_fill = PatternFill(start_color="1F4E79", end_color="1F4E79", fill_type="solid")
    header_font = Font(color="FFFFFF", bold=True)

    for col in range(1, cols + 1):
        cell = ws.cell(row=row, column=col)
        cell.fill = header_fill
        cell.font = header_font
        cell.alignment = Alignment(horizontal="center")


def export_results_to_excel(result: RevenueResult, baseline_revenue: float) -> bytes:
    """Workbook with a summary sheet and a per-band sheet.

    Args:
        result: Output of BandEngine.compute_band_results().
        baseline_revenue: Revenue currently raised from band H.

    Returns:
        Excel file as bytes.
    """
    wb = Workbook()

    ws = wb.active
    ws.title = "Summary"
    ws["A1"] = "Band H Restructuring"
    ws["A1"].font = Font(bold=True, size=16)
    ws["A2"] = f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}"

    summary = [
        ("Mode", result.mode.value, None),
        ("Percentage type", result.percent_type.value, None),
        ("Baseline band H tax", result.baseline_band_tax, "#,##0"),
        ("Effective collection rate", result.effective_rate, "0.0000"),
        ("Baseline band H revenue", baseline_revenue, "#,##0"),
        ("Additional revenue", result.total_revenue, "#,##0"),
    ]
    for offset, (label, value, number_format) in enumerate(summary):
        row = 4 + offset
        ws.cell(row=row, column=1, value=label).font = Font(bold=True)
        cell = ws.cell(row=row, column=2, value=value)
        if number_format:
            cell.number_format = number_format
    ws.column_dimensions["A"].width = 30
    ws.column_dimensions["B"].width = 18

    ws_bands = wb.create_sheet("Bands")
    df = results_to_dataframe(result)
    for r_idx, row in enumerate(dataframe_to_rows(df, index=False, header=True), start=1):
        for c_idx, value in enumerate(row, start=1):
            if isinstance(value, float) and pd.isna(value):
                value = None
            cell = ws_bands.cell(row=r_idx, column=c_idx, value=value)
            if r_idx > 1 and c_idx >= 4:
                cell.number_format = "#,##0"
    _add_header_style(ws_bands, 1, len(df.columns))
    for col in "ABCDEFGH":
        ws_bands.column_dimensions[col].width = 18

    output = io.BytesIO()
    wb.save(output)
    output.seek(0)
    return output.getvalue()
