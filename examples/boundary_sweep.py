#!/usr/bin/env python3
"""Boundary sweep: how the top band's starting point changes revenue.

Moves the H3/H4 boundary from £6m to £20m in £1m steps with the default
percentage rates and prints the count in the top band and the total
additional revenue.

Usage:
    python examples/boundary_sweep.py
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.engine import BandEngine
from src.export.formatting import format_millions, format_slider_label
from src.models.bands import DEFAULT_RATES, TaxMode


def main():
    print("=" * 60)
    print("BOUNDARY SWEEP: Top band start vs additional revenue")
    print("=" * 60)
    print()

    engine = BandEngine()
    mode = TaxMode.PERCENTAGE
    engine.set_mode(mode)
    rates = DEFAULT_RATES[mode]

    print(f"{'H4 starts at':>14} {'H4 properties':>15} {'Total revenue':>15}")
    print("-" * 46)
    for top in range(6_000_000, 20_000_001, 1_000_000):
        result = engine.compute_band_results((3_000_000, 5_000_000, top), rates, mode)
        h4 = result.bands[-1]
        print(
            f"{format_slider_label(top):>14} {round(h4.property_count):>15,} "
            f"{format_millions(result.total_revenue):>15}"
        )


if __name__ == "__main__":
    main()
