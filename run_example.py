#!/usr/bin/env python3
"""Example script to run the band H model with the default calibration."""

import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent))

from src.engine import BandEngine
from src.export.formatting import format_band_range, format_currency, format_millions
from src.models.bands import DEFAULT_BOUNDARIES, DEFAULT_RATES, PercentType, TaxMode
from src.models.errors import BandConfigurationError


def _parse_floats(text: str) -> list[float]:
    return [float(part) for part in text.split(",") if part.strip()]


def run_bands(engine: BandEngine, boundaries, rates, mode: TaxMode, percent_type: PercentType):
    """Compute and print the band table."""
    print("\n" + "=" * 60)
    print("COUNCIL TAX BAND H RESTRUCTURING")
    print("=" * 60 + "\n")

    result = engine.compute_band_results(boundaries, rates, mode, percent_type)
    print(result.summary())

    print("\n" + "=" * 60)
    print("BAND DETAIL")
    print("=" * 60)
    for band in result.bands:
        line = (
            f"{band.name} {format_band_range(band.lower, band.upper):<18} "
            f"{round(band.property_count):>8,} properties, "
            f"avg rise {format_currency(band.average_increase):>9}, "
            f"{format_millions(band.revenue):>7}"
        )
        if band.average_value is not None:
            line += f" (avg value {format_currency(band.average_value)})"
        print(line)

    print(f"\nCurrent band H revenue: {format_millions(engine.baseline_revenue())}")
    print(f"Additional revenue:     {format_millions(result.total_revenue)}")


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Council tax band H model")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in TaxMode],
        default=TaxMode.MULTIPLIER.value,
        help="Multiplier of band D, or marginal percentage of value",
    )
    parser.add_argument(
        "--boundaries",
        type=_parse_floats,
        default=list(DEFAULT_BOUNDARIES),
        help="Three comma-separated band boundaries in pounds",
    )
    parser.add_argument(
        "--rates",
        type=_parse_floats,
        default=None,
        help="Four comma-separated rates (defaults depend on mode)",
    )
    parser.add_argument(
        "--percent-type",
        choices=[p.value for p in PercentType],
        default=PercentType.INSTEAD.value,
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    mode = TaxMode(args.mode)
    rates = args.rates if args.rates is not None else list(DEFAULT_RATES[mode])

    engine = BandEngine()
    engine.set_mode(mode)
    try:
        run_bands(engine, args.boundaries, rates, mode, PercentType(args.percent_type))
    except BandConfigurationError as e:
        parser.error(str(e))

    print("\nDone.")


if __name__ == "__main__":
    main()
