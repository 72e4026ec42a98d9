"""Display formatting for money values and band ranges."""

import math


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_millions(value: float) -> str:
    """Format as whole millions, e.g. 12_400_000 -> "£12m"."""
    return f"£{_round_half_up(value / 1_000_000):,}m"


def format_currency(value: float) -> str:
    """Format as whole pounds, e.g. 1234.6 -> "£1,235"."""
    return f"£{_round_half_up(value):,}"


def format_slider_label(value: float) -> str:
    """Format a boundary in millions to 2dp, dropping a trailing ".00".

    Example:
        >>> format_slider_label(2_500_000)
        '£2.50m'
        >>> format_slider_label(3_000_000)
        '£3m'
    """
    return f"£{value / 1_000_000:.2f}m".replace(".00", "")


def format_band_range(lower: float, upper: float) -> str:
    """Label a band, e.g. "£3m – £5m" or "£10m+" for the open top band."""
    if math.isinf(upper):
        return f"{format_slider_label(lower)}+"
    return f"{format_slider_label(lower)} – {format_slider_label(upper)}"
