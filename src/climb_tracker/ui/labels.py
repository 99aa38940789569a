"""Climb label text for elevation profile annotations."""

from __future__ import annotations

from climb_tracker.core.types import ClimbSegment

_SWAP_SEPARATORS = str.maketrans(",.", ".,")


def format_number_european(value: float, decimals: int = 0) -> str:
    """Format a number with a comma as decimal separator.

    Args:
        value: Number to format
        decimals: Number of decimal places

    Returns:
        e.g. ``"7,5"`` for 7.5 with one decimal
    """
    return f"{value:.{decimals}f}".replace(".", ",")


def format_number_with_thousands(value: float, decimals: int = 0) -> str:
    """Format a number with dot thousands separators and a decimal comma.

    Args:
        value: Number to format
        decimals: Number of decimal places

    Returns:
        e.g. ``"1.234,5"`` for 1234.5 with one decimal
    """
    formatted = f"{value:,.{decimals}f}"
    return formatted.translate(_SWAP_SEPARATORS)


def climb_label_lines(climb: ClimbSegment) -> list[str]:
    """Text lines drawn next to a climb's summit, top to bottom.

    Uncategorized climbs get only their name, peak elevation, and peak
    distance.
    """
    lines: list[str] = []

    if climb.is_categorized:
        lines.append(str(climb.category))

    lines.append(climb.name)
    lines.append(f"{format_number_with_thousands(climb.peak_elevation)} m")
    lines.append(f"{format_number_european(climb.peak_distance, 1)} km")

    if climb.is_categorized:
        lines.append(
            f"{format_number_european(climb.length, 1)} km à "
            f"{format_number_european(climb.average_gradient, 1)} %"
        )

    return lines


def climb_summary_line(climb: ClimbSegment) -> str:
    """Single-line description for tabular output."""
    category = str(climb.category) if climb.category is not None else "-"
    return (
        f"{climb.name:<14} cat {category:<2}  "
        f"{climb.start_distance:6.1f}-{climb.end_distance:6.1f} km  "
        f"{climb.length:5.1f} km  {climb.elevation_gain:5.0f} m  "
        f"{climb.average_gradient:4.1f}%  score {climb.score:6.1f}"
    )
