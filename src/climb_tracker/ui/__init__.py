"""Presentation helpers: climb labels and number formatting."""

from climb_tracker.ui.labels import (
    climb_label_lines,
    climb_summary_line,
    format_number_european,
    format_number_with_thousands,
)

__all__ = [
    "climb_label_lines",
    "climb_summary_line",
    "format_number_european",
    "format_number_with_thousands",
]
