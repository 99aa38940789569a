"""Climb difficulty scoring, categorization, and naming."""

from __future__ import annotations

import math

from climb_tracker.core.config import NamingSettings, default_settings
from climb_tracker.core.types import ClimbCategory

# (minimum score, category), checked in order; 4 takes any positive score
CATEGORY_BREAKPOINTS: tuple[tuple[float, ClimbCategory], ...] = (
    (600.0, ClimbCategory.HC),
    (300.0, ClimbCategory.CAT_1),
    (150.0, ClimbCategory.CAT_2),
    (75.0, ClimbCategory.CAT_3),
)


def climb_score(length_km: float, average_gradient: float) -> float:
    """Difficulty score: length times the squared average gradient.

    Args:
        length_km: Climb length in kilometers
        average_gradient: Average gradient in percent

    Returns:
        Score, increasing in both length and steepness
    """
    return length_km * (average_gradient * average_gradient)


def categorize_climb(score: float) -> ClimbCategory | None:
    """Map a score onto a climb category.

    Args:
        score: Climb score as computed by :func:`climb_score`

    Returns:
        Category, or None when the score is not positive
    """
    for minimum, category in CATEGORY_BREAKPOINTS:
        if score >= minimum:
            return category

    if score > 0:
        return ClimbCategory.CAT_4

    return None


def name_token(
    elevation: float,
    length_km: float,
    gradient: float,
    naming: NamingSettings | None = None,
) -> str:
    """Pick the label word for a climb.

    Elevation wins over steepness, which wins over length.
    """
    naming = naming or default_settings().naming

    if elevation > 1500:
        return naming.high_pass
    if elevation > 1000:
        return naming.mountain
    if gradient > 10:
        return naming.steep
    if length_km > 10:
        return naming.long
    return naming.default


def generate_climb_name(
    elevation: float,
    length_km: float,
    gradient: float,
    naming: NamingSettings | None = None,
) -> str:
    """Generate a display name such as ``"Col 1800m"``.

    Args:
        elevation: Peak elevation in meters
        length_km: Climb length in kilometers
        gradient: Average gradient in percent
        naming: Label words to use (defaults if None)

    Returns:
        Label word followed by the peak elevation rounded to 100 m
    """
    token = name_token(elevation, length_km, gradient, naming)
    # half up: 1250 -> 1300
    rounded = math.floor(elevation / 100 + 0.5) * 100
    return f"{token} {rounded}m"
