"""Climb Tracker: climb detection and categorization for elevation profiles."""

from climb_tracker.core.types import ClimbCategory, ClimbSegment, ElevationSample
from climb_tracker.pipeline.processor import ClimbDetector, detect_climbs

__all__ = [
    "ClimbCategory",
    "ClimbDetector",
    "ClimbSegment",
    "ElevationSample",
    "detect_climbs",
]

__version__ = "0.1.0"
