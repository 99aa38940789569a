"""Pure analysis logic: smoothing, climb segmentation, scoring, and merging.

This module contains NO I/O operations.
All functions operate on typed dataclasses and return results.
"""

from climb_tracker.analysis.merger import merge_nearby_climbs
from climb_tracker.analysis.scoring import categorize_climb, climb_score, generate_climb_name
from climb_tracker.analysis.segmenter import ClimbSegmenter, find_climb_candidates
from climb_tracker.analysis.smoother import ElevationSmoother, smooth_elevations

__all__ = [
    "ElevationSmoother",
    "smooth_elevations",
    "ClimbSegmenter",
    "find_climb_candidates",
    "climb_score",
    "categorize_climb",
    "generate_climb_name",
    "merge_nearby_climbs",
]
