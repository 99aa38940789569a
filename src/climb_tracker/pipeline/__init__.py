"""Climb detection pipeline orchestration."""

from climb_tracker.pipeline.processor import ClimbDetector, detect_climbs, validate_samples

__all__ = ["ClimbDetector", "detect_climbs", "validate_samples"]
