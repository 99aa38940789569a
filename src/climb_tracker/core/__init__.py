"""Core infrastructure: config, types, exceptions, and logging."""

from climb_tracker.core.config import Settings, default_settings, get_settings
from climb_tracker.core.exceptions import (
    ClimbTrackerError,
    GPXParseError,
    InvalidProfileError,
)
from climb_tracker.core.logging import configure_logging, get_logger, setup_logging
from climb_tracker.core.types import (
    ClimbCategory,
    ClimbPhase,
    ClimbSegment,
    ElevationSample,
    ProfileSummary,
    TrackPoint,
)

__all__ = [
    # Config
    "Settings",
    "default_settings",
    "get_settings",
    # Types
    "ElevationSample",
    "TrackPoint",
    "ClimbCategory",
    "ClimbPhase",
    "ClimbSegment",
    "ProfileSummary",
    # Exceptions
    "ClimbTrackerError",
    "InvalidProfileError",
    "GPXParseError",
    # Logging
    "configure_logging",
    "get_logger",
    "setup_logging",
]
