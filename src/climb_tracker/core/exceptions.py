"""Custom exceptions for Climb Tracker."""


class ClimbTrackerError(Exception):
    """Base exception for all Climb Tracker errors."""

    pass


class InvalidProfileError(ClimbTrackerError):
    """Elevation profile contains samples the detector cannot process."""

    def __init__(self, message: str = "Invalid elevation profile") -> None:
        self.message = message
        super().__init__(self.message)


class GPXParseError(ClimbTrackerError):
    """GPX content could not be parsed or holds no usable points."""

    def __init__(self, message: str = "Invalid GPX file format") -> None:
        self.message = message
        super().__init__(self.message)
