"""Core data types and structures."""

from dataclasses import dataclass
from enum import Enum, auto


@dataclass(frozen=True, slots=True)
class ElevationSample:
    """A single point of an elevation profile.

    Attributes:
        distance: Cumulative distance from the track start in kilometers
        elevation: Elevation in meters
    """

    distance: float
    elevation: float


@dataclass(frozen=True, slots=True)
class TrackPoint:
    """A raw GPS track point as read from a GPX file."""

    latitude: float
    longitude: float
    elevation: float


class ClimbCategory(Enum):
    """Road-cycling climb categories, hardest first."""

    HC = "HC"
    CAT_1 = "1"
    CAT_2 = "2"
    CAT_3 = "3"
    CAT_4 = "4"

    def __str__(self) -> str:
        return self.value


class ClimbPhase(Enum):
    """States in the climb segmentation state machine."""

    IDLE = auto()
    IN_CLIMB = auto()


@dataclass(frozen=True, slots=True)
class ClimbSegment:
    """A detected climb with its difficulty metrics.

    Attributes:
        start_distance: Distance where the climb starts (km)
        end_distance: Distance where the climb was closed (km)
        start_elevation: Elevation at the start (m)
        end_elevation: Elevation at the close point (m)
        length: end_distance - start_distance (km)
        elevation_gain: end_elevation - start_elevation (m)
        average_gradient: Mean slope over the climb in percent
        score: Difficulty score, length * average_gradient^2
        category: Category derived from score, None if uncategorized
        peak_distance: Distance of the highest point at or after the close (km)
        peak_elevation: Elevation of that highest point (m)
        name: Generated display name
    """

    start_distance: float
    end_distance: float
    start_elevation: float
    end_elevation: float
    length: float
    elevation_gain: float
    average_gradient: float
    score: float
    category: ClimbCategory | None
    peak_distance: float
    peak_elevation: float
    name: str

    @property
    def is_categorized(self) -> bool:
        """Whether the climb earned a category."""
        return self.category is not None

    def to_dict(self) -> dict[str, float | str | None]:
        """Serialize to a JSON-friendly dictionary."""
        return {
            "start_distance": self.start_distance,
            "end_distance": self.end_distance,
            "start_elevation": self.start_elevation,
            "end_elevation": self.end_elevation,
            "length": self.length,
            "elevation_gain": self.elevation_gain,
            "average_gradient": self.average_gradient,
            "score": self.score,
            "category": self.category.value if self.category is not None else None,
            "peak_distance": self.peak_distance,
            "peak_elevation": self.peak_elevation,
            "name": self.name,
        }


@dataclass(frozen=True, slots=True)
class ProfileSummary:
    """Whole-track statistics for an elevation profile.

    Attributes:
        total_distance: Track length in kilometers
        total_elevation_gain: Sum of positive elevation changes in meters
        max_elevation: Highest elevation in meters
        min_elevation: Lowest elevation in meters
        start: First track point
        end: Last track point
    """

    total_distance: float
    total_elevation_gain: float
    max_elevation: float
    min_elevation: float
    start: TrackPoint
    end: TrackPoint
