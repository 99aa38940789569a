"""Elevation profile construction from GPS track points."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import NDArray

from climb_tracker.analysis.smoother import centered_moving_average
from climb_tracker.core.config import SmoothingSettings, default_settings
from climb_tracker.core.exceptions import InvalidProfileError
from climb_tracker.core.types import ElevationSample, ProfileSummary, TrackPoint

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two coordinates in kilometers."""
    distance = _haversine(
        np.array([lat1]),
        np.array([lon1]),
        np.array([lat2]),
        np.array([lon2]),
    )
    return float(distance[0])


def _haversine(
    lat1: NDArray[np.floating[Any]],
    lon1: NDArray[np.floating[Any]],
    lat2: NDArray[np.floating[Any]],
    lon2: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """Vectorized haversine distance in kilometers."""
    phi1 = np.radians(lat1)
    phi2 = np.radians(lat2)
    d_phi = np.radians(lat2 - lat1)
    d_lambda = np.radians(lon2 - lon1)

    a = np.sin(d_phi / 2) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(d_lambda / 2) ** 2
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def cumulative_distances(points: Sequence[TrackPoint]) -> NDArray[np.floating[Any]]:
    """Cumulative along-track distance in kilometers for each point.

    The first point is at distance 0.
    """
    distances = np.zeros(len(points), dtype=np.float64)
    if len(points) < 2:
        return distances

    lats = np.array([p.latitude for p in points], dtype=np.float64)
    lons = np.array([p.longitude for p in points], dtype=np.float64)

    steps = _haversine(lats[:-1], lons[:-1], lats[1:], lons[1:])
    distances[1:] = np.cumsum(steps)

    return distances


def build_profile(
    points: Sequence[TrackPoint],
    settings: SmoothingSettings | None = None,
) -> list[ElevationSample]:
    """Turn track points into an elevation-vs-distance profile.

    Elevations get a centered moving average of half-width
    ``profile_window_size`` to take the edge off GPS altitude noise.
    Tracks shorter than ``profile_min_points`` keep their raw elevations.

    Args:
        points: Track points in recording order
        settings: Smoothing parameters (uses defaults if None)

    Returns:
        One sample per point, distance in km from the first point
    """
    settings = settings or default_settings().smoothing
    distances = cumulative_distances(points)
    elevations = np.array([p.elevation for p in points], dtype=np.float64)

    if len(points) >= settings.profile_min_points:
        elevations = centered_moving_average(elevations, settings.profile_window_size)

    return [
        ElevationSample(distance=float(distance), elevation=float(elevation))
        for distance, elevation in zip(distances, elevations)
    ]


def summarize_profile(points: Sequence[TrackPoint]) -> ProfileSummary:
    """Compute whole-track statistics.

    Args:
        points: Track points in recording order

    Returns:
        ProfileSummary with distance, positive gain, and elevation range

    Raises:
        InvalidProfileError: If there are no points
    """
    if not points:
        raise InvalidProfileError("Cannot summarize an empty track")

    elevations = np.array([p.elevation for p in points], dtype=np.float64)
    deltas = np.diff(elevations)

    return ProfileSummary(
        total_distance=float(cumulative_distances(points)[-1]),
        total_elevation_gain=float(deltas[deltas > 0].sum()),
        max_elevation=float(elevations.max()),
        min_elevation=float(elevations.min()),
        start=points[0],
        end=points[-1],
    )
