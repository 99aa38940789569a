"""Pytest fixtures for Climb Tracker tests."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest

from climb_tracker.core.config import (
    ClimbDetectionSettings,
    MergeSettings,
    NamingSettings,
    Settings,
    SmoothingSettings,
)
from climb_tracker.core.types import ClimbCategory, ClimbSegment, ElevationSample

Section = tuple[float, float]


def _profile_from_sections(
    sections: Sequence[Section],
    step_km: float = 0.01,
    start_elevation: float = 100.0,
) -> list[ElevationSample]:
    """Build a profile from (length_km, gradient_percent) sections."""
    samples = [ElevationSample(distance=0.0, elevation=start_elevation)]
    index = 0
    elevation = start_elevation
    rise_per_step = step_km * 1000 / 100

    for length_km, gradient in sections:
        for _ in range(round(length_km / step_km)):
            index += 1
            elevation += gradient * rise_per_step
            samples.append(
                ElevationSample(distance=round(index * step_km, 6), elevation=elevation)
            )

    return samples


@pytest.fixture
def profile_from_sections() -> Callable[..., list[ElevationSample]]:
    """Factory building synthetic profiles from (length_km, gradient) sections."""
    return _profile_from_sections


@pytest.fixture
def flat_profile() -> list[ElevationSample]:
    """A flat 20 km track."""
    return _profile_from_sections([(20.0, 0.0)], step_km=0.1)


@pytest.fixture
def single_climb_profile() -> list[ElevationSample]:
    """2 km flat, 5 km at 8% (400 m), 2 km flat."""
    return _profile_from_sections([(2.0, 0.0), (5.0, 8.0), (2.0, 0.0)])


@pytest.fixture
def close_climbs_profile() -> list[ElevationSample]:
    """Two valid climbs separated by 1.5 km of flat road.

    1 km at 6% then 2 km at 8%; the second scores higher.
    """
    return _profile_from_sections(
        [(1.0, 0.0), (1.0, 6.0), (1.5, 0.0), (2.0, 8.0), (1.0, 0.0)]
    )


@pytest.fixture
def summit_finish_profile() -> list[ElevationSample]:
    """1 km flat then 2 km at 6% ending on the last sample."""
    return _profile_from_sections([(1.0, 0.0), (2.0, 6.0)])


@pytest.fixture
def noisy_climb_profile() -> list[ElevationSample]:
    """1 km flat, 2 km at 10% with +/-5 m alternating noise, 1 km flat.

    Samples every 100 m; noise is applied to the points strictly inside
    the climb.
    """
    clean = _profile_from_sections([(1.0, 0.0), (2.0, 10.0), (1.0, 0.0)], step_km=0.1)
    noisy = []
    for index, sample in enumerate(clean):
        noise = 0.0
        if 11 <= index <= 29:
            noise = 5.0 if index % 2 == 0 else -5.0
        noisy.append(ElevationSample(distance=sample.distance, elevation=sample.elevation + noise))
    return noisy


@pytest.fixture
def rolling_profile() -> list[ElevationSample]:
    """Several climbs and bumps of varying size, spread over 40 km."""
    return _profile_from_sections(
        [
            (2.0, 0.0),
            (3.0, 6.0),
            (1.0, -4.0),
            (3.0, 0.0),
            (0.3, 12.0),  # too short
            (3.0, -1.0),
            (8.0, 7.5),
            (2.0, -6.0),
            (1.0, 2.0),
            (0.7, 5.0),
            (0.8, -3.0),
            (2.5, 4.0),
            (3.0, -5.0),
            (4.0, 0.0),
            (1.2, 9.0),
            (5.5, -2.0),
        ]
    )


@pytest.fixture
def climb_factory() -> Callable[..., ClimbSegment]:
    """Factory for ClimbSegment records with consistent metrics."""

    def _make(
        start: float,
        end: float,
        score: float,
        start_elevation: float = 100.0,
    ) -> ClimbSegment:
        length = end - start
        gradient = (score / length) ** 0.5
        gain = gradient * length * 10
        return ClimbSegment(
            start_distance=start,
            end_distance=end,
            start_elevation=start_elevation,
            end_elevation=start_elevation + gain,
            length=length,
            elevation_gain=gain,
            average_gradient=gradient,
            score=score,
            category=ClimbCategory.CAT_4,
            peak_distance=end,
            peak_elevation=start_elevation + gain,
            name=f"Côte {start:.1f}",
        )

    return _make


@pytest.fixture
def settings() -> Settings:
    """Create default application settings for testing."""
    return Settings()


@pytest.fixture
def climb_detection_settings() -> ClimbDetectionSettings:
    """Create climb detection settings for testing."""
    return ClimbDetectionSettings(
        gradient_threshold=3.0,
        min_climb_length_km=0.5,
        min_elevation_gain_m=30.0,
        peak_lookahead_points=20,
        peak_drop_tolerance_m=10.0,
        min_samples=10,
    )


@pytest.fixture
def smoothing_settings() -> SmoothingSettings:
    """Create smoothing settings for testing."""
    return SmoothingSettings()


@pytest.fixture
def merge_settings() -> MergeSettings:
    """Create merge settings for testing."""
    return MergeSettings()


@pytest.fixture
def naming_settings() -> NamingSettings:
    """Create naming settings for testing."""
    return NamingSettings()
