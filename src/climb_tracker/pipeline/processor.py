"""Climb detection pipeline orchestration."""

from __future__ import annotations

import math
from collections.abc import Sequence

from climb_tracker.analysis.merger import merge_nearby_climbs
from climb_tracker.analysis.segmenter import ClimbSegmenter
from climb_tracker.analysis.smoother import ElevationSmoother
from climb_tracker.core.config import Settings, default_settings
from climb_tracker.core.exceptions import InvalidProfileError
from climb_tracker.core.logging import get_logger
from climb_tracker.core.types import ClimbSegment, ElevationSample

logger = get_logger(__name__)


def validate_samples(samples: Sequence[ElevationSample]) -> None:
    """Reject profiles the detector has no defined behavior for.

    Args:
        samples: Profile ordered by distance

    Raises:
        InvalidProfileError: On a non-finite distance or elevation, or a
            distance smaller than the one before it
    """
    previous_distance = -math.inf

    for index, sample in enumerate(samples):
        if not math.isfinite(sample.distance):
            raise InvalidProfileError(f"Sample {index} has non-finite distance {sample.distance}")
        if not math.isfinite(sample.elevation):
            raise InvalidProfileError(
                f"Sample {index} has non-finite elevation {sample.elevation}"
            )
        if sample.distance < previous_distance:
            raise InvalidProfileError(
                f"Sample {index} distance {sample.distance} km is before "
                f"the previous sample at {previous_distance} km"
            )
        previous_distance = sample.distance


class ClimbDetector:
    """Orchestrates the full climb detection pipeline.

    Coordinates:
    - Input validation
    - Elevation smoothing
    - Climb segmentation
    - Merging of nearby climbs

    Holds configuration only; every call to :meth:`detect` is independent.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize detector with settings.

        Args:
            settings: Application settings (uses defaults if None)
        """
        self.settings = settings or default_settings()

        self._smoother = ElevationSmoother(self.settings.smoothing)

    def detect(self, samples: Sequence[ElevationSample]) -> list[ClimbSegment]:
        """Detect climbs in an elevation profile.

        Args:
            samples: Profile ordered by non-decreasing distance

        Returns:
            Climbs ordered by start distance; empty when the profile has
            fewer than ``min_samples`` points or no qualifying climb

        Raises:
            InvalidProfileError: If the profile fails validation
        """
        validate_samples(samples)

        if len(samples) < self.settings.climb.min_samples:
            logger.debug(
                "Profile has %d samples, need %d; skipping",
                len(samples),
                self.settings.climb.min_samples,
            )
            return []

        smoothed = self._smoother.smooth(samples)
        segmenter = ClimbSegmenter(self.settings.climb, self.settings.naming)
        candidates = segmenter.segment(smoothed)
        logger.debug("Segmenter produced %d candidate climbs", len(candidates))

        climbs = merge_nearby_climbs(
            candidates,
            self.settings.merge.min_distance_between_climbs_km,
        )
        logger.info(
            "Detected %d climbs in %.1f km (%d candidates)",
            len(climbs),
            samples[-1].distance - samples[0].distance,
            len(candidates),
        )

        return climbs


def detect_climbs(
    samples: Sequence[ElevationSample],
    settings: Settings | None = None,
) -> list[ClimbSegment]:
    """Detect climbs in an elevation profile.

    Convenience wrapper around :class:`ClimbDetector`.

    Args:
        samples: Profile ordered by non-decreasing distance
        settings: Application settings (uses defaults if None)

    Returns:
        Climbs ordered by start distance
    """
    return ClimbDetector(settings).detect(samples)
