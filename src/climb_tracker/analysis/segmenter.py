"""Climb segmentation state machine.

This module is pure logic with NO I/O.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from climb_tracker.analysis.scoring import categorize_climb, climb_score, generate_climb_name
from climb_tracker.core.config import ClimbDetectionSettings, NamingSettings, default_settings
from climb_tracker.core.logging import get_logger
from climb_tracker.core.types import ClimbPhase, ClimbSegment, ElevationSample

logger = get_logger(__name__)


def pair_gradient(previous: ElevationSample, current: ElevationSample) -> float:
    """Gradient in percent between two consecutive samples.

    Returns 0 when the samples share the same distance.
    """
    run_km = current.distance - previous.distance
    if run_km <= 0:
        return 0.0

    return (current.elevation - previous.elevation) / (run_km * 1000) * 100


@dataclass
class SegmenterState:
    """Internal state for climb segmentation."""

    phase: ClimbPhase = ClimbPhase.IDLE
    start_distance: float = 0.0
    start_elevation: float = 0.0


class ClimbSegmenter:
    """Hysteresis state machine that cuts a profile into climbs.

    Transitions:
        IDLE → IN_CLIMB: Pair gradient rises above the threshold
        IN_CLIMB → IDLE: Pair gradient falls below the threshold, or the
            last sample is reached

    Each closed window is checked against the minimum length, gain and
    average gradient before it is emitted. The peak is refined by a
    bounded look-ahead from the closing sample.
    """

    def __init__(
        self,
        settings: ClimbDetectionSettings | None = None,
        naming: NamingSettings | None = None,
    ) -> None:
        """Initialize segmenter with settings.

        Args:
            settings: Detection thresholds (uses defaults if None)
            naming: Label words for generated names (uses defaults if None)
        """
        self.settings = settings or default_settings().climb
        self.naming = naming or default_settings().naming
        self._state = SegmenterState()

    @property
    def current_phase(self) -> ClimbPhase:
        """Get current segmentation phase."""
        return self._state.phase

    @property
    def is_climbing(self) -> bool:
        """Check if a climb window is currently open."""
        return self._state.phase == ClimbPhase.IN_CLIMB

    def reset(self) -> None:
        """Reset segmenter to initial state."""
        self._state = SegmenterState()

    def segment(self, samples: Sequence[ElevationSample]) -> list[ClimbSegment]:
        """Scan a profile and return every climb that passes validation.

        Args:
            samples: Smoothed profile ordered by distance

        Returns:
            Climbs in scan order (increasing start distance)
        """
        self.reset()
        climbs: list[ClimbSegment] = []
        last_index = len(samples) - 1

        for i in range(1, len(samples)):
            gradient = pair_gradient(samples[i - 1], samples[i])

            if self._state.phase == ClimbPhase.IDLE:
                self._handle_idle(samples[i - 1], gradient)

            elif self._state.phase == ClimbPhase.IN_CLIMB:
                if gradient < self.settings.gradient_threshold or i == last_index:
                    climb = self._close_climb(samples, i)
                    if climb is not None:
                        climbs.append(climb)

        return climbs

    def _handle_idle(self, previous: ElevationSample, gradient: float) -> None:
        """Handle IDLE state - watch for the gradient to cross upward."""
        if gradient > self.settings.gradient_threshold:
            self._state.phase = ClimbPhase.IN_CLIMB
            self._state.start_distance = previous.distance
            self._state.start_elevation = previous.elevation

    def _close_climb(
        self,
        samples: Sequence[ElevationSample],
        end_index: int,
    ) -> ClimbSegment | None:
        """Close the open window at ``end_index`` and validate it.

        The state is reset to IDLE whether or not the window qualifies.

        Args:
            samples: Profile being scanned
            end_index: Index of the closing sample

        Returns:
            ClimbSegment if the window qualifies, None otherwise
        """
        start_distance = self._state.start_distance
        start_elevation = self._state.start_elevation
        self.reset()

        end = samples[end_index]
        length = end.distance - start_distance
        gain = end.elevation - start_elevation

        if length < self.settings.min_climb_length_km or gain < self.settings.min_elevation_gain_m:
            logger.debug(
                "Rejected window %.2f-%.2f km: %.2f km, %.1f m",
                start_distance,
                end.distance,
                length,
                gain,
            )
            return None

        average_gradient = gain / (length * 1000) * 100
        if average_gradient < self.settings.gradient_threshold:
            logger.debug(
                "Rejected window %.2f-%.2f km: %.1f%% average",
                start_distance,
                end.distance,
                average_gradient,
            )
            return None

        peak_distance, peak_elevation = self._find_peak(samples, end_index)
        score = climb_score(length, average_gradient)

        return ClimbSegment(
            start_distance=start_distance,
            end_distance=end.distance,
            start_elevation=start_elevation,
            end_elevation=end.elevation,
            length=length,
            elevation_gain=gain,
            average_gradient=average_gradient,
            score=score,
            category=categorize_climb(score),
            peak_distance=peak_distance,
            peak_elevation=peak_elevation,
            name=generate_climb_name(peak_elevation, length, average_gradient, self.naming),
        )

    def _find_peak(
        self,
        samples: Sequence[ElevationSample],
        end_index: int,
    ) -> tuple[float, float]:
        """Look ahead from the closing sample for the true summit.

        Scans at most ``peak_lookahead_points`` samples and stops early
        once the profile falls more than ``peak_drop_tolerance_m`` below
        the highest elevation seen.

        Returns:
            (peak_distance, peak_elevation)
        """
        peak_distance = samples[end_index].distance
        peak_elevation = samples[end_index].elevation
        stop = min(end_index + self.settings.peak_lookahead_points, len(samples))

        for j in range(end_index, stop):
            elevation = samples[j].elevation
            if elevation > peak_elevation:
                peak_elevation = elevation
                peak_distance = samples[j].distance
            elif elevation < peak_elevation - self.settings.peak_drop_tolerance_m:
                break

        return peak_distance, peak_elevation


def find_climb_candidates(
    samples: Sequence[ElevationSample],
    settings: ClimbDetectionSettings | None = None,
    naming: NamingSettings | None = None,
) -> list[ClimbSegment]:
    """Segment a smoothed profile into candidate climbs.

    Pure function for batch processing a whole profile.

    Args:
        samples: Smoothed profile ordered by distance
        settings: Detection thresholds
        naming: Label words for generated names

    Returns:
        Candidate climbs in order of start distance, before merging
    """
    return ClimbSegmenter(settings, naming).segment(samples)
