"""Elevation smoothing ahead of gradient analysis.

This module is pure logic with NO I/O.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from typing import Any

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view
from numpy.typing import NDArray

from climb_tracker.core.config import SmoothingSettings, default_settings
from climb_tracker.core.types import ElevationSample


def centered_moving_average(
    values: NDArray[np.floating[Any]],
    window_size: int,
) -> NDArray[np.floating[Any]]:
    """Replace each interior value by the mean of its centered window.

    Values within ``window_size`` of either end are left untouched.

    Args:
        values: 1-D array of measurements
        window_size: Half-width of the window; the window holds
            ``2 * window_size + 1`` values

    Returns:
        New array of the same length
    """
    smoothed = values.astype(np.float64, copy=True)
    span = 2 * window_size + 1

    if len(values) < span:
        return smoothed

    windows = sliding_window_view(values, span)
    smoothed[window_size : len(values) - window_size] = windows.mean(axis=1)

    return smoothed


class ElevationSmoother:
    """Centered moving average filter for elevation profiles.

    Suppresses GPS and barometric jitter so that the segmenter does not see
    spurious gradient sign flips. Boundary samples are passed through
    unchanged; there is no padding or reflection at the track ends.
    """

    def __init__(self, settings: SmoothingSettings | None = None) -> None:
        """Initialize smoother with settings.

        Args:
            settings: Smoothing parameters (uses defaults if None)
        """
        self.settings = settings or default_settings().smoothing

    @property
    def window_size(self) -> int:
        """Half-width of the averaging window."""
        return self.settings.window_size

    def smooth(self, samples: Sequence[ElevationSample]) -> list[ElevationSample]:
        """Smooth the elevations of a profile.

        Args:
            samples: Profile ordered by distance

        Returns:
            Profile of the same length with smoothed elevations and
            untouched distances
        """
        if len(samples) < self.settings.min_points:
            return list(samples)

        elevations = np.array([s.elevation for s in samples], dtype=np.float64)
        smoothed = centered_moving_average(elevations, self.window_size)

        result: list[ElevationSample] = []
        for sample, elevation in zip(samples, smoothed):
            if elevation == sample.elevation:
                result.append(sample)
            else:
                result.append(replace(sample, elevation=float(elevation)))

        return result


def smooth_elevations(
    samples: Sequence[ElevationSample],
    window_size: int = 3,
) -> list[ElevationSample]:
    """Smooth a profile with a centered moving average.

    Pure function wrapper around :class:`ElevationSmoother`.

    Args:
        samples: Profile ordered by distance
        window_size: Half-width of the averaging window

    Returns:
        Smoothed profile
    """
    settings = SmoothingSettings.model_validate({"window_size": window_size})
    return ElevationSmoother(settings).smooth(samples)
