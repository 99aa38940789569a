"""Consolidation of climbs detected too close to each other.

This module is pure logic with NO I/O.
"""

from __future__ import annotations

from collections.abc import Sequence

from climb_tracker.core.logging import get_logger
from climb_tracker.core.types import ClimbSegment

logger = get_logger(__name__)


def gap_between(previous: ClimbSegment, following: ClimbSegment) -> float:
    """Distance in km from the end of one climb to the start of the next."""
    return following.start_distance - previous.end_distance


def merge_nearby_climbs(
    climbs: Sequence[ClimbSegment],
    min_distance: float = 2.0,
) -> list[ClimbSegment]:
    """Collapse climbs that start less than ``min_distance`` after the last kept one.

    Greedy left-to-right reduction. Each candidate is compared only with
    the most recently kept climb: it is appended when the gap is wide
    enough, replaces the kept climb when it scores strictly higher, and
    is dropped otherwise. Earlier kept climbs are never revisited, so a
    chain of replacements can leave a set that is not the best possible
    one.

    Args:
        climbs: Candidate climbs ordered by start distance
        min_distance: Minimum gap between consecutive climbs in km

    Returns:
        New list of kept climbs, ordered by start distance
    """
    if len(climbs) <= 1:
        return list(climbs)

    merged: list[ClimbSegment] = []

    for climb in climbs:
        if not merged or gap_between(merged[-1], climb) >= min_distance:
            merged.append(climb)
            continue

        kept = merged[-1]
        if climb.score > kept.score:
            logger.debug(
                "Climb at %.2f km (score %.1f) replaces climb at %.2f km (score %.1f)",
                climb.start_distance,
                climb.score,
                kept.start_distance,
                kept.score,
            )
            merged[-1] = climb
        else:
            logger.debug(
                "Dropped climb at %.2f km (score %.1f), too close to %.2f km",
                climb.start_distance,
                climb.score,
                kept.start_distance,
            )

    return merged
