"""Main entry point for Climb Tracker."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from climb_tracker.core.config import Settings, get_settings
from climb_tracker.core.exceptions import ClimbTrackerError
from climb_tracker.core.logging import configure_logging, get_logger
from climb_tracker.core.types import ClimbSegment, ProfileSummary
from climb_tracker.pipeline.processor import ClimbDetector
from climb_tracker.track.gpx_reader import load_gpx_file
from climb_tracker.track.profile import build_profile, summarize_profile
from climb_tracker.ui.labels import climb_summary_line

logger = get_logger(__name__)


def analyze_gpx(
    path: Path,
    settings: Settings,
) -> tuple[ProfileSummary, list[ClimbSegment]]:
    """Load a GPX file and detect its climbs.

    Args:
        path: GPX file to analyze
        settings: Application settings

    Returns:
        (profile summary, detected climbs)
    """
    points = load_gpx_file(path)
    summary = summarize_profile(points)
    profile = build_profile(points, settings.smoothing)
    climbs = ClimbDetector(settings).detect(profile)

    return summary, climbs


def render_text(summary: ProfileSummary, climbs: list[ClimbSegment]) -> str:
    """Human-readable report."""
    lines = [
        f"Distance: {summary.total_distance:.1f} km",
        f"Elevation gain: {summary.total_elevation_gain:.0f} m",
        f"Elevation range: {summary.min_elevation:.0f}-{summary.max_elevation:.0f} m",
        f"Climbs: {len(climbs)}",
    ]
    lines.extend(f"  {climb_summary_line(climb)}" for climb in climbs)
    return "\n".join(lines)


def render_json(summary: ProfileSummary, climbs: list[ClimbSegment]) -> str:
    """JSON report."""
    data = {
        "total_distance": summary.total_distance,
        "total_elevation_gain": summary.total_elevation_gain,
        "max_elevation": summary.max_elevation,
        "min_elevation": summary.min_elevation,
        "climbs": [climb.to_dict() for climb in climbs],
    }
    return json.dumps(data, indent=2, ensure_ascii=False)


def run(path: Path, as_json: bool = False, debug: bool = False) -> int:
    """Analyze one GPX file and print the report.

    Args:
        path: GPX file to analyze
        as_json: Print JSON instead of the text table
        debug: Log at DEBUG regardless of ``LOG_LEVEL``

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    settings = get_settings()
    configure_logging(settings.logging, debug=debug)

    try:
        summary, climbs = analyze_gpx(path, settings)
    except ClimbTrackerError as e:
        logger.error("%s", e)
        return 1

    print(render_json(summary, climbs) if as_json else render_text(summary, climbs))
    return 0


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Climb Tracker - Detect and categorize climbs in a GPX track"
    )
    parser.add_argument(
        "gpx",
        type=Path,
        help="Path to the GPX file",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    sys.exit(run(args.gpx, as_json=args.json, debug=args.debug))


if __name__ == "__main__":
    main()
