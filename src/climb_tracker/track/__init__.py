"""Track input: GPX reading and elevation profile construction."""

from climb_tracker.track.gpx_reader import decode_gpx, load_gpx_file, read_gpx_points
from climb_tracker.track.profile import build_profile, haversine_km, summarize_profile

__all__ = [
    "decode_gpx",
    "read_gpx_points",
    "load_gpx_file",
    "build_profile",
    "haversine_km",
    "summarize_profile",
]
