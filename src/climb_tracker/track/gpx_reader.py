"""GPX track point extraction."""

from __future__ import annotations

import codecs
import re
from pathlib import Path

import gpxpy
import gpxpy.gpx

from climb_tracker.core.exceptions import GPXParseError
from climb_tracker.core.logging import get_logger
from climb_tracker.core.types import TrackPoint

logger = get_logger(__name__)

# Encoding named in the XML declaration, e.g. <?xml version="1.0" encoding="ISO-8859-1"?>
_XML_ENCODING = re.compile(rb"""^\s*<\?xml[^>]*?\bencoding\s*=\s*["']([A-Za-z0-9._-]+)["']""")


def decode_gpx(content: bytes) -> str:
    """Decode raw GPX bytes using the encoding the document declares.

    A UTF-8 byte order mark wins over the declaration. Without either,
    UTF-8 is assumed.

    Args:
        content: Raw file content

    Returns:
        Document text

    Raises:
        GPXParseError: If the declared encoding is unknown or the bytes do
            not decode with it
    """
    if content.startswith(codecs.BOM_UTF8):
        encoding = "utf-8-sig"
    else:
        match = _XML_ENCODING.match(content)
        encoding = match.group(1).decode("ascii") if match else "utf-8"

    try:
        return content.decode(encoding)
    except LookupError as e:
        raise GPXParseError(f"Unknown GPX encoding {encoding!r}") from e
    except UnicodeDecodeError as e:
        raise GPXParseError(f"GPX content is not valid {encoding}: {e}") from e


def read_gpx_points(content: str | bytes) -> list[TrackPoint]:
    """Parse GPX content and collect its points.

    Points of every track segment are returned in order. Route points are
    used only when the file has no track points. A missing elevation is
    read as 0 m.

    Args:
        content: GPX document as text, or raw bytes in the encoding its
            XML declaration names

    Returns:
        Track points in recording order

    Raises:
        GPXParseError: If the content is not valid GPX or holds no points
    """
    if isinstance(content, bytes):
        content = decode_gpx(content)

    try:
        gpx = gpxpy.parse(content)
    except (gpxpy.gpx.GPXException, ValueError) as e:
        logger.error("Failed to parse GPX: %s", e)
        raise GPXParseError(f"Invalid GPX file format: {e}") from e

    points = [
        _to_track_point(point)
        for track in gpx.tracks
        for segment in track.segments
        for point in segment.points
    ]

    if not points:
        points = [_to_track_point(point) for route in gpx.routes for point in route.points]

    if not points:
        raise GPXParseError("No track points found in GPX file")

    logger.debug("Read %d points from GPX", len(points))
    return points


def load_gpx_file(path: Path | str) -> list[TrackPoint]:
    """Read track points from a GPX file on disk.

    Args:
        path: Path to the .gpx file

    Returns:
        Track points in recording order

    Raises:
        GPXParseError: If the file cannot be read or parsed
    """
    path = Path(path)

    try:
        content = path.read_bytes()
    except OSError as e:
        raise GPXParseError(f"Cannot read {path}: {e}") from e

    logger.info("Loading GPX file %s", path)
    return read_gpx_points(content)


def _to_track_point(point: gpxpy.gpx.GPXTrackPoint | gpxpy.gpx.GPXRoutePoint) -> TrackPoint:
    return TrackPoint(
        latitude=point.latitude,
        longitude=point.longitude,
        elevation=point.elevation if point.elevation is not None else 0.0,
    )
