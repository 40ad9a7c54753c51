"""Mini README: Oriented rectangular buffers around segment midpoints.

Structure:
    * OrientedPolygon - closed five-vertex ring in (lon, lat) order plus bbox.
    * segment_midpoint - arithmetic mean of two endpoints.
    * build_oriented_buffer - rectangle aligned with a segment's bearing.

The rectangle is built by two direct solves along the bearing (front and
back centre points) followed by four perpendicular solves for the corners,
so its long axis follows the direction of travel on the ellipsoid.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..geodesy.base import GeodesySolver, normalise_bearing
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

Coordinate = Tuple[float, float]


def wrap_longitude(longitude: float) -> float:
    """Fold a longitude into [-180, 180)."""

    return (longitude + 180.0) % 360.0 - 180.0


@dataclass(frozen=True, slots=True)
class OrientedPolygon:
    """Closed ring of (lon, lat) vertices with its axis-aligned bounds."""

    ring: Tuple[Coordinate, ...]
    bbox: Tuple[float, float, float, float]

    @classmethod
    def from_corners(cls, corners: Tuple[Coordinate, ...]) -> "OrientedPolygon":
        """Close four corners into a ring and derive the bounding box."""

        if len(corners) != 4:
            raise ValueError(f"An oriented buffer needs 4 corners, got {len(corners)}")
        lons = [lon for lon, _ in corners]
        lats = [lat for _, lat in corners]
        return cls(
            ring=tuple(corners) + (corners[0],),
            bbox=(min(lons), min(lats), max(lons), max(lats)),
        )

    def as_geojson(self) -> dict:
        """Render the polygon as a GeoJSON geometry with bbox."""

        return {
            "type": "Polygon",
            "coordinates": [[[lon, lat] for lon, lat in self.ring]],
            "bbox": list(self.bbox),
        }


def segment_midpoint(lat1: float, lon1: float, lat2: float, lon2: float) -> Coordinate:
    """Return the planar midpoint ``(lat, lon)`` of two endpoints."""

    return (lat1 + lat2) / 2.0, (lon1 + lon2) / 2.0


def build_oriented_buffer(
    solver: GeodesySolver,
    mid_lat: float,
    mid_lon: float,
    bearing: float,
    along_track: float,
    cross_track: float,
) -> OrientedPolygon:
    """Construct the rectangle centred on a midpoint and aligned with ``bearing``.

    Args:
        solver: Geodesy primitive used for every direct solve.
        mid_lat: Latitude of the rectangle centre (degrees).
        mid_lon: Longitude of the rectangle centre (degrees).
        bearing: Direction of travel (degrees from north).
        along_track: Half-length parallel to the bearing (metres).
        cross_track: Half-width perpendicular to the bearing (metres).

    Returns:
        Polygon ordered front-left, front-right, back-right, back-left and
        closed back onto front-left.
    """

    forward = normalise_bearing(bearing)
    backward = normalise_bearing(bearing + 180.0)
    left = normalise_bearing(bearing - 90.0)
    right = normalise_bearing(bearing + 90.0)

    front_lat, front_lon = solver.direct(mid_lat, mid_lon, forward, along_track)
    back_lat, back_lon = solver.direct(mid_lat, mid_lon, backward, along_track)

    corners = []
    for origin_lat, origin_lon, side in (
        (front_lat, front_lon, left),
        (front_lat, front_lon, right),
        (back_lat, back_lon, right),
        (back_lat, back_lon, left),
    ):
        lat, lon = solver.direct(origin_lat, origin_lon, side, cross_track)
        corners.append((wrap_longitude(lon), lat))

    LOGGER.debug(
        "Oriented buffer at (%.7f, %.7f) bearing=%.2f along=%.2f cross=%.2f",
        mid_lat,
        mid_lon,
        forward,
        along_track,
        cross_track,
    )
    return OrientedPolygon.from_corners(tuple(corners))
