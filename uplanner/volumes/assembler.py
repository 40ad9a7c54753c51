"""Mini README: Operation volume assembly for reduced trajectories.

Structure:
    * Volume - immutable 4-D operation volume (polygon, altitude, time).
    * VolumeAssembler - turns consecutive waypoint pairs into volumes.
    * generate_volumes - one-shot helper around ``VolumeAssembler``.
    * format_timestamp - ISO-8601 rendering used in plan documents.

Each segment is handled on its own: inverse solve for distance and bearing,
classification, buffer sizing, oriented polygon, altitude band around the
midpoint altitude (both bounds floored at the minimum ground clearance) and a padded
time window. A geodesy failure aborts the whole trajectory, because a gap
in the ordinals cannot be repaired afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from .buffer import OrientedPolygon, build_oriented_buffer, segment_midpoint
from .classifier import classify_segment, size_buffers
from ..configuration import MINIMUM_GROUND_CLEARANCE_M, VolumeConfig
from ..geodesy.base import GeodesySolver
from ..logging_utils import get_logger
from ..trajectory.models import Waypoint

LOGGER = get_logger(__name__)

ALTITUDE_REFERENCE = "AGL"
ALTITUDE_UNIT = "M"


def format_timestamp(timestamp: int) -> str:
    """Render epoch seconds as ``YYYY-MM-DDTHH:MM:SS`` in UTC."""

    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime("%Y-%m-%dT%H:%M:%S")


@dataclass(frozen=True, slots=True)
class Volume:
    """One operation volume covering a single trajectory segment."""

    geometry: OrientedPolygon
    altitude_min: float
    altitude_max: float
    time_begin: int
    time_end: int
    ordinal: int

    def as_dict(self) -> dict:
        """Export the volume in the U-Plan ``operationVolumes`` shape."""

        return {
            "geometry": self.geometry.as_geojson(),
            "timeBegin": format_timestamp(self.time_begin),
            "timeEnd": format_timestamp(self.time_end),
            "minAltitude": {
                "value": self.altitude_min,
                "reference": ALTITUDE_REFERENCE,
                "uom": ALTITUDE_UNIT,
            },
            "maxAltitude": {
                "value": self.altitude_max,
                "reference": ALTITUDE_REFERENCE,
                "uom": ALTITUDE_UNIT,
            },
            "ordinal": self.ordinal,
        }


class VolumeAssembler:
    """Build the ordered operation volume list for a waypoint sequence."""

    def __init__(self, config: VolumeConfig, solver: GeodesySolver) -> None:
        self.config = config
        self.solver = solver
        LOGGER.debug(
            "Initialised VolumeAssembler with %s using %s solver", config, solver.model_name
        )

    def segment_volume(
        self, wp1: Waypoint, wp2: Waypoint, start_timestamp: float, ordinal: int
    ) -> Volume:
        """Build the volume for the segment ``wp1 -> wp2``."""

        inverse = self.solver.inverse(wp1.latitude, wp1.longitude, wp2.latitude, wp2.longitude)
        horizontal_distance = inverse.distance
        vertical_distance = abs(wp2.height - wp1.height)

        segment_class = classify_segment(horizontal_distance, vertical_distance, self.config)
        sizing = size_buffers(segment_class, horizontal_distance, vertical_distance, self.config)

        mid_lat, mid_lon = segment_midpoint(
            wp1.latitude, wp1.longitude, wp2.latitude, wp2.longitude
        )
        polygon = build_oriented_buffer(
            self.solver,
            mid_lat,
            mid_lon,
            inverse.bearing,
            sizing.along_track,
            sizing.cross_track,
        )

        low, high = min(wp1.height, wp2.height), max(wp1.height, wp2.height)
        mid_altitude = (low + high) / 2.0
        altitude_min = max(mid_altitude - sizing.vertical, MINIMUM_GROUND_CLEARANCE_M)
        # the floor may lift the lower bound above a low band; keep min <= max
        altitude_max = max(mid_altitude + sizing.vertical, altitude_min)

        time_begin = int(start_timestamp + wp1.time - self.config.time_buffer)
        time_end = int(start_timestamp + wp2.time + self.config.time_buffer)

        LOGGER.debug(
            "Segment %s: %s h=%.2fm v=%.2fm alt=[%.2f, %.2f] time=[%s, %s]",
            ordinal,
            segment_class.value,
            horizontal_distance,
            vertical_distance,
            altitude_min,
            altitude_max,
            time_begin,
            time_end,
        )
        return Volume(
            geometry=polygon,
            altitude_min=altitude_min,
            altitude_max=altitude_max,
            time_begin=time_begin,
            time_end=time_end,
            ordinal=ordinal,
        )

    def assemble(self, waypoints: Sequence[Waypoint], start_timestamp: float) -> List[Volume]:
        """Return one volume per consecutive waypoint pair, in order.

        Fewer than two waypoints yields an empty list. ``GeometryError`` from
        the solver propagates and no volumes are returned.
        """

        if len(waypoints) < 2:
            LOGGER.warning("Cannot build volumes from %s waypoint(s)", len(waypoints))
            return []

        volumes = [
            self.segment_volume(wp1, wp2, start_timestamp, ordinal)
            for ordinal, (wp1, wp2) in enumerate(zip(waypoints, waypoints[1:]))
        ]
        LOGGER.info("Generated %s volumes", len(volumes))
        return volumes


def generate_volumes(
    waypoints: Sequence[Waypoint],
    start_timestamp: float,
    solver: GeodesySolver,
    config: Optional[VolumeConfig] = None,
) -> List[Volume]:
    """Assemble volumes for ``waypoints`` with a throwaway assembler."""

    return VolumeAssembler(config or VolumeConfig(), solver).assemble(waypoints, start_timestamp)
