"""Mini README: Trajectory sample model.

Structure:
    * Waypoint - immutable timed geodetic sample of a flight trajectory.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Waypoint:
    """Single trajectory sample.

    ``time`` is seconds since trajectory start, ``latitude``/``longitude`` are
    degrees and ``height`` is metres above ground level.
    """

    time: float
    latitude: float
    longitude: float
    height: float

    def as_location(self) -> dict:
        """Return a GeoJSON-style point with AGL altitude for plan documents."""

        return {
            "type": "Point",
            "coordinates": [self.longitude, self.latitude],
            "reference": "AGL",
            "altitude": self.height,
        }
