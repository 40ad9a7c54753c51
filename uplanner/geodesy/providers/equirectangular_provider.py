"""Mini README: Deterministic spherical approximation for tests.

Structure:
    * EquirectangularSolver - planar projection at the mean latitude.

This solver treats the Earth as a sphere of mean radius and projects small
offsets onto a local equirectangular plane. It is accurate to a few
centimetres over the tens-of-metres segments found in drone trajectories,
but it is NOT an ellipsoidal model and must not be used to produce plans
for submission. Its value is reproducibility: expected test geometry can be
computed by hand.
"""

from __future__ import annotations

import math
from typing import Tuple

from ..base import GeodesySolver
from ..registry import REGISTRY
from ...errors import GeometryError

MEAN_EARTH_RADIUS_M = 6_371_008.8


class EquirectangularSolver(GeodesySolver):
    """Planar approximation with a spherical Earth radius."""

    model_name = "equirectangular"

    def __init__(self, radius: float = MEAN_EARTH_RADIUS_M) -> None:
        self.radius = radius

    def _solve_inverse(
        self, lat1: float, lon1: float, lat2: float, lon2: float
    ) -> Tuple[float, float, float]:
        mean_lat = math.radians((lat1 + lat2) / 2.0)
        delta_lon = (lon2 - lon1 + 180.0) % 360.0 - 180.0
        east = math.radians(delta_lon) * math.cos(mean_lat) * self.radius
        north = math.radians(lat2 - lat1) * self.radius
        distance = math.hypot(east, north)
        bearing = math.degrees(math.atan2(east, north))
        return distance, bearing, bearing + 180.0

    def _solve_direct(
        self, lat: float, lon: float, bearing: float, distance: float
    ) -> Tuple[float, float]:
        cos_lat = math.cos(math.radians(lat))
        if cos_lat < 1e-12:
            raise GeometryError(f"Direct solve undefined at the pole (lat={lat})")
        theta = math.radians(bearing)
        north = distance * math.cos(theta)
        east = distance * math.sin(theta)
        lat2 = lat + math.degrees(north / self.radius)
        lon2 = lon + math.degrees(east / (self.radius * cos_lat))
        return lat2, lon2


REGISTRY.register(EquirectangularSolver)
