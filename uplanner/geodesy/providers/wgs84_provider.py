"""Mini README: WGS84 ellipsoidal solver backed by pyproj.

Structure:
    * Wgs84Solver - production solver delegating to ``pyproj.Geod``.

``pyproj`` wraps GeographicLib's geodesic algorithms, so distances and
bearings agree with the reference implementation to well under a millimetre.
Note the (lon, lat) argument order ``Geod`` expects.
"""

from __future__ import annotations

from typing import Tuple

from pyproj import Geod
from pyproj.exceptions import GeodError

from ..base import GeodesySolver
from ..registry import REGISTRY
from ...errors import GeometryError


class Wgs84Solver(GeodesySolver):
    """Inverse and direct geodesic solves on the WGS84 ellipsoid."""

    model_name = "wgs84"

    def __init__(self) -> None:
        self._geod = Geod(ellps="WGS84")

    def _solve_inverse(
        self, lat1: float, lon1: float, lat2: float, lon2: float
    ) -> Tuple[float, float, float]:
        try:
            azimuth, back_azimuth, distance = self._geod.inv(lon1, lat1, lon2, lat2)
        except GeodError as error:
            raise GeometryError(str(error)) from error
        return float(distance), float(azimuth), float(back_azimuth)

    def _solve_direct(
        self, lat: float, lon: float, bearing: float, distance: float
    ) -> Tuple[float, float]:
        try:
            lon2, lat2, _ = self._geod.fwd(lon, lat, bearing, distance)
        except GeodError as error:
            raise GeometryError(str(error)) from error
        return float(lat2), float(lon2)

    def metadata(self) -> dict:
        return {"model": self.model_name, "ellipsoidal": True, "ellipsoid": "WGS84"}


REGISTRY.register(Wgs84Solver)
