"""Mini README: Abstract interface for the geodesic primitives.

Structure:
    * InverseSolution - distance and forward/back bearings between two points.
    * GeodesySolver - abstract base exposing ``inverse`` and ``direct`` solves.
    * normalise_bearing - fold any bearing into the [0, 360) range.

Concrete solvers implement ``_solve_inverse`` and ``_solve_direct``; the
public methods validate coordinates first and translate solver failures into
``GeometryError`` so callers only ever handle one exception type.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import NamedTuple, Tuple

from ..errors import GeometryError
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class InverseSolution(NamedTuple):
    """Result of the inverse geodesic problem."""

    distance: float
    bearing: float
    back_bearing: float


def normalise_bearing(bearing: float) -> float:
    """Return the equivalent bearing in degrees within [0, 360)."""

    folded = bearing % 360.0
    return 0.0 if folded == 360.0 else folded


def _check_point(latitude: float, longitude: float) -> None:
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        raise GeometryError(f"Non-finite coordinate ({latitude}, {longitude})")
    if not -90.0 <= latitude <= 90.0:
        raise GeometryError(f"Latitude {latitude} outside [-90, 90]")


class GeodesySolver(ABC):
    """Base interface for inverse and direct geodesic computations."""

    model_name: str = "generic"

    def inverse(self, lat1: float, lon1: float, lat2: float, lon2: float) -> InverseSolution:
        """Distance (m) and bearings (deg) between two points."""

        _check_point(lat1, lon1)
        _check_point(lat2, lon2)
        try:
            distance, bearing, back_bearing = self._solve_inverse(lat1, lon1, lat2, lon2)
        except GeometryError:
            raise
        except (ArithmeticError, ValueError, RuntimeError) as error:
            raise GeometryError(
                f"{self.model_name} inverse solve failed for "
                f"({lat1}, {lon1}) -> ({lat2}, {lon2}): {error}"
            ) from error
        if not all(math.isfinite(value) for value in (distance, bearing, back_bearing)):
            raise GeometryError(
                f"{self.model_name} inverse solve returned non-finite values for "
                f"({lat1}, {lon1}) -> ({lat2}, {lon2})"
            )
        return InverseSolution(distance, normalise_bearing(bearing), normalise_bearing(back_bearing))

    def direct(self, lat: float, lon: float, bearing: float, distance: float) -> Tuple[float, float]:
        """Destination ``(lat, lon)`` after travelling ``distance`` metres on ``bearing``."""

        _check_point(lat, lon)
        if not (math.isfinite(bearing) and math.isfinite(distance)):
            raise GeometryError(f"Non-finite bearing/distance ({bearing}, {distance})")
        try:
            lat2, lon2 = self._solve_direct(lat, lon, normalise_bearing(bearing), distance)
        except GeometryError:
            raise
        except (ArithmeticError, ValueError, RuntimeError) as error:
            raise GeometryError(
                f"{self.model_name} direct solve failed from ({lat}, {lon}) "
                f"bearing={bearing} distance={distance}: {error}"
            ) from error
        if not (math.isfinite(lat2) and math.isfinite(lon2)):
            raise GeometryError(
                f"{self.model_name} direct solve returned non-finite destination from ({lat}, {lon})"
            )
        return lat2, lon2

    @abstractmethod
    def _solve_inverse(
        self, lat1: float, lon1: float, lat2: float, lon2: float
    ) -> Tuple[float, float, float]:
        """Return ``(distance, bearing_1_to_2, bearing_2_to_1)``."""

    @abstractmethod
    def _solve_direct(
        self, lat: float, lon: float, bearing: float, distance: float
    ) -> Tuple[float, float]:
        """Return the destination ``(lat, lon)``."""

    def metadata(self) -> dict:
        """Return diagnostic metadata for service responses."""

        return {"model": self.model_name, "ellipsoidal": False}
