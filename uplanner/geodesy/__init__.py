"""Mini README: Geodesy subsystem package initialiser.

The package is divided into ``base`` for the solver interface, ``registry``
for model lookup and ``providers`` for concrete solvers (pyproj WGS84 and a
spherical test approximation).
"""

from .base import GeodesySolver, InverseSolution, normalise_bearing
from .registry import GeodesyRegistry, REGISTRY
from . import providers  # noqa: F401  # ensure built-in solvers register on import
from .providers import EquirectangularSolver, Wgs84Solver

__all__ = [
    "EquirectangularSolver",
    "GeodesyRegistry",
    "GeodesySolver",
    "InverseSolution",
    "REGISTRY",
    "Wgs84Solver",
    "normalise_bearing",
]
