"""Mini README: Concrete geodesy solver implementations.

New solvers should subclass ``GeodesySolver`` and call
``REGISTRY.register`` during module import to stay discoverable.
"""

from .equirectangular_provider import EquirectangularSolver
from .wgs84_provider import Wgs84Solver

__all__ = ["EquirectangularSolver", "Wgs84Solver"]
