"""Mini README: Solver registry enabling interchangeable geodesy models.

Structure:
    * GeodesyRegistry - manages registration and instantiation of
      ``GeodesySolver`` implementations.

Built-in solvers register on import of ``uplanner.geodesy.providers``.
Additional packages can expose solver classes under the
``uplanner.geodesy_solvers`` entry point group; ``discover`` loads them.
"""

from __future__ import annotations

from typing import Dict, Iterable, Type

from .base import GeodesySolver
from ..logging_utils import get_logger
from ..utils.plugin_loader import load_entry_point_plugins

LOGGER = get_logger(__name__)

PLUGIN_GROUP = "uplanner.geodesy_solvers"


class GeodesyRegistry:
    """Simple registry mapping model identifiers to solver classes."""

    def __init__(self) -> None:
        self._solvers: Dict[str, Type[GeodesySolver]] = {}

    def register(self, solver: Type[GeodesySolver]) -> None:
        """Register a solver class under its ``model_name``."""

        identifier = solver.model_name.lower()
        LOGGER.debug("Registering geodesy model '%s'", identifier)
        self._solvers[identifier] = solver

    def available_models(self) -> Iterable[str]:
        """Return iterable of model identifiers for display."""

        return sorted(self._solvers.keys())

    def discover(self, group: str = PLUGIN_GROUP) -> int:
        """Register solver classes published through entry points."""

        registered = 0
        for plugin in load_entry_point_plugins(group):
            if isinstance(plugin, type) and issubclass(plugin, GeodesySolver):
                self.register(plugin)
                registered += 1
            else:
                LOGGER.warning("Ignoring entry point %r: not a GeodesySolver subclass", plugin)
        return registered

    def create(self, identifier: str) -> GeodesySolver:
        """Instantiate the solver matching the identifier."""

        solver_cls = self._solvers.get(identifier.lower())
        if not solver_cls:
            raise KeyError(f"Unknown geodesy model '{identifier}'")
        LOGGER.debug("Creating geodesy solver '%s'", identifier)
        return solver_cls()


REGISTRY = GeodesyRegistry()
