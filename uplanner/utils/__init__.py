"""Mini README: Utility helper functions for uplanner.

Currently exports the entry point plugin loader used to discover external
geodesy solvers.
"""

from .plugin_loader import load_entry_point_plugins

__all__ = ["load_entry_point_plugins"]
