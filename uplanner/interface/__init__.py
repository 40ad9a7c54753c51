"""Mini README: Interactive interfaces for uplanner.

Exports the FastAPI application factory behind the generation service. The
command-line entry point lives in ``main_uplan_generator.py`` at the
repository root.
"""

from .web_app import create_application

__all__ = ["create_application"]
