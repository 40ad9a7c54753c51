"""Mini README: Core package initializer for uplanner.

uplanner converts sampled drone trajectories into the 4-D operation
volumes (oriented polygon x altitude band x time window) of a U-Plan, the
flight plan document submitted to U-space authorisation services.

Sub-packages:
    * trajectory - CSV ingestion and stride reduction.
    * geodesy - solver interface, registry and providers.
    * volumes - segment classification, oriented buffers, volume assembly.
    * envelope - plan metadata, document assembly and JSON output.
    * interface - FastAPI generation service.
"""

from .logging_utils import get_logger

__version__ = "0.3.0"

__all__ = ["get_logger"]
