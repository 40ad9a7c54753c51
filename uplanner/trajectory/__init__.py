"""Mini README: Trajectory ingestion and reduction.

Exports the waypoint model, the CSV reader and the stride reducer that turn
a raw simulator export into the sparse sample list volumes are built from.
"""

from .models import Waypoint
from .reader import parse_trajectory_text, read_trajectory_csv
from .reducer import reduce_waypoints

__all__ = ["Waypoint", "parse_trajectory_text", "read_trajectory_csv", "reduce_waypoints"]
