"""Mini README: Stride-based trajectory downsampling.

Structure:
    * reduce_waypoints - keep every Nth sample while preserving the endpoint.

The stride starts at the second sample: the origin sample is dropped from
the selection, and the final sample is appended whenever the stride does
not land on it. Sequences of two or fewer samples pass through untouched.
"""

from __future__ import annotations

from typing import List, Sequence

from .models import Waypoint
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


def reduce_waypoints(waypoints: Sequence[Waypoint], stride: int) -> List[Waypoint]:
    """Downsample ``waypoints`` by ``stride``, always ending at the last sample."""

    if len(waypoints) <= 2:
        return list(waypoints)
    if stride < 1:
        LOGGER.debug("Clamping stride %s to 1", stride)
        stride = 1

    reduced = list(waypoints[1::stride])
    last = waypoints[-1]
    if reduced[-1].time != last.time:
        reduced.append(last)

    LOGGER.info(
        "Reduced waypoints from %s to %s (stride=%s)", len(waypoints), len(reduced), stride
    )
    return reduced
