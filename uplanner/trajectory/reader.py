"""Mini README: Tabular trajectory ingestion.

Structure:
    * read_trajectory_csv - load waypoints from a CSV file on disk.
    * parse_trajectory_text - parse CSV text already held in memory.

Rows follow ``time, latitude, longitude, height, <ignored...>`` (simulator
exports append attitude quaternions and velocities, which are ignored).
Blank lines and lines starting with ``//`` or ``#`` are skipped. The first
row that is not numeric, if it precedes any data, is taken as the header.
Any later row that fails to parse is logged and skipped so one corrupted
sample does not discard a whole trajectory.
"""

from __future__ import annotations

import csv
import math
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .models import Waypoint
from ..errors import TrajectoryReadError
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

COMMENT_MARKERS = ("//", "#")
REQUIRED_FIELDS = 4


def _parse_row(fields: List[str]) -> Waypoint:
    if len(fields) < REQUIRED_FIELDS:
        raise ValueError(f"expected at least {REQUIRED_FIELDS} fields, got {len(fields)}")
    time, latitude, longitude, height = (float(value) for value in fields[:REQUIRED_FIELDS])
    if not all(math.isfinite(value) for value in (time, latitude, longitude, height)):
        raise ValueError("non-finite value")
    return Waypoint(time=time, latitude=latitude, longitude=longitude, height=height)


def _is_header(fields: List[str]) -> bool:
    """True when a leading field is text rather than a number."""

    for value in fields[:REQUIRED_FIELDS]:
        try:
            float(value)
        except ValueError:
            return True
    return False


def _parse_lines(
    lines: Iterable[str],
    *,
    source: str,
    ground_elevation: float,
    rebase_time: bool,
) -> List[Waypoint]:
    waypoints: List[Waypoint] = []
    content = (
        line for line in lines if line.strip() and not line.lstrip().startswith(COMMENT_MARKERS)
    )
    for row_number, fields in enumerate(csv.reader(content), start=1):
        fields = [field.strip() for field in fields]
        try:
            waypoints.append(_parse_row(fields))
        except ValueError as error:
            if row_number == 1 and _is_header(fields):
                LOGGER.debug("Skipping header row in %s: %s", source, fields)
                continue
            LOGGER.warning(
                "Skipping unparseable row %s in %s (%s): %s",
                row_number,
                source,
                error,
                ",".join(fields),
            )

    if not waypoints:
        LOGGER.warning("No waypoints parsed from %s", source)
        return waypoints

    offset = waypoints[0].time if rebase_time else 0.0
    if ground_elevation or offset:
        waypoints = [
            Waypoint(
                time=waypoint.time - offset,
                latitude=waypoint.latitude,
                longitude=waypoint.longitude,
                height=waypoint.height - ground_elevation,
            )
            for waypoint in waypoints
        ]

    first, last = waypoints[0], waypoints[-1]
    LOGGER.info("Loaded %s waypoints from %s", len(waypoints), source)
    LOGGER.debug(
        "First waypoint lat=%s lon=%s h=%s t=%s; last waypoint lat=%s lon=%s h=%s t=%s",
        first.latitude,
        first.longitude,
        first.height,
        first.time,
        last.latitude,
        last.longitude,
        last.height,
        last.time,
    )
    return waypoints


def parse_trajectory_text(
    text: str,
    *,
    source: str = "<memory>",
    ground_elevation: float = 0.0,
    rebase_time: bool = False,
) -> List[Waypoint]:
    """Parse CSV trajectory text into waypoints."""

    return _parse_lines(
        text.splitlines(),
        source=source,
        ground_elevation=ground_elevation,
        rebase_time=rebase_time,
    )


def read_trajectory_csv(
    path: Union[str, Path],
    *,
    ground_elevation: float = 0.0,
    rebase_time: bool = False,
    encoding: Optional[str] = "utf-8",
) -> List[Waypoint]:
    """Load waypoints from a trajectory CSV file.

    Args:
        path: Location of the CSV file.
        ground_elevation: AMSL ground elevation subtracted from each height.
        rebase_time: Shift times so the first sample sits at ``t=0``.
        encoding: Text encoding of the file.

    Raises:
        TrajectoryReadError: If the file cannot be opened or decoded.
    """

    path = Path(path)
    try:
        with path.open("r", encoding=encoding, newline="") as handle:
            return _parse_lines(
                handle,
                source=str(path),
                ground_elevation=ground_elevation,
                rebase_time=rebase_time,
            )
    except (OSError, UnicodeDecodeError) as error:
        raise TrajectoryReadError(str(path), str(error)) from error
