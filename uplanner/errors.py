"""Mini README: Exception hierarchy for trajectory processing failures.

Structure:
    * UplannerError - common base so batch drivers can catch one type.
    * TrajectoryReadError - the trajectory file could not be read at all.
    * InsufficientWaypointsError - fewer than two usable waypoints remain.
    * GeometryError - the geodesy solver rejected or failed on its input.

Row-level parse problems are not exceptions; the reader logs and skips them.
"""

from __future__ import annotations

from typing import Optional


class UplannerError(Exception):
    """Base exception for all trajectory-to-plan failures."""


class TrajectoryReadError(UplannerError):
    """Raised when a trajectory source cannot be opened or decoded."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot read trajectory '{source}': {reason}")


class InsufficientWaypointsError(UplannerError):
    """Raised when a trajectory cannot yield a single segment."""

    def __init__(self, count: int, source: Optional[str] = None) -> None:
        self.count = count
        self.source = source
        label = f" in '{source}'" if source else ""
        super().__init__(
            f"Not enough waypoints after reduction{label}: {count} (need at least 2)"
        )


class GeometryError(UplannerError):
    """Raised when a geodesic solve fails or receives degenerate input."""
