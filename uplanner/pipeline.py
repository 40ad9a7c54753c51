"""Mini README: End-to-end trajectory-to-U-Plan pipeline.

Structure:
    * BatchReport - outcome of a multi-file run.
    * UplanGenerator - reduce, assemble and wrap trajectories into plans.

Single-trajectory calls propagate ``UplannerError`` subclasses so callers
see exactly why a plan could not be produced. ``generate_batch`` logs the
failure with the offending path and moves on to the next file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from .configuration import UplannerSettings, VolumeConfig
from .envelope import (
    PlanIdentity,
    UplanWriter,
    aircraft_type_schema,
    build_uplan_document,
    category_schema,
    parse_trajectory_filename,
    uas_performance,
)
from .errors import InsufficientWaypointsError, UplannerError
from .geodesy import REGISTRY, GeodesySolver
from .logging_utils import get_logger
from .trajectory import Waypoint, parse_trajectory_text, read_trajectory_csv, reduce_waypoints
from .volumes import Volume, VolumeAssembler

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class BatchReport:
    """Files written and files that failed during a batch run."""

    written: List[Path] = field(default_factory=list)
    failed: List[Tuple[Path, str]] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.failed


def identity_from_filename(filename: str) -> PlanIdentity:
    """Derive the plan identity encoded in a trajectory filename."""

    info = parse_trajectory_filename(filename)
    max_speed, mtom = uas_performance(info.category, info.aircraft_type)
    return PlanIdentity(
        plan_id=info.flight_id,
        plan_name=info.csv_file,
        category=category_schema(info.category),
        uas_type=aircraft_type_schema(info.aircraft_type),
        mtom=mtom,
        max_speed=max_speed,
    )


class UplanGenerator:
    """Turn trajectory files into U-Plan documents."""

    def __init__(
        self,
        *,
        config: Optional[VolumeConfig] = None,
        solver: Optional[GeodesySolver] = None,
        stride: int = 20,
        ground_elevation: float = 0.0,
        rebase_time: bool = False,
        writer: Optional[UplanWriter] = None,
    ) -> None:
        self.config = config or VolumeConfig()
        self.solver = solver or REGISTRY.create("wgs84")
        self.stride = stride
        self.ground_elevation = ground_elevation
        self.rebase_time = rebase_time
        self.writer = writer or UplanWriter()
        self._assembler = VolumeAssembler(self.config, self.solver)
        LOGGER.debug(
            "Initialised UplanGenerator stride=%s solver=%s", stride, self.solver.model_name
        )

    @classmethod
    def from_settings(
        cls, settings: UplannerSettings, *, solver: Optional[GeodesySolver] = None
    ) -> "UplanGenerator":
        """Build a generator from runtime settings."""

        return cls(
            config=settings.volume_config(),
            solver=solver or REGISTRY.create(settings.geodesy_model),
            stride=settings.compression_factor,
            ground_elevation=settings.ground_elevation,
        )

    def volumes_for(self, waypoints: Sequence[Waypoint], start_timestamp: float) -> List[Volume]:
        """Reduce ``waypoints`` and assemble their operation volumes."""

        reduced = reduce_waypoints(waypoints, self.stride)
        return self._assembler.assemble(reduced, start_timestamp)

    def build_document(
        self,
        waypoints: Sequence[Waypoint],
        start_timestamp: float,
        identity: PlanIdentity,
        *,
        overrides: Optional[Mapping[str, Any]] = None,
        source: Optional[str] = None,
    ) -> dict:
        """Produce the plan for already-loaded waypoints.

        Raises:
            InsufficientWaypointsError: Fewer than two waypoints after reduction.
            GeometryError: The geodesy solver failed on a segment.
        """

        reduced = reduce_waypoints(waypoints, self.stride)
        if len(reduced) < 2:
            raise InsufficientWaypointsError(len(reduced), source)
        volumes = self._assembler.assemble(reduced, start_timestamp)
        return build_uplan_document(identity, volumes, waypoints, overrides=overrides)

    def generate_document(
        self,
        path: Path,
        start_timestamp: float,
        *,
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> dict:
        """Read a trajectory file and produce its plan document."""

        path = Path(path)
        LOGGER.info("Processing trajectory %s", path)
        waypoints = read_trajectory_csv(
            path, ground_elevation=self.ground_elevation, rebase_time=self.rebase_time
        )
        identity = identity_from_filename(path.name)
        return self.build_document(
            waypoints, start_timestamp, identity, overrides=overrides, source=str(path)
        )

    def generate_from_text(
        self,
        text: str,
        start_timestamp: float,
        *,
        filename: str = "trajectory.csv",
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> dict:
        """Produce a plan document from CSV text held in memory."""

        waypoints = parse_trajectory_text(
            text,
            source=filename,
            ground_elevation=self.ground_elevation,
            rebase_time=self.rebase_time,
        )
        identity = identity_from_filename(filename)
        return self.build_document(
            waypoints, start_timestamp, identity, overrides=overrides, source=filename
        )

    def generate_batch(
        self,
        paths: Iterable[Path],
        start_timestamp: float,
        output_directory: Path,
        *,
        start_increment: float = 3600.0,
    ) -> BatchReport:
        """Generate and write plans for several files, continuing past failures.

        Each successfully processed file shifts the start time of the next
        one by ``start_increment`` seconds.
        """

        report = BatchReport()
        current_start = start_timestamp
        for path in map(Path, paths):
            if not path.exists():
                LOGGER.warning("Trajectory file not found, skipping: %s", path)
                report.failed.append((path, "file not found"))
                continue
            try:
                document = self.generate_document(path, current_start)
            except UplannerError as error:
                LOGGER.error("Failed to generate U-Plan for %s: %s", path, error)
                report.failed.append((path, str(error)))
                continue
            try:
                written = self.writer.write_to_directory(document, output_directory)
            except OSError as error:
                LOGGER.error("Failed to write U-Plan for %s: %s", path, error)
                report.failed.append((path, str(error)))
                continue
            report.written.append(written)
            current_start += start_increment

        LOGGER.info(
            "Batch finished: %s written, %s failed", len(report.written), len(report.failed)
        )
        return report
