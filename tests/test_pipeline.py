"""Mini README: Tests for the end-to-end generation pipeline.

Uses the equirectangular solver to keep runs deterministic and checks
batch bookkeeping: files written, files skipped and the per-file start
time increment.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from uplanner.configuration import UplannerSettings, parse_start_time
from uplanner.errors import InsufficientWaypointsError, TrajectoryReadError
from uplanner.envelope import UplanWriter
from uplanner.geodesy import EquirectangularSolver
from uplanner.pipeline import UplanGenerator, identity_from_filename

START = parse_start_time("2025-09-01T09:00:00")


def _write_trajectory(directory: Path, name: str, count: int = 45) -> Path:
    rows = ["time,lat,lon,h"] + [
        f"{index},{39.47 + index * 1e-5:.6f},-0.330000,{min(index * 2.0, 60.0)}"
        for index in range(count)
    ]
    path = directory / name
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    return path


@pytest.fixture()
def generator() -> UplanGenerator:
    return UplanGenerator(solver=EquirectangularSolver(), stride=20)


def test_identity_from_filename() -> None:
    identity = identity_from_filename("Open A2 MR_0021_Scan.csv")
    assert identity.plan_id == 21
    assert identity.category == "OPENA2"
    assert identity.uas_type == "MULTIROTOR"
    assert (identity.max_speed, identity.mtom) == (20.0, 1.10)


def test_generate_document_reduces_before_assembling(
    tmp_path: Path, generator: UplanGenerator
) -> None:
    path = _write_trajectory(tmp_path, "Open A2 MR_0021_Scan.csv")
    document = generator.generate_document(path, START)

    volumes = document["operationVolumes"]
    assert [volume["ordinal"] for volume in volumes] == [0, 1, 2]
    assert volumes[0]["timeBegin"] == "2025-09-01T08:59:56"
    assert volumes[-1]["timeEnd"] == "2025-09-01T09:00:49"
    # takeoff comes from the unreduced trajectory
    assert document["takeoffLocation"]["coordinates"] == [-0.33, 39.47]


def test_single_waypoint_trajectory_is_insufficient(
    tmp_path: Path, generator: UplanGenerator
) -> None:
    path = _write_trajectory(tmp_path, "Open A1 MR_0003_Hover.csv", count=1)
    with pytest.raises(InsufficientWaypointsError) as excinfo:
        generator.generate_document(path, START)
    assert excinfo.value.count == 1


def test_missing_file_propagates_read_error(tmp_path: Path, generator: UplanGenerator) -> None:
    with pytest.raises(TrajectoryReadError):
        generator.generate_document(tmp_path / "absent.csv", START)


def test_generate_from_text_applies_overrides(generator: UplanGenerator) -> None:
    text = "0,40,-3,0\n10,40.0001,-3,50\n40,40.0001,-3,50\n"
    document = generator.generate_from_text(
        text, 1000, filename="Open A2 FW_0005_Hop.csv", overrides={"operatorId": "OP-5"}
    )
    assert document["idplan"] == 5
    assert document["operatorId"] == "OP-5"
    # the origin sample falls outside the stride, leaving one segment
    assert len(document["operationVolumes"]) == 1


def test_batch_skips_failures_and_increments_start(
    tmp_path: Path, generator: UplanGenerator
) -> None:
    first = _write_trajectory(tmp_path, "Open A2 MR_0021_Scan.csv")
    short = _write_trajectory(tmp_path, "Open A1 MR_0003_Hover.csv", count=1)
    second = _write_trajectory(tmp_path, "Open A1 FW_0022_Line.csv")
    missing = tmp_path / "Open A3 MR_0099_Gone.csv"
    output = tmp_path / "out"

    report = generator.generate_batch(
        [first, missing, short, second], START, output, start_increment=3600.0
    )

    assert report.written == [output / "Uplan_21.json", output / "Uplan_22.json"]
    assert [path for path, _ in report.failed] == [missing, short]
    assert not report.succeeded

    later = json.loads((output / "Uplan_22.json").read_text(encoding="utf-8"))
    assert later["operationVolumes"][0]["timeBegin"] == "2025-09-01T09:59:56"


def test_from_settings_uses_configured_model_and_stride() -> None:
    settings = UplannerSettings(geodesy_model="equirectangular", compression_factor=5, tse_h=3.0)
    generator = UplanGenerator.from_settings(settings)
    assert generator.solver.model_name == "equirectangular"
    assert generator.stride == 5
    assert generator.config.tse_h == 3.0


def test_from_settings_rejects_unknown_model() -> None:
    with pytest.raises(KeyError):
        UplanGenerator.from_settings(UplannerSettings(geodesy_model="flat-earth"))


def test_batch_continues_past_unwritable_destination(tmp_path: Path) -> None:
    class FailsOnceWriter(UplanWriter):
        def __init__(self) -> None:
            super().__init__()
            self.calls = 0

        def write(self, document, destination):
            self.calls += 1
            if self.calls == 1:
                raise PermissionError(f"read-only destination {destination}")
            return super().write(document, destination)

    generator = UplanGenerator(
        solver=EquirectangularSolver(), stride=20, writer=FailsOnceWriter()
    )
    first = _write_trajectory(tmp_path, "Open A2 MR_0021_Scan.csv")
    second = _write_trajectory(tmp_path, "Open A1 FW_0022_Line.csv")
    output = tmp_path / "out"

    report = generator.generate_batch([first, second], START, output, start_increment=3600.0)

    assert [path for path, _ in report.failed] == [first]
    assert report.written == [output / "Uplan_22.json"]
    written = json.loads((output / "Uplan_22.json").read_text(encoding="utf-8"))
    # the failed write does not consume a start slot
    assert written["operationVolumes"][0]["timeBegin"] == "2025-09-01T08:59:56"
