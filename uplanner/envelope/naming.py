"""Mini README: Trajectory filename conventions and UAS lookup tables.

Structure:
    * TrajectoryInfo - category, aircraft type and flight id from a filename.
    * parse_trajectory_filename - split names like ``Open A2 MR_0021_Scan.csv``.
    * category_schema / aircraft_type_schema - map to U-Plan enum values.
    * uas_performance - maximum speed and MTOM per category and airframe.

Scenario exports encode the operation category and airframe before the
first underscore (``"<category> <MR|FW>"``) and the numeric flight id in
the first all-digit underscore-delimited token.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath
from typing import Dict, Tuple

PDRA_STS = "PDRA_STS"

# (v_max m/s, MTOM kg) keyed by (category, aircraft type)
UAS_PERFORMANCE: Dict[Tuple[str, str], Tuple[float, float]] = {
    ("Open A1", "MR"): (13.0, 0.25),
    ("Open A1", "FW"): (20.0, 1.00),
    ("Open A2", "MR"): (20.0, 1.10),
    ("Open A2", "FW"): (22.0, 2.00),
    ("Open A3", "MR"): (21.0, 1.43),
    ("Open A3", "FW"): (25.0, 3.50),
    (PDRA_STS, "MR"): (23.0, 4.69),
    (PDRA_STS, "FW"): (28.0, 6.00),
    ("Specific SAIL I-II", "MR"): (19.0, 25.00),
    ("Specific SAIL I-II", "FW"): (30.0, 40.00),
    ("Specific SAIL III-IV", "MR"): (19.0, 25.00),
    ("Specific SAIL III-IV", "FW"): (30.0, 40.00),
}

CATEGORY_SCHEMA: Dict[str, str] = {
    "Open A1": "OPENA1",
    "Open A2": "OPENA2",
    "Open A3": "OPENA3",
    "Specific SAIL I-II": "SAIL_I-II",
    "Specific SAIL III-IV": "SAIL_III-IV",
    "Specific SAIL V-VI": "SAIL_V-VI",
    PDRA_STS: "SAIL_I-II",
}

AIRCRAFT_TYPE_SCHEMA: Dict[str, str] = {
    "MR": "MULTIROTOR",
    "FW": "FIXED_WING",
}


@dataclass(frozen=True, slots=True)
class TrajectoryInfo:
    """Metadata encoded in a trajectory filename."""

    category: str
    aircraft_type: str
    flight_id: int
    csv_file: str


def parse_trajectory_filename(filename: str) -> TrajectoryInfo:
    """Extract category, airframe code and flight id from a trajectory filename."""

    name = PurePath(filename).name
    category, aircraft_type = "", ""

    prefix, separator, _ = name.partition("_")
    if separator:
        head, space, tail = prefix.rpartition(" ")
        category, aircraft_type = (head, tail) if space else (prefix, "")

    if PDRA_STS in name:
        category = PDRA_STS
        marker = name.find(PDRA_STS + " ")
        if marker != -1:
            rest = name[marker + len(PDRA_STS) + 1 :]
            code, separator, _ = rest.partition("_")
            if separator:
                aircraft_type = code

    flight_id = 0
    tokens = name.split("_")
    # Only tokens enclosed by underscores on both sides are candidates.
    for token in tokens[1:-1]:
        if token.isdigit():
            flight_id = int(token)
            break

    return TrajectoryInfo(
        category=category,
        aircraft_type=aircraft_type,
        flight_id=flight_id,
        csv_file=name,
    )


def category_schema(category: str) -> str:
    """Map a filename category to the U-Plan ``flightDetails.category`` value."""

    return CATEGORY_SCHEMA.get(category, "OPENA1")


def aircraft_type_schema(code: str) -> str:
    """Map an airframe code to the U-Plan ``uasType`` value."""

    return AIRCRAFT_TYPE_SCHEMA.get(code, "NONE_NOT_DECLARED")


def uas_performance(category: str, aircraft_type: str) -> Tuple[float, float]:
    """Return ``(v_max, mtom)`` for the airframe, ``(0.0, 0.0)`` when unknown."""

    return UAS_PERFORMANCE.get((category, aircraft_type), (0.0, 0.0))
