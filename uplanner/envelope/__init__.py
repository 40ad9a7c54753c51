"""Mini README: U-Plan document envelope.

Exports filename metadata parsing, the document builder and the JSON
writer that surround the operation volumes with plan metadata.
"""

from .document import PlanIdentity, build_uplan_document, merge_overrides
from .naming import (
    TrajectoryInfo,
    aircraft_type_schema,
    category_schema,
    parse_trajectory_filename,
    uas_performance,
)
from .writer import UplanWriter

__all__ = [
    "PlanIdentity",
    "TrajectoryInfo",
    "UplanWriter",
    "aircraft_type_schema",
    "build_uplan_document",
    "category_schema",
    "merge_overrides",
    "parse_trajectory_filename",
    "uas_performance",
]
