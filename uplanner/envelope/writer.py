"""Mini README: Persist U-Plan documents to disk.

Structure:
    * UplanWriter - serialises plan dictionaries as indented JSON files.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class UplanWriter:
    """Write plan documents using the ``Uplan_<id>.json`` naming scheme."""

    def __init__(self, *, indent: int = 4) -> None:
        self.indent = indent

    @staticmethod
    def filename_for(plan_id: int) -> str:
        """Return the conventional output filename for a plan id."""

        return f"Uplan_{plan_id}.json"

    def write(self, document: Dict[str, Any], destination: Path) -> Path:
        """Write ``document`` to ``destination`` creating parent directories."""

        destination.parent.mkdir(parents=True, exist_ok=True)
        with destination.open("w", encoding="utf-8") as handle:
            json.dump(document, handle, indent=self.indent)
            handle.write("\n")
        LOGGER.info(
            "Saved U-Plan with %s volumes to %s",
            len(document.get("operationVolumes", [])),
            destination,
        )
        return destination

    def write_to_directory(self, document: Dict[str, Any], output_directory: Path) -> Path:
        """Write ``document`` into ``output_directory`` named after its ``idplan``."""

        return self.write(document, output_directory / self.filename_for(document["idplan"]))
