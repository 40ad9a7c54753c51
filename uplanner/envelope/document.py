"""Mini README: U-Plan document assembly.

Structure:
    * PlanIdentity - identifiers and airframe data describing one plan.
    * build_uplan_document - wrap an ordered volume list into a U-Plan.
    * merge_overrides - deep-merge caller-supplied fields over the defaults.

Fields the trajectory cannot provide (contact details, registration, ...)
are filled with ``"TBD"`` placeholders so the document is structurally
complete; callers replace them through ``overrides``. Takeoff and landing
come from the first and last samples of the *unreduced* trajectory.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional, Sequence

from ..logging_utils import get_logger
from ..trajectory.models import Waypoint
from ..volumes.assembler import Volume

LOGGER = get_logger(__name__)

PLACEHOLDER = "TBD"


@dataclass(frozen=True, slots=True)
class PlanIdentity:
    """Who and what a plan describes."""

    plan_id: int
    plan_name: str
    category: str = "OPENA1"
    uas_type: str = "NONE_NOT_DECLARED"
    mtom: float = 0.0
    max_speed: float = 0.0


def merge_overrides(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Return ``base`` with ``overrides`` merged in, recursing into dictionaries."""

    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), dict):
            merged[key] = merge_overrides(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _data_identifier(sac: str = PLACEHOLDER, sic: str = PLACEHOLDER) -> Dict[str, str]:
    return {"sac": sac, "sic": sic}


def _contact_details() -> Dict[str, Any]:
    return {
        "firstName": PLACEHOLDER,
        "lastName": PLACEHOLDER,
        "phones": [PLACEHOLDER],
        "emails": ["tbd@example.com"],
    }


def _flight_details(category: str) -> Dict[str, Any]:
    return {
        "mode": "BVLOS" if "SAIL" in category else "VLOS",
        "category": category,
        "specialOperation": "",
        "privateFlight": False,
    }


def _uas(identity: PlanIdentity) -> Dict[str, Any]:
    return {
        "registrationNumber": PLACEHOLDER,
        "serialNumber": PLACEHOLDER,
        "flightCharacteristics": {
            "uasMTOM": identity.mtom,
            "uasMaxSpeed": identity.max_speed,
            "Connectivity": "LTE",
            "idTechnology": "NRID",
            "maxFlightTime": 0,
        },
        "generalCharacteristics": {
            "brand": PLACEHOLDER,
            "model": PLACEHOLDER,
            "typeCertificate": PLACEHOLDER,
            "uasType": identity.uas_type,
            "uasClass": "NONE",
            "uasDimension": "LT_1",
        },
    }


def _unknown_location() -> Dict[str, Any]:
    return {"type": "Point", "coordinates": [0.0, 0.0], "reference": "AGL", "altitude": 0.0}


def build_uplan_document(
    identity: PlanIdentity,
    volumes: Sequence[Volume],
    trajectory: Sequence[Waypoint],
    *,
    overrides: Optional[Mapping[str, Any]] = None,
    created_at: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Assemble the full U-Plan dictionary for one trajectory.

    Args:
        identity: Plan identifiers and airframe data.
        volumes: Ordered operation volumes.
        trajectory: Unreduced waypoints; first and last become takeoff/landing.
        overrides: Nested fields replacing the generated defaults.
        created_at: Creation timestamp, ``now`` in UTC when omitted.

    Raises:
        ValueError: If ``trajectory`` is empty.
    """

    if not trajectory:
        raise ValueError("Cannot build a plan without trajectory waypoints")

    moment = created_at or datetime.now(timezone.utc)
    iso_time = moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S") + "Z"

    document: Dict[str, Any] = {
        "idplan": identity.plan_id,
        "nameplan": identity.plan_name,
        "dataOwnerIdentifier": _data_identifier(),
        "dataSourceIdentifier": _data_identifier(),
        "contactDetails": _contact_details(),
        "flightDetails": _flight_details(identity.category),
        "uas": _uas(identity),
        "takeoffLocation": trajectory[0].as_location(),
        "landingLocation": trajectory[-1].as_location(),
        "gcsLocation": _unknown_location(),
        "operationVolumes": [volume.as_dict() for volume in volumes],
        "operatorId": PLACEHOLDER,
        "state": "SENT",
        "creationTime": iso_time,
        "updateTime": iso_time,
    }
    if overrides:
        document = merge_overrides(document, overrides)
    LOGGER.debug(
        "Built U-Plan '%s' with %s operation volumes", identity.plan_name, len(volumes)
    )
    return document
