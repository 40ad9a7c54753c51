"""Mini README: FastAPI-powered U-Plan generation service.

Structure:
    * TrajectoryRequest / UplanRequest - JSON payloads carrying CSV text.
    * create_application - application factory wiring the routes.

The service is a local generator: it accepts a trajectory, returns volumes
or a full U-Plan document, and never forwards anything to an external
authorisation service. Input problems map to 400, trajectories that cannot
yield a segment or fail geodesy map to 422.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..configuration import UplannerSettings, get_settings, parse_start_time
from ..errors import GeometryError, InsufficientWaypointsError
from ..geodesy import REGISTRY
from ..logging_utils import get_logger
from ..pipeline import UplanGenerator
from ..trajectory import parse_trajectory_text

LOGGER = get_logger(__name__)


class TrajectoryRequest(BaseModel):
    """Trajectory CSV text plus optional per-request overrides."""

    csv: str = Field(..., description="CSV rows: time, lat, lon, height, ...")
    start_time: Optional[str] = Field(None, description="ISO-8601 start time (UTC).")
    compression_factor: Optional[int] = Field(None, description="Reduction stride.")
    tse_h: Optional[float] = Field(None, ge=0)
    tse_v: Optional[float] = Field(None, ge=0)
    alpha_h: Optional[float] = Field(None, gt=0)
    alpha_v: Optional[float] = Field(None, gt=0)
    time_buffer: Optional[float] = Field(None, ge=0)
    ground_elevation: Optional[float] = None
    geodesy_model: Optional[str] = None


class UplanRequest(TrajectoryRequest):
    """Trajectory request that also names the plan and overrides fields."""

    filename: str = Field("trajectory.csv", description="Name encoding category and id.")
    uplan: Dict[str, Any] = Field(default_factory=dict, description="Plan field overrides.")


def _generator_for(request: TrajectoryRequest, settings: UplannerSettings) -> UplanGenerator:
    overrides = {
        key: value
        for key, value in request.dict(
            include={
                "compression_factor",
                "tse_h",
                "tse_v",
                "alpha_h",
                "alpha_v",
                "time_buffer",
                "ground_elevation",
                "geodesy_model",
            }
        ).items()
        if value is not None
    }
    effective = settings.copy(update=overrides)
    try:
        return UplanGenerator.from_settings(effective)
    except KeyError as error:
        raise HTTPException(status_code=400, detail=str(error)) from error


def _start_timestamp(request: TrajectoryRequest, settings: UplannerSettings) -> float:
    if request.start_time is None:
        return settings.default_start_timestamp()
    try:
        return parse_start_time(request.start_time)
    except ValueError as error:
        raise HTTPException(status_code=400, detail=f"Invalid start_time: {error}") from error


def create_application(settings: Optional[UplannerSettings] = None) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    app = FastAPI(title="uplanner generation service", version="0.3.0")
    settings = settings or get_settings()

    @app.get("/health")
    async def health() -> JSONResponse:
        """Liveness probe."""

        return JSONResponse({"status": "ok", "environment": settings.environment})

    @app.get("/geodesy-models")
    async def geodesy_models() -> JSONResponse:
        """List the registered geodesy solvers, their metadata and the default."""

        models = list(REGISTRY.available_models())
        return JSONResponse(
            {
                "models": models,
                "default": settings.geodesy_model,
                "details": {name: REGISTRY.create(name).metadata() for name in models},
            }
        )

    @app.post("/volumes")
    async def volumes(request: TrajectoryRequest) -> JSONResponse:
        """Return the operation volumes for a trajectory."""

        generator = _generator_for(request, settings)
        start = _start_timestamp(request, settings)
        waypoints = parse_trajectory_text(
            request.csv, source="request", ground_elevation=generator.ground_elevation
        )
        try:
            result = generator.volumes_for(waypoints, start)
        except GeometryError as error:
            raise HTTPException(status_code=422, detail=str(error)) from error
        if not result:
            raise HTTPException(
                status_code=422,
                detail=f"Not enough waypoints to build volumes ({len(waypoints)} parsed)",
            )
        LOGGER.info("Returned %s volumes for request", len(result))
        return JSONResponse({"operationVolumes": [volume.as_dict() for volume in result]})

    @app.post("/uplans")
    async def uplans(request: UplanRequest) -> JSONResponse:
        """Return a complete U-Plan document for a trajectory."""

        generator = _generator_for(request, settings)
        start = _start_timestamp(request, settings)
        try:
            document = generator.generate_from_text(
                request.csv, start, filename=request.filename, overrides=request.uplan
            )
        except (GeometryError, InsufficientWaypointsError) as error:
            raise HTTPException(status_code=422, detail=str(error)) from error
        LOGGER.info(
            "Generated U-Plan '%s' with %s volumes",
            document["nameplan"],
            len(document["operationVolumes"]),
        )
        return JSONResponse(document)

    return app
