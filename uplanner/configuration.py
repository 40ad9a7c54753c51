"""Mini README: Centralised configuration models and helpers for uplanner.

Structure:
    * VolumeConfig - immutable margins and thresholds used per segment.
    * UplannerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``UPLANNER_*`` environment variables (or a
    local ``.env`` file) and call ``volume_config()`` to obtain the frozen
    parameters handed to the volume assembler. The settings object is cached
    so validation happens once per process.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings

# Floor applied to every volume's lower altitude bound (metres AGL).
MINIMUM_GROUND_CLEARANCE_M = 10.0


@dataclass(frozen=True, slots=True)
class VolumeConfig:
    """Navigation margins and dominance thresholds for volume sizing."""

    tse_h: float = 15.0
    tse_v: float = 10.0
    alpha_h: float = 7.0
    alpha_v: float = 1.0
    time_buffer: float = 5.0


class UplannerSettings(BaseSettings):
    """Runtime configuration for the uplanner tooling."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    output_directory: Path = Field(
        Path("output"),
        description="Directory where generated U-Plan documents are written.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the generation service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Default port the generation service exposes.",
        ge=1,
        le=65535,
    )
    tse_h: float = Field(15.0, description="Horizontal total system error (m).", ge=0)
    tse_v: float = Field(10.0, description="Vertical total system error (m).", ge=0)
    alpha_h: float = Field(7.0, description="Horizontal dominance ratio.", gt=0)
    alpha_v: float = Field(1.0, description="Vertical dominance ratio.", gt=0)
    time_buffer: float = Field(
        5.0,
        description="Seconds added before and after each segment's time window.",
        ge=0,
    )
    compression_factor: int = Field(
        20,
        description="Keep every Nth waypoint when reducing a trajectory.",
    )
    geodesy_model: str = Field(
        "wgs84",
        description="Identifier of the geodesy solver registered in the registry.",
    )
    ground_elevation: float = Field(
        0.0,
        description=(
            "AMSL ground elevation (m) subtracted from trajectory heights so"
            " files recorded above mean sea level become AGL."
        ),
    )
    default_start_time: str = Field(
        "2025-09-01T09:00:00",
        description="ISO-8601 UTC start time used when the caller gives none.",
    )
    batch_start_increment: float = Field(
        3600.0,
        description="Seconds added to the start time for each file in a batch.",
        ge=0,
    )

    class Config:
        env_prefix = "UPLANNER_"
        env_file = ".env"
        case_sensitive = False

    @validator("output_directory", pre=True)
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Expand user directories so relative paths resolve predictably."""

        return Path(value).expanduser().resolve()

    @validator("default_start_time")
    def _check_start_time(cls, value: str) -> str:
        """Reject start times that cannot be parsed as ISO-8601."""

        parse_start_time(value)
        return value

    def volume_config(self) -> VolumeConfig:
        """Freeze the per-segment parameters for a pipeline run."""

        return VolumeConfig(
            tse_h=self.tse_h,
            tse_v=self.tse_v,
            alpha_h=self.alpha_h,
            alpha_v=self.alpha_v,
            time_buffer=self.time_buffer,
        )

    def default_start_timestamp(self) -> float:
        """Return the configured default start time as epoch seconds."""

        return parse_start_time(self.default_start_time)


def parse_start_time(value: str) -> float:
    """Convert an ISO-8601 string into epoch seconds, assuming UTC when naive."""

    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    moment = datetime.fromisoformat(text)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.timestamp()


@lru_cache()
def get_settings() -> UplannerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return UplannerSettings()
