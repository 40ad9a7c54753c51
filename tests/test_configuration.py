"""Mini README: Tests for runtime settings and start time parsing."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest
from pydantic import ValidationError

from uplanner.configuration import UplannerSettings, VolumeConfig, parse_start_time


def test_defaults_match_published_margins() -> None:
    config = UplannerSettings().volume_config()
    assert config == VolumeConfig(tse_h=15.0, tse_v=10.0, alpha_h=7.0, alpha_v=1.0, time_buffer=5.0)


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("UPLANNER_TSE_H", "25")
    monkeypatch.setenv("UPLANNER_COMPRESSION_FACTOR", "5")
    monkeypatch.setenv("UPLANNER_OUTPUT_DIRECTORY", str(tmp_path / "plans"))

    settings = UplannerSettings()
    assert settings.tse_h == 25.0
    assert settings.compression_factor == 5
    assert settings.output_directory == (tmp_path / "plans").resolve()


def test_volume_config_is_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        VolumeConfig().tse_h = 1.0  # type: ignore[misc]


def test_invalid_default_start_time_is_rejected() -> None:
    with pytest.raises(ValidationError):
        UplannerSettings(default_start_time="next tuesday")


def test_negative_margin_is_rejected() -> None:
    with pytest.raises(ValidationError):
        UplannerSettings(tse_v=-1.0)


def test_default_start_timestamp() -> None:
    settings = UplannerSettings(default_start_time="2025-09-01T09:00:00")
    assert settings.default_start_timestamp() == 1_756_717_200.0


@pytest.mark.parametrize(
    "value", ["2025-09-01T09:00:00", "2025-09-01T09:00:00Z", "2025-09-01T11:00:00+02:00"]
)
def test_parse_start_time_treats_naive_as_utc(value: str) -> None:
    assert parse_start_time(value) == 1_756_717_200.0


def test_parse_start_time_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        parse_start_time("soon")
