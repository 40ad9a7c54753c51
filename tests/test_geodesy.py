"""Mini README: Tests for the geodesy registry and solvers.

Ensures the built-in solvers register, that the pyproj-backed WGS84 solver
returns reference distances, and that invalid input surfaces as
``GeometryError`` rather than leaking solver-specific exceptions.
"""

from __future__ import annotations

import pytest

from uplanner.errors import GeometryError
from uplanner.geodesy import (
    REGISTRY,
    EquirectangularSolver,
    GeodesyRegistry,
    GeodesySolver,
    Wgs84Solver,
    normalise_bearing,
)


def test_registry_contains_builtin_solvers() -> None:
    models = list(REGISTRY.available_models())
    assert "wgs84" in models
    assert "equirectangular" in models


def test_registry_instantiates_solver_case_insensitively() -> None:
    solver = REGISTRY.create("WGS84")
    assert isinstance(solver, GeodesySolver)
    assert solver.model_name == "wgs84"


def test_registry_rejects_unknown_model() -> None:
    with pytest.raises(KeyError):
        REGISTRY.create("flat-earth")


def test_registry_discovers_entry_point_solvers(monkeypatch: pytest.MonkeyPatch) -> None:
    class PluginSolver(EquirectangularSolver):
        model_name = "plugin"

    monkeypatch.setattr(
        "uplanner.geodesy.registry.load_entry_point_plugins",
        lambda group: [PluginSolver, object()],
    )
    registry = GeodesyRegistry()
    assert registry.discover() == 1
    assert list(registry.available_models()) == ["plugin"]


def test_wgs84_meridian_degree_distance() -> None:
    """One degree of latitude at the equator is ~110.574 km on WGS84."""

    solution = Wgs84Solver().inverse(0.0, 0.0, 1.0, 0.0)
    assert solution.distance == pytest.approx(110_574.4, abs=1.0)
    assert solution.bearing == pytest.approx(0.0, abs=1e-9)
    assert solution.back_bearing == pytest.approx(180.0, abs=1e-9)


def test_wgs84_direct_heads_east() -> None:
    lat, lon = Wgs84Solver().direct(40.0, -3.0, 90.0, 1000.0)
    assert lat == pytest.approx(40.0, abs=1e-4)
    assert lon > -3.0


def test_equirectangular_small_offsets() -> None:
    solver = EquirectangularSolver()
    solution = solver.inverse(40.0, -3.0, 40.0001, -3.0)
    assert solution.distance == pytest.approx(11.119, abs=1e-3)
    assert solution.bearing == pytest.approx(0.0)


@pytest.mark.parametrize("solver", [Wgs84Solver(), EquirectangularSolver()])
def test_out_of_range_latitude_raises_geometry_error(solver: GeodesySolver) -> None:
    with pytest.raises(GeometryError):
        solver.inverse(95.0, 0.0, 0.0, 0.0)
    with pytest.raises(GeometryError):
        solver.direct(float("nan"), 0.0, 0.0, 10.0)


def test_equirectangular_direct_undefined_at_pole() -> None:
    with pytest.raises(GeometryError):
        EquirectangularSolver().direct(90.0, 0.0, 45.0, 10.0)


def test_unexpected_solver_failures_are_wrapped() -> None:
    class BrokenSolver(GeodesySolver):
        model_name = "broken"

        def _solve_inverse(self, lat1, lon1, lat2, lon2):
            raise ZeroDivisionError("boom")

        def _solve_direct(self, lat, lon, bearing, distance):
            raise RuntimeError("boom")

    with pytest.raises(GeometryError):
        BrokenSolver().inverse(0.0, 0.0, 1.0, 1.0)
    with pytest.raises(GeometryError):
        BrokenSolver().direct(0.0, 0.0, 0.0, 1.0)


@pytest.mark.parametrize(
    ("bearing", "expected"), [(-90.0, 270.0), (360.0, 0.0), (450.0, 90.0), (-1e-20, 0.0)]
)
def test_normalise_bearing(bearing: float, expected: float) -> None:
    assert normalise_bearing(bearing) == pytest.approx(expected)
