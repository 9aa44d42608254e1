from __future__ import annotations

import numpy as np
import pytest

from crtsim.physics import linspace_potentials, sweep_deflection


def test_sweep_compares_both_modes(geometry, controls):
    potentials = linspace_potentials(-100.0, 100.0, 5)
    result = sweep_deflection(geometry, controls, potentials)

    assert result.uniform_impacts.shape == (5,)
    assert result.curved_impacts.shape == (5,)
    assert result.uniform_impacts[2] == geometry.centerline
    assert result.curved_impacts[2] == geometry.centerline
    assert np.all(np.diff(result.uniform_impacts) > 0)
    assert result.max_relative_deviation < 0.03


def test_sweep_ignores_controls_offset(geometry, controls):
    shifted = controls.with_updates(lateral_offset=0.01)
    result = sweep_deflection(geometry, shifted, [0.0])
    assert result.uniform_impacts[0] == geometry.centerline


def test_relative_deviation_without_deflection(geometry, controls):
    result = sweep_deflection(geometry, controls, [0.0, 0.0])
    assert result.max_relative_deviation == 0.0


def test_sweep_records(geometry, controls):
    records = sweep_deflection(geometry, controls, [0.0, 25.0]).to_records()
    assert [r["potential"] for r in records] == [0.0, 25.0]
    assert set(records[0]) == {"potential", "uniform", "curved"}


@pytest.mark.parametrize("low,high,points", [(0.0, 10.0, 1), (10.0, 10.0, 3), (5.0, -5.0, 3)])
def test_invalid_sweep_bounds(low, high, points):
    with pytest.raises(ValueError):
        linspace_potentials(low, high, points)
