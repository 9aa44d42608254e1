from __future__ import annotations

import math

import pytest

from crtsim.physics.kinematics import (
    compute_curvature_acceleration,
    compute_field_acceleration,
    compute_initial_speed,
    equivalent_field_strength,
)
from crtsim.physics.safety import DEFAULT_PLATE_SPACING, SPEED_FLOOR


def test_initial_speed_matches_energy_balance():
    assert compute_initial_speed(2000.0) == pytest.approx(2.6523e7, rel=1e-3)


def test_initial_speed_positive_and_increasing():
    potentials = [1.0, 10.0, 250.0, 2000.0, 5000.0, 1e6]
    speeds = [compute_initial_speed(v) for v in potentials]
    assert all(math.isfinite(s) and s > 0 for s in speeds)
    assert all(b > a for a, b in zip(speeds, speeds[1:]))


@pytest.mark.parametrize("potential", [0.0, -50.0, float("nan"), float("inf"), float("-inf")])
def test_initial_speed_floors_bad_potentials(potential):
    assert compute_initial_speed(potential) == SPEED_FLOOR


def test_field_acceleration_sign_follows_control():
    up = compute_field_acceleration(50.0, 0.01)
    down = compute_field_acceleration(-50.0, 0.01)
    assert up == pytest.approx(8.7935e14, rel=1e-3)
    assert down == pytest.approx(-up)
    assert compute_field_acceleration(0.0, 0.01) == 0.0


@pytest.mark.parametrize("spacing", [0.0, -0.01, float("nan")])
def test_field_acceleration_guards_plate_spacing(spacing):
    expected = compute_field_acceleration(50.0, DEFAULT_PLATE_SPACING)
    assert compute_field_acceleration(50.0, spacing) == expected


def test_field_acceleration_saturates_instead_of_overflowing():
    value = compute_field_acceleration(1e300, 1e-300)
    assert math.isfinite(value)
    assert value > 0


def test_curvature_acceleration_sign():
    assert compute_curvature_acceleration(1e-3, 1e7) > 0
    assert compute_curvature_acceleration(-1e-3, 1e7) < 0


def test_equivalent_field_reproduces_acceleration():
    speed = compute_initial_speed(2000.0)
    acceleration = compute_field_acceleration(50.0, 0.01)
    field = equivalent_field_strength(acceleration, speed)
    assert compute_curvature_acceleration(field, speed) == pytest.approx(acceleration, rel=1e-9)


def test_equivalent_field_floors_speed():
    assert math.isfinite(equivalent_field_strength(1e14, 0.0))
