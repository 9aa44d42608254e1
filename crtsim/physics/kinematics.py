"""Scalar kinematics: potentials and fields to speeds and accelerations.

Sign convention: the deflection sign is chosen so that a positive control
value pushes the electron towards larger transverse coordinates ("up"). That
is the opposite of what the negative electron charge would do on its own, so
every deflection formula uses ``DEFLECTION_CHARGE = -ELECTRON_CHARGE``.
"""

from __future__ import annotations

import math

from .safety import SPEED_FLOOR, finite_or, floor_speed, safe_plate_spacing, saturate

ELEMENTARY_CHARGE = 1.602e-19  # C
ELECTRON_CHARGE = -ELEMENTARY_CHARGE
ELECTRON_MASS = 9.109e-31  # kg
DEFLECTION_CHARGE = -ELECTRON_CHARGE


def compute_initial_speed(accelerating_potential: float) -> float:
    """Forward speed gained by falling through ``accelerating_potential`` volts.

    ``q V = m v^2 / 2`` with the charge magnitude. Non-positive or non-finite
    potentials return ``SPEED_FLOOR`` instead of zero.
    """

    potential = finite_or(accelerating_potential)
    if potential <= 0:
        return SPEED_FLOOR
    # factored so huge potentials do not overflow before the square root
    return floor_speed(math.sqrt(2.0 * ELEMENTARY_CHARGE / ELECTRON_MASS) * math.sqrt(potential))


def compute_field_acceleration(deflection_potential: float, plate_spacing: float) -> float:
    """Transverse acceleration between plates held ``deflection_potential`` apart.

    ``E = V / d`` and ``a = q E / m``. A zero, negative or non-finite spacing
    falls back to the default plate spacing.
    """

    field = finite_or(deflection_potential) / safe_plate_spacing(plate_spacing)
    return saturate(DEFLECTION_CHARGE * field / ELECTRON_MASS)


def compute_curvature_acceleration(field_strength: float, forward_speed: float) -> float:
    # a = q v B / m for a field perpendicular to the plane of motion
    return saturate(DEFLECTION_CHARGE * forward_speed * field_strength / ELECTRON_MASS)


def equivalent_field_strength(acceleration: float, forward_speed: float) -> float:
    """Field giving the same instantaneous acceleration at ``forward_speed``.

    Lets the curved-field mode be compared against the uniform-field mode for
    the same deflection control. This is a pedagogical mapping, not a
    physical equivalence.
    """

    speed = floor_speed(forward_speed)
    return saturate(acceleration * ELECTRON_MASS / (DEFLECTION_CHARGE * speed))
