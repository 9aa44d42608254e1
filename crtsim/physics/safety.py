"""Numeric safety policy shared by the kinematics library and the engine.

Every renderable result has to stay finite even at extreme control values,
so clamping happens here and only here:

* on the way in: forward speed floor, plate-spacing guard, saturated scalars;
* on the way out: path sanitation and impact clamping.
"""

from __future__ import annotations

import math
import sys

import numpy as np

from ..interfaces.geometry import SceneGeometry

SPEED_FLOOR = 1e-12  # m/s
DEFAULT_PLATE_SPACING = 0.010  # m


def finite_or(value: float, fallback: float = 0.0) -> float:
    """Return ``value`` as a float, or ``fallback`` when it is NaN/inf."""

    try:
        number = float(value)
    except (TypeError, ValueError):
        return fallback
    return number if math.isfinite(number) else fallback


def saturate(value: float) -> float:
    """Map NaN to 0 and +/-inf to the largest finite float of that sign."""

    number = float(value)
    if math.isnan(number):
        return 0.0
    if math.isinf(number):
        return math.copysign(sys.float_info.max, number)
    return number


def floor_speed(speed: float) -> float:
    """Clamp a forward speed to ``SPEED_FLOOR`` so it can be divided by."""

    speed = finite_or(speed, SPEED_FLOOR)
    return speed if speed > SPEED_FLOOR else SPEED_FLOOR


def safe_plate_spacing(spacing: float) -> float:
    spacing = finite_or(spacing, DEFAULT_PLATE_SPACING)
    return spacing if spacing > 0 else DEFAULT_PLATE_SPACING


def clamp_transverse(position: float, tube_height: float) -> float:
    """Clamp a transverse coordinate to the detection-plane extent."""

    height = finite_or(tube_height, 0.0)
    if math.isnan(position):
        return height / 2
    return float(min(max(position, 0.0), height))


def sanitize_path(path: np.ndarray, geometry: SceneGeometry) -> np.ndarray:
    """Replace non-finite samples so the path can go straight to a renderer.

    Transverse NaN maps to the centerline and +/-inf to the tube walls;
    longitudinal NaN/inf map to the source and detection positions.
    """

    cleaned = np.array(path, dtype=float, copy=True)
    if np.isfinite(cleaned).all():
        return cleaned
    height = finite_or(geometry.tube_height, 0.0)
    start = finite_or(geometry.source_x, 0.0)
    end = finite_or(geometry.detection_x, start)
    cleaned[:, 0] = np.nan_to_num(cleaned[:, 0], nan=start, posinf=end, neginf=start)
    cleaned[:, 1] = np.nan_to_num(cleaned[:, 1], nan=height / 2, posinf=height, neginf=0.0)
    return cleaned


def ensure_min_samples(path: np.ndarray) -> np.ndarray:
    """Guarantee at least two samples by repeating a lone point."""

    array = np.asarray(path, dtype=float).reshape(-1, 2)
    if array.shape[0] >= 2:
        return array
    if array.shape[0] == 1:
        return np.vstack([array, array])
    return np.zeros((2, 2))
