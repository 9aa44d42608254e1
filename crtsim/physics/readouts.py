"""Human-facing summary values for a computed track."""

from __future__ import annotations

from typing import Any

from ..interfaces.controls import ControlParameters
from ..interfaces.geometry import SceneGeometry
from ..interfaces.tracks import Track
from .kinematics import compute_field_acceleration


def describe_track(
    track: Track, geometry: SceneGeometry, controls: ControlParameters
) -> dict[str, Any]:
    """Collect the live readouts shown next to the tube."""

    return {
        "mode": track.mode.value,
        "impact_position_m": track.impact_position,
        "deflection_m": track.impact_position - geometry.centerline,
        "initial_speed_m_s": track.initial_forward_speed,
        "field_acceleration_m_s2": compute_field_acceleration(
            controls.deflection_potential, geometry.plate_spacing
        ),
        "entry_transverse_velocity_m_s": track.entry_transverse_velocity,
        "exit_transverse_velocity_m_s": track.exit_transverse_velocity,
        "samples": track.num_samples,
    }
