"""Trajectory engine for the tube simulator.

===================================================================================
OVERVIEW
===================================================================================
Pure, stateless functions that turn control parameters into particle tracks:

    kinematics.py   potentials/fields → speeds and accelerations (leaf)
    safety.py       speed floor, spacing guard, path sanitation, impact clamp
    trajectory.py   TrackSimulator, compute_track, compute_track_with_offset
    beam.py         beam_offsets, compute_beam, DetectionScreen
    sweep.py        sweep_deflection → SweepResult (uniform vs curved)
    readouts.py     describe_track → dict of live readout values

Data flows one way: callers pass a SceneGeometry and ControlParameters in and
get a fresh Track back. Nothing here performs I/O or keeps state between
calls, with the exception of DetectionScreen, which the caller owns.

===================================================================================
UNITS & SIGN CONVENTION
===================================================================================
SI throughout (m, V, m/s, m/s^2, T). A positive deflection potential moves
the particle towards larger transverse coordinates, which inverts the raw
electron-charge physics on purpose.

===================================================================================
"""

from .beam import DetectionScreen, beam_offsets, compute_beam
from .kinematics import (
    compute_curvature_acceleration,
    compute_field_acceleration,
    compute_initial_speed,
    equivalent_field_strength,
)
from .readouts import describe_track
from .sweep import SweepResult, linspace_potentials, sweep_deflection
from .trajectory import TrackSimulator, compute_track, compute_track_with_offset

__all__ = [
    "compute_initial_speed",
    "compute_field_acceleration",
    "compute_curvature_acceleration",
    "equivalent_field_strength",
    "TrackSimulator",
    "compute_track",
    "compute_track_with_offset",
    "beam_offsets",
    "compute_beam",
    "DetectionScreen",
    "SweepResult",
    "linspace_potentials",
    "sweep_deflection",
    "describe_track",
]
