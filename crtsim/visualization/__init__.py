"""Visualization helpers for tracks and deflection sweeps.

tracks.py:
    TrackPlotter - Side view of the tube: plates, detection plane, track
    polylines, impact markers and (optionally) accumulated screen hits.
    exit_velocity_arrow(track, geometry) - Optional velocity overlay at the
    plate exit.

sweep.py:
    SweepPlotter - Impact position vs deflection potential for the uniform
    and curved modes.
    write_sweep_summary(result, path) - JSON companion to the chart.

Both render with the headless ``Agg`` backend and return a PlotArtifact.
"""

from .sweep import SweepPlotter, write_sweep_summary
from .tracks import TrackPlotter, exit_velocity_arrow

__all__ = ["TrackPlotter", "SweepPlotter", "write_sweep_summary", "exit_velocity_arrow"]
