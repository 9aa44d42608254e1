from __future__ import annotations

import json
import math

import pytest

from crtsim.physics import compute_beam, sweep_deflection
from crtsim.visualization import (
    SweepPlotter,
    TrackPlotter,
    exit_velocity_arrow,
    write_sweep_summary,
)


def test_track_plot_is_written(tmp_path, geometry, controls):
    tracks = compute_beam(geometry, controls, count=4)
    artifact = TrackPlotter().plot(
        tracks,
        geometry,
        output_path=tmp_path / "beam",
        impacts=[t.impact_position for t in tracks],
    )
    assert artifact.path == tmp_path / "beam.png"
    assert artifact.path.stat().st_size > 0


def test_track_plot_without_output_returns_no_path(geometry, controls):
    artifact = TrackPlotter(max_tracks=2).plot(compute_beam(geometry, controls, count=5), geometry)
    assert artifact.path is None


def test_track_plot_requires_tracks(geometry):
    with pytest.raises(ValueError):
        TrackPlotter().plot([], geometry)


def test_sweep_chart_and_summary(tmp_path, geometry, controls):
    result = sweep_deflection(geometry, controls, [-50.0, 0.0, 50.0])
    artifact = SweepPlotter().plot(result, output_path=tmp_path / "sweep.png")
    assert artifact.path.exists()

    summary = write_sweep_summary(result, tmp_path / "sweep")
    payload = json.loads(summary.read_text(encoding="utf-8"))
    assert summary.suffix == ".json"
    assert len(payload["records"]) == 3
    assert payload["centerline"] == geometry.centerline
    assert payload["max_relative_deviation"] == pytest.approx(result.max_relative_deviation)


def test_exit_velocity_arrow_starts_at_plate_exit(geometry, controls):
    track = compute_beam(geometry, controls, count=1)[0]
    (x0, y0), (x1, y1) = exit_velocity_arrow(track, geometry, length=0.05)
    assert x0 == pytest.approx(geometry.deflection_end)
    assert geometry.centerline < y0 < track.impact_position
    slope = (y1 - y0) / (x1 - x0)
    expected = track.exit_transverse_velocity / track.initial_forward_speed
    assert slope == pytest.approx(expected, rel=1e-9)
    assert math.hypot(x1 - x0, y1 - y0) == pytest.approx(0.05)


def test_exit_velocity_arrow_handles_saturated_velocity(geometry, controls):
    track = compute_beam(geometry, controls.with_updates(deflection_potential=1e300), count=1)[0]
    tail, head = exit_velocity_arrow(track, geometry)
    assert all(math.isfinite(value) for value in (*tail, *head))


def test_track_plot_with_vectors(tmp_path, geometry, controls):
    tracks = compute_beam(geometry, controls, count=2)
    artifact = TrackPlotter().plot(tracks, geometry, output_path=tmp_path / "v.png", vectors=True)
    assert artifact.path.exists()
