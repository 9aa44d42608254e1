from __future__ import annotations

import math

import numpy as np
import pytest

from crtsim.physics import DetectionScreen, beam_offsets, compute_beam, compute_track


def test_beam_offsets_span_is_centered():
    np.testing.assert_allclose(
        beam_offsets(5, 0.002), [-0.001, -0.0005, 0.0, 0.0005, 0.001], atol=1e-15
    )


@pytest.mark.parametrize("count", [0, -3, 1])
def test_degenerate_counts_give_one_centered_particle(count):
    np.testing.assert_array_equal(beam_offsets(count), [0.0])


def test_beam_is_a_fan_of_translated_tracks(geometry, controls):
    tracks = compute_beam(geometry, controls, count=3, span=0.002)
    base = compute_track(geometry, controls)
    assert len(tracks) == 3
    for track, offset in zip(tracks, [-0.001, 0.0, 0.001]):
        assert track.num_samples == base.num_samples
        np.testing.assert_allclose(track.transverse, base.transverse + offset, atol=1e-12)


def test_zero_particle_beam_still_renders(geometry, controls):
    tracks = compute_beam(geometry, controls, count=0)
    assert len(tracks) == 1
    assert tracks[0].num_samples >= 2


def test_screen_replaces_hits_unless_accumulating(geometry, controls):
    tracks = compute_beam(geometry, controls.with_updates(deflection_potential=0.0), count=2)
    screen = DetectionScreen(geometry.tube_height)
    screen.record(tracks)
    screen.record(tracks)
    assert len(screen) == 2

    accumulating = DetectionScreen(geometry.tube_height, accumulate=True)
    accumulating.record(tracks)
    hits = accumulating.record(tracks)
    assert len(accumulating) == 4
    np.testing.assert_allclose(hits, [0.124, 0.126])
    assert accumulating.spread == pytest.approx(0.002)
    assert accumulating.mean_impact == pytest.approx(geometry.centerline)


def test_empty_screen_statistics(geometry):
    screen = DetectionScreen(geometry.tube_height)
    assert len(screen) == 0
    assert screen.spread == 0.0
    assert math.isnan(screen.mean_impact)
    assert screen.impacts.shape == (0,)


def test_screen_clear(geometry, controls):
    screen = DetectionScreen(geometry.tube_height, accumulate=True)
    screen.record(compute_beam(geometry, controls, count=4))
    screen.clear()
    assert len(screen) == 0
