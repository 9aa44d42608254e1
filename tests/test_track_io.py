from __future__ import annotations

import numpy as np
import pytest

from crtsim.interfaces import DeflectionMode
from crtsim.physics import compute_beam, compute_track
from crtsim.utils.track_io import list_track_files, load_track_bundle, save_track_bundle


def test_bundle_preserves_tracks(tmp_path, geometry, controls):
    tracks = compute_beam(geometry, controls.with_updates(deflection_mode="curved"), count=3)
    target = save_track_bundle(tracks, tmp_path / "beam")
    assert target.suffix == ".npz"

    loaded = load_track_bundle(target)
    assert len(loaded) == 3
    for original, restored in zip(tracks, loaded):
        np.testing.assert_array_equal(original.path, restored.path)
        assert restored.impact_position == original.impact_position
        assert restored.exit_transverse_velocity == original.exit_transverse_velocity
        assert restored.mode is DeflectionMode.CURVED_FIELD


def test_list_track_files(tmp_path, geometry, controls):
    save_track_bundle([compute_track(geometry, controls)], tmp_path / "b.npz")
    save_track_bundle([compute_track(geometry, controls)], tmp_path / "a.npz")
    assert [path.name for path in list_track_files(tmp_path)] == ["a.npz", "b.npz"]
    assert list_track_files(tmp_path / "missing") == []


def test_empty_bundle_is_rejected(tmp_path):
    with pytest.raises(ValueError):
        save_track_bundle([], tmp_path / "empty.npz")


def test_mixed_sample_counts_are_rejected(tmp_path, geometry, controls):
    uniform = compute_track(geometry, controls)
    curved = compute_track(geometry, controls.with_updates(deflection_mode="curved"))
    with pytest.raises(ValueError):
        save_track_bundle([uniform, curved], tmp_path / "mixed.npz")


def test_missing_bundle_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_track_bundle(tmp_path / "nope.npz")


def test_unsupported_suffix_raises(tmp_path):
    target = tmp_path / "tracks.csv"
    target.write_text("x,y\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_track_bundle(target)
