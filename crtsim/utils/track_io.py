"""Helpers for saving, listing and loading computed track bundles."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

import numpy as np

from ..interfaces.controls import DeflectionMode
from ..interfaces.tracks import Track
from .paths import coerce_data_path


def list_track_files(directory: str | Path, pattern: str = "*.npz") -> List[Path]:
    root = Path(directory)
    if not root.exists():
        return []
    return sorted(root.glob(pattern))


def save_track_bundle(
    tracks: Sequence[Track], path: str | Path, data_root: str | Path | None = None
) -> Path:
    """Persist tracks sharing one sample count to a single ``.npz`` file."""

    if not tracks:
        raise ValueError("Cannot save an empty track bundle")
    lengths = {track.num_samples for track in tracks}
    if len(lengths) != 1:
        raise ValueError(f"Tracks in a bundle must share a sample count (got {sorted(lengths)})")

    target = coerce_data_path(path, ".npz", data_root)
    target.parent.mkdir(parents=True, exist_ok=True)
    np.savez(
        target,
        paths=np.stack([track.path for track in tracks], axis=0),
        impacts=np.array([track.impact_position for track in tracks]),
        forward_speeds=np.array([track.initial_forward_speed for track in tracks]),
        entry_velocities=np.array([track.entry_transverse_velocity for track in tracks]),
        exit_velocities=np.array([track.exit_transverse_velocity for track in tracks]),
        modes=np.array([track.mode.value for track in tracks]),
    )
    return target


def load_track_bundle(path: str | Path, data_root: str | Path | None = None) -> List[Track]:
    """Load tracks saved with :func:`save_track_bundle`."""

    target = coerce_data_path(path, data_root=data_root)
    if not target.exists():
        raise FileNotFoundError(f"Track bundle not found: {target}")
    if target.suffix != ".npz":
        raise ValueError(f"Unsupported track bundle format: {target.suffix}")

    with np.load(target, allow_pickle=False) as data:
        paths = data["paths"]
        count = paths.shape[0]
        modes = data["modes"] if "modes" in data else np.full(count, "uniform")
        return [
            Track(
                path=paths[index],
                initial_forward_speed=float(data["forward_speeds"][index]),
                entry_transverse_velocity=float(data["entry_velocities"][index]),
                exit_transverse_velocity=float(data["exit_velocities"][index]),
                impact_position=float(data["impacts"][index]),
                mode=DeflectionMode.parse(str(modes[index])),
            )
            for index in range(count)
        ]
