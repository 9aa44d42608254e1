"""Shared data structures for computed particle tracks."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .controls import DeflectionMode


@dataclass(frozen=True, eq=False)
class Track:
    """One computed trajectory for a single particle and parameter set."""

    path: np.ndarray  # shape: (num_samples, 2) -> (longitudinal, transverse)
    initial_forward_speed: float
    entry_transverse_velocity: float
    exit_transverse_velocity: float
    impact_position: float
    mode: DeflectionMode = DeflectionMode.UNIFORM_FIELD

    def __post_init__(self) -> None:
        path = np.array(self.path, dtype=float)
        if path.ndim != 2 or path.shape[1] != 2 or path.shape[0] < 2:
            raise ValueError("Track path must have shape (N >= 2, 2)")
        path.setflags(write=False)
        object.__setattr__(self, "path", path)

    @property
    def num_samples(self) -> int:
        return self.path.shape[0]

    @property
    def longitudinal(self) -> np.ndarray:
        return self.path[:, 0]

    @property
    def transverse(self) -> np.ndarray:
        return self.path[:, 1]

    def shifted(self, delta: float, tube_height: float) -> "Track":
        """Rigidly translate the track along the transverse axis."""

        path = self.path.copy()
        path[:, 1] += delta
        impact = float(np.clip(self.impact_position + delta, 0.0, tube_height))
        return Track(
            path=path,
            initial_forward_speed=self.initial_forward_speed,
            entry_transverse_velocity=self.entry_transverse_velocity,
            exit_transverse_velocity=self.exit_transverse_velocity,
            impact_position=impact,
            mode=self.mode,
        )
