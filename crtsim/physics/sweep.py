"""Impact position as a function of deflection potential, for both modes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..interfaces.controls import ControlParameters, DeflectionMode
from ..interfaces.geometry import SceneGeometry
from .trajectory import TrackSimulator, compute_track


@dataclass(frozen=True, eq=False)
class SweepResult:
    """Impacts of uniform and curved tracks over a range of potentials."""

    potentials: np.ndarray
    uniform_impacts: np.ndarray
    curved_impacts: np.ndarray
    centerline: float

    @property
    def max_relative_deviation(self) -> float:
        """Largest ``|curved - uniform| / |uniform - centerline|``.

        Potentials that leave the uniform track on the centerline are ignored;
        returns 0 when nothing is deflected.
        """

        uniform_deflection = np.abs(self.uniform_impacts - self.centerline)
        mask = uniform_deflection > 0
        if not mask.any():
            return 0.0
        gap = np.abs(self.curved_impacts - self.uniform_impacts)
        return float(np.max(gap[mask] / uniform_deflection[mask]))

    def to_records(self) -> list[dict[str, float]]:
        return [
            {"potential": float(v), "uniform": float(u), "curved": float(c)}
            for v, u, c in zip(self.potentials, self.uniform_impacts, self.curved_impacts)
        ]


def linspace_potentials(low: float, high: float, points: int) -> np.ndarray:
    if points < 2:
        raise ValueError(f"A sweep needs at least 2 points (got {points})")
    if not low < high:
        raise ValueError(f"Sweep bounds must satisfy low < high (got {low}, {high})")
    return np.linspace(low, high, points)


def sweep_deflection(
    geometry: SceneGeometry,
    controls: ControlParameters,
    potentials: Sequence[float],
    simulator: TrackSimulator | None = None,
) -> SweepResult:
    """Compute the impact of a centered particle for each deflection potential."""

    values = np.asarray(potentials, dtype=float)
    uniform = np.empty_like(values)
    curved = np.empty_like(values)
    base = controls.with_updates(lateral_offset=0.0)
    for index, potential in enumerate(values):
        for mode, target in (
            (DeflectionMode.UNIFORM_FIELD, uniform),
            (DeflectionMode.CURVED_FIELD, curved),
        ):
            track = compute_track(
                geometry,
                base.with_updates(deflection_potential=float(potential), deflection_mode=mode),
                simulator=simulator,
            )
            target[index] = track.impact_position
    return SweepResult(
        potentials=values,
        uniform_impacts=uniform,
        curved_impacts=curved,
        centerline=geometry.centerline,
    )
