"""Multi-particle beams and the detection screen that collects their impacts."""

from __future__ import annotations

from typing import Iterable, List

import numpy as np

from ..interfaces.controls import ControlParameters
from ..interfaces.geometry import SceneGeometry
from ..interfaces.tracks import Track
from .trajectory import TrackSimulator, compute_track_with_offset

DEFAULT_BEAM_SPAN = 0.002  # m, total transverse spread of the fan


def beam_offsets(count: int, span: float = DEFAULT_BEAM_SPAN) -> np.ndarray:
    """Evenly spaced transverse offsets centered on zero.

    A count below one is treated as a single centered particle.
    """

    count = max(1, int(count))
    indices = np.arange(count, dtype=float)
    return span * (indices - (count - 1) / 2) / max(1, count - 1)


def compute_beam(
    geometry: SceneGeometry,
    controls: ControlParameters,
    count: int,
    span: float = DEFAULT_BEAM_SPAN,
    simulator: TrackSimulator | None = None,
) -> List[Track]:
    """Compute a fan of rigidly offset tracks, one per particle."""

    return [
        compute_track_with_offset(geometry, controls, float(offset), 0.0, simulator=simulator)
        for offset in beam_offsets(count, span)
    ]


class DetectionScreen:
    """Impact positions recorded on the detection plane across firings."""

    def __init__(self, tube_height: float, accumulate: bool = False) -> None:
        self.tube_height = tube_height
        self.accumulate = accumulate
        self._impacts: list[float] = []

    def record(self, tracks: Iterable[Track]) -> np.ndarray:
        """Record the impacts of ``tracks`` and return just those impacts."""

        if not self.accumulate:
            self._impacts.clear()
        new_hits = [track.impact_position for track in tracks]
        self._impacts.extend(new_hits)
        return np.asarray(new_hits, dtype=float)

    def clear(self) -> None:
        self._impacts.clear()

    @property
    def impacts(self) -> np.ndarray:
        return np.asarray(self._impacts, dtype=float)

    @property
    def mean_impact(self) -> float:
        if not self._impacts:
            return float("nan")
        return float(np.mean(self._impacts))

    @property
    def spread(self) -> float:
        """Distance between the lowest and highest recorded impact."""

        if not self._impacts:
            return 0.0
        return float(np.ptp(self._impacts))

    def __len__(self) -> int:
        return len(self._impacts)
