"""Visualization-oriented interfaces."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence

from .geometry import SceneGeometry
from .tracks import Track


@dataclass(frozen=True)
class PlotArtifact:
    """Metadata describing a saved visualization asset."""

    path: Path | None


class TrackVisualizer(Protocol):
    """Protocol for classes capable of rendering tracks inside the tube."""

    def plot(
        self,
        tracks: Sequence[Track],
        geometry: SceneGeometry,
        output_path: Path | None = None,
        **kwargs,
    ) -> PlotArtifact:  # pragma: no cover - protocol definition
        ...
