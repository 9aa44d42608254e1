"""Side-view rendering of the tube with computed tracks."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import matplotlib

matplotlib.use("Agg")  # ensure headless-friendly backend

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Rectangle

from ..interfaces.geometry import SceneGeometry
from ..interfaces.tracks import Track
from ..interfaces.visualization import PlotArtifact, TrackVisualizer
from ..utils.paths import coerce_data_path

_PLATE_THICKNESS = 0.002  # m, drawing only
_VECTOR_COLOR = "#ffc878"


def exit_velocity_arrow(
    track: Track, geometry: SceneGeometry, length: float | None = None
) -> tuple[tuple[float, float], tuple[float, float]]:
    """Tail and head of the exit-velocity arrow drawn at the plate exit.

    The arrow points along ``(initial_forward_speed, exit_transverse_velocity)``
    and is ``length`` meters long (a quarter of the drift region by default).
    """

    x0 = geometry.deflection_end
    y0 = float(np.interp(x0, track.longitudinal, track.transverse))
    if length is None:
        length = 0.25 * max(geometry.detection_x - x0, 0.0) or 0.02
    vx, vy = track.initial_forward_speed, track.exit_transverse_velocity
    scale = max(abs(vx), abs(vy))
    if scale == 0 or not np.isfinite(scale):
        ux, uy = 1.0, 0.0
    else:
        ux, uy = vx / scale, vy / scale
        norm = float(np.hypot(ux, uy))
        ux, uy = ux / norm, uy / norm
    return (x0, y0), (x0 + length * ux, y0 + length * uy)


class TrackPlotter(TrackVisualizer):
    """Static plotter for tracks inside the tube, in physical units."""

    def __init__(
        self,
        max_tracks: int = 50,
        cmap: str = "plasma",
        figsize: tuple[float, float] = (8, 4),
    ) -> None:
        self.max_tracks = max_tracks
        self.cmap = plt.get_cmap(cmap)
        self.figsize = figsize

    def plot(
        self,
        tracks: Sequence[Track],
        geometry: SceneGeometry,
        output_path: Path | str | None = None,
        show: bool = False,
        title: str | None = None,
        impacts: Sequence[float] | None = None,
        vectors: bool = False,
        **_: object,
    ) -> PlotArtifact:
        if not tracks:
            raise ValueError("At least one track is required to plot")

        indices = self._select_indices(len(tracks))
        colors = self.cmap(np.linspace(0.15, 0.85, len(indices)))

        fig, ax = plt.subplots(figsize=self.figsize, dpi=160)
        self._draw_tube(ax, geometry)
        for color, idx in zip(colors, indices):
            track = tracks[idx]
            ax.plot(track.longitudinal, track.transverse, color=color, linewidth=1.0, alpha=0.85)
            ax.scatter(
                geometry.detection_x, track.impact_position, color=color, s=14, marker="x"
            )
            if vectors:
                tail, head = exit_velocity_arrow(track, geometry)
                ax.annotate(
                    "",
                    xy=head,
                    xytext=tail,
                    arrowprops={"arrowstyle": "->", "color": _VECTOR_COLOR, "lw": 1.5},
                )

        if impacts is not None and len(impacts):
            ax.scatter(
                np.full(len(impacts), geometry.detection_x),
                impacts,
                color="#39ff14",
                s=8,
                alpha=0.5,
                label="screen hits",
            )
            ax.legend(loc="upper left", fontsize=7)

        ax.set_xlim(0.0, geometry.tube_length)
        ax.set_ylim(0.0, geometry.tube_height)
        ax.set_xlabel("longitudinal position [m]")
        ax.set_ylabel("transverse position [m]")
        ax.set_title(title or f"Tracks ({len(indices)} of {len(tracks)} particles)")
        ax.set_aspect("equal")
        ax.grid(True, linestyle="--", linewidth=0.4, alpha=0.4)

        saved_path: Path | None = None
        if output_path is not None:
            saved_path = coerce_data_path(output_path, ".png")
            saved_path.parent.mkdir(parents=True, exist_ok=True)
            fig.savefig(saved_path, bbox_inches="tight")

        if show:
            plt.show()
        else:
            plt.close(fig)

        return PlotArtifact(path=saved_path)

    def _draw_tube(self, ax, geometry: SceneGeometry) -> None:
        center = geometry.centerline
        half_gap = geometry.plate_spacing / 2
        for y in (center + half_gap, center - half_gap - _PLATE_THICKNESS):
            ax.add_patch(
                Rectangle(
                    (geometry.deflection_start, y),
                    geometry.deflection_length,
                    _PLATE_THICKNESS,
                    color="#888888",
                )
            )
        ax.axvline(geometry.detection_x, color="#2a9d8f", linewidth=2.0, alpha=0.7)
        ax.axhline(center, color="#bbbbbb", linestyle=":", linewidth=0.6)
        ax.scatter(geometry.source_x, center, color="black", s=12, marker="s")

    def _select_indices(self, num_tracks: int) -> np.ndarray:
        if num_tracks <= self.max_tracks:
            return np.arange(num_tracks)
        step = num_tracks / self.max_tracks
        return np.floor(np.arange(self.max_tracks) * step).astype(int)
