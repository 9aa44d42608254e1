"""Configuration interfaces and data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from .controls import ControlParameters
from .geometry import SceneGeometry


@dataclass(frozen=True)
class SimulationConfig:
    """Runtime configuration for the tube simulator and its tooling."""

    version: str
    data_root: Path
    geometry: SceneGeometry = field(default_factory=SceneGeometry)
    controls: ControlParameters = field(default_factory=ControlParameters)
    beam_particles: int = 1
    beam_span: float = 0.002
    accumulate_hits: bool = False
    deflection_samples: int = 30
    integration_steps: int = 400
    plots_subdir: str = "plots"
    tracks_subdir: str = "tracks"

    @property
    def plots_dir(self) -> Path:
        return self.data_root / self.plots_subdir

    @property
    def tracks_dir(self) -> Path:
        return self.data_root / self.tracks_subdir
