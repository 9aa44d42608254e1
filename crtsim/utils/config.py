"""Configuration loading utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml

from ..interfaces.config import SimulationConfig
from ..interfaces.controls import ControlParameters, DeflectionMode
from ..interfaces.geometry import SceneGeometry
from .paths import DEFAULT_DATA_DIR, workspace_root

_GEOMETRY_KEYS = (
    "tube_length",
    "tube_height",
    "source_x",
    "deflection_start",
    "deflection_length",
    "plate_spacing",
    "detection_x",
)


def _geometry_from(section: Mapping[str, Any]) -> SceneGeometry:
    defaults = SceneGeometry()
    values = {key: float(section.get(key, getattr(defaults, key))) for key in _GEOMETRY_KEYS}
    return SceneGeometry(**values)


def _controls_from(section: Mapping[str, Any]) -> ControlParameters:
    defaults = ControlParameters()
    return ControlParameters(
        accelerating_potential=float(
            section.get("accelerating_potential", defaults.accelerating_potential)
        ),
        deflection_potential=float(
            section.get("deflection_potential", defaults.deflection_potential)
        ),
        deflection_mode=DeflectionMode.parse(
            section.get("deflection_mode", defaults.deflection_mode)
        ),
    )


def load_config(path: str | Path | None = None) -> SimulationConfig:
    """Load application configuration from ``config.yml``.

    Args:
        path: Optional path override. Defaults to ``<workspace_root>/config.yml``;
            when that default file is absent every setting takes its default.

    Returns:
        A :class:`~crtsim.interfaces.config.SimulationConfig` populated from YAML,
        with defaults for every missing key.

    Raises:
        FileNotFoundError: if an explicitly given config file does not exist.
        ConfigurationError: if the ``scene`` section breaks the tube layout
            ordering.
    """

    raw: Mapping[str, Any] = {}
    config_path = Path(path) if path else workspace_root() / "config.yml"
    if config_path.exists():
        with config_path.open("r", encoding="utf-8") as handle:
            raw = yaml.safe_load(handle) or {}
    elif path:
        raise FileNotFoundError(f"Config file not found at {config_path}")

    beam = raw.get("beam") or {}
    engine = raw.get("engine") or {}
    output = raw.get("output") or {}

    geometry = _geometry_from(raw.get("scene") or {}).validate()

    return SimulationConfig(
        version=str(raw.get("version", "0.0.0")),
        data_root=workspace_root() / str(output.get("data_dir", DEFAULT_DATA_DIR)),
        geometry=geometry,
        controls=_controls_from(raw.get("controls") or {}),
        beam_particles=int(beam.get("particles", 1)),
        beam_span=float(beam.get("span", 0.002)),
        accumulate_hits=bool(beam.get("accumulate_hits", False)),
        deflection_samples=int(engine.get("deflection_samples", 30)),
        integration_steps=int(engine.get("integration_steps", 400)),
        plots_subdir=str(output.get("plots_subdir", "plots")),
        tracks_subdir=str(output.get("tracks_subdir", "tracks")),
    )
