"""Shared interfaces and value types for the tube simulator.

===================================================================================
OVERVIEW
===================================================================================
This package defines the contract between the trajectory engine, the CLI and
the renderers via:
  - Frozen dataclasses for geometry, control inputs and results
  - A Protocol for track renderers
  - One exception type for invalid scene layouts

Nothing in here performs physics; the engine lives in ``crtsim.physics``.

===================================================================================
SUBMODULE STRUCTURE
===================================================================================

geometry.py:
    SceneGeometry - Tube layout in meters (frozen)
    Fields:
      - tube_length, tube_height: float
      - source_x: float
      - deflection_start, deflection_length: float
      - plate_spacing: float
      - detection_x: float
    Properties:
      - deflection_end, centerline
    ConfigurationError - raised by SceneGeometry.validate()

controls.py:
    DeflectionMode - UNIFORM_FIELD ("uniform") | CURVED_FIELD ("curved")
    ControlParameters - Potentials, mode and per-particle perturbation

tracks.py:
    Track - Immutable trajectory result
    Attributes:
      - path: ndarray(num_samples, 2), read-only
      - initial_forward_speed: float
      - entry_transverse_velocity, exit_transverse_velocity: float
      - impact_position: float, clamped to [0, tube_height]
      - mode: DeflectionMode

config.py:
    SimulationConfig - Values loaded from config.yml

launch_options.py:
    LaunchOptions - One CLI request (command + overrides)

visualization.py:
    TrackVisualizer (Protocol) - plot(tracks, geometry) → PlotArtifact
    PlotArtifact - Result metadata for saved plots

===================================================================================
DATA STRUCTURES DIAGRAM
===================================================================================

    SimulationConfig (from config.yml)
        ├─ SceneGeometry
        └─ ControlParameters (defaults)
                │
                ▼
    TrackSimulator.simulate(geometry, controls)
                │
                ▼
             Track ──► TrackVisualizer ──► PlotArtifact
                └────► track bundle (.npz)

===================================================================================
"""

from .config import SimulationConfig
from .controls import ControlParameters, DeflectionMode
from .geometry import ConfigurationError, SceneGeometry
from .launch_options import LaunchOptions
from .tracks import Track
from .visualization import PlotArtifact, TrackVisualizer

__all__ = [
    "SimulationConfig",
    "SceneGeometry",
    "ConfigurationError",
    "ControlParameters",
    "DeflectionMode",
    "LaunchOptions",
    "Track",
    "TrackVisualizer",
    "PlotArtifact",
]
