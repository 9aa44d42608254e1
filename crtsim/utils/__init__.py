"""Shared helpers: workspace paths, configuration and track bundle IO.

===================================================================================
SUBMODULE STRUCTURE
===================================================================================

paths.py:
    workspace_root() → current working directory
    coerce_data_path(path, default_suffix=None, data_root=None)

config.py:
    load_config(path=None) → SimulationConfig
      - Reads <workspace_root>/config.yml with yaml.safe_load
      - No file at the default location → all defaults
      - data_root = <workspace_root>/<output.data_dir>
      - Missing keys fall back to SceneGeometry / ControlParameters defaults
      - Validates the scene layout (ConfigurationError on violation)

track_io.py:
    list_track_files(directory, pattern="*.npz")
    save_track_bundle(tracks, path, data_root=None) → Path
    load_track_bundle(path, data_root=None) → list[Track]

===================================================================================
ERROR HANDLING
===================================================================================

FileNotFoundError:
    - explicit --config path missing
    - track bundle missing → verify path via list_track_files()

ValueError:
    - empty bundle or tracks with different sample counts on save
    - unsupported bundle suffix on load
    - ConfigurationError (subclass) for an invalid scene section

===================================================================================
"""

from .config import load_config
from .paths import DEFAULT_DATA_DIR, coerce_data_path, workspace_root
from .track_io import list_track_files, load_track_bundle, save_track_bundle

__all__ = [
    "load_config",
    "workspace_root",
    "DEFAULT_DATA_DIR",
    "coerce_data_path",
    "list_track_files",
    "load_track_bundle",
    "save_track_bundle",
]
