from __future__ import annotations

from pathlib import Path

import pytest

from crtsim.interfaces import ConfigurationError, DeflectionMode, SceneGeometry
from crtsim.utils.config import load_config

REPO_CONFIG = Path(__file__).resolve().parents[1] / "config.yml"


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "config.yml"
    path.write_text(text, encoding="utf-8")
    return path


def test_repository_config_loads():
    config = load_config(REPO_CONFIG)
    assert config.version == "1.0.0"
    assert config.geometry == SceneGeometry()
    assert config.controls.accelerating_potential == 2000.0
    assert config.controls.deflection_mode is DeflectionMode.UNIFORM_FIELD
    assert config.deflection_samples == 30
    assert config.integration_steps == 400


def test_missing_sections_fall_back_to_defaults(tmp_path):
    config = load_config(_write(tmp_path, "version: '2.0'\n"))
    assert config.version == "2.0"
    assert config.geometry == SceneGeometry()
    assert config.beam_particles == 1
    assert config.beam_span == pytest.approx(0.002)
    assert config.accumulate_hits is False


def test_empty_file_is_accepted(tmp_path):
    config = load_config(_write(tmp_path, ""))
    assert config.version == "0.0.0"


def test_sections_override_defaults(tmp_path):
    path = _write(
        tmp_path,
        f"""
scene:
  plate_spacing: 0.02
controls:
  deflection_potential: -40
  deflection_mode: magnetic
beam:
  particles: 7
  accumulate_hits: true
engine:
  integration_steps: 100
output:
  data_dir: {tmp_path.as_posix()}
  plots_subdir: charts
""",
    )
    config = load_config(path)
    assert config.geometry.plate_spacing == 0.02
    assert config.controls.deflection_potential == -40.0
    assert config.controls.deflection_mode is DeflectionMode.CURVED_FIELD
    assert config.beam_particles == 7
    assert config.accumulate_hits is True
    assert config.integration_steps == 100
    assert config.data_root == tmp_path
    assert config.plots_dir == tmp_path / "charts"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yml")


def test_misordered_scene_is_rejected(tmp_path):
    path = _write(tmp_path, "scene:\n  deflection_start: 0.45\n  deflection_length: 0.06\n")
    with pytest.raises(ConfigurationError):
        load_config(path)


def test_unknown_mode_is_rejected(tmp_path):
    with pytest.raises(ValueError):
        load_config(_write(tmp_path, "controls:\n  deflection_mode: sideways\n"))


@pytest.mark.parametrize(
    "changes",
    [
        {"source_x": -0.01},
        {"deflection_start": 0.01},
        {"detection_x": 0.6},
        {"deflection_length": 0.0},
        {"tube_height": 0.0},
        {"plate_spacing": -0.01},
    ],
)
def test_geometry_validation(changes):
    with pytest.raises(ConfigurationError):
        SceneGeometry().with_updates(**changes).validate()


def test_default_geometry_is_valid():
    geometry = SceneGeometry()
    assert geometry.validate() is geometry
    assert geometry.deflection_end == pytest.approx(0.24)


def test_missing_default_config_uses_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = load_config()
    assert config.version == "0.0.0"
    assert config.geometry == SceneGeometry()
    assert config.controls.accelerating_potential == 2000.0
    assert config.data_root == tmp_path / "data"


def test_default_config_is_read_from_working_directory(tmp_path, monkeypatch):
    _write(tmp_path, "version: local\noutput:\n  data_dir: out\n")
    monkeypatch.chdir(tmp_path)
    config = load_config()
    assert config.version == "local"
    assert config.data_root == tmp_path / "out"
    assert config.tracks_dir == tmp_path / "out" / "tracks"
