from __future__ import annotations

import pytest

from crtsim.interfaces import ControlParameters, DeflectionMode, SceneGeometry, SimulationConfig
from crtsim.physics import TrackSimulator


@pytest.fixture
def geometry() -> SceneGeometry:
    return SceneGeometry(
        tube_length=0.5,
        tube_height=0.25,
        source_x=0.02,
        deflection_start=0.18,
        deflection_length=0.06,
        plate_spacing=0.01,
        detection_x=0.46,
    )


@pytest.fixture
def controls() -> ControlParameters:
    return ControlParameters(
        accelerating_potential=2000.0,
        deflection_potential=50.0,
        deflection_mode=DeflectionMode.UNIFORM_FIELD,
    )


@pytest.fixture
def simulator() -> TrackSimulator:
    return TrackSimulator()


@pytest.fixture
def config(tmp_path, geometry) -> SimulationConfig:
    return SimulationConfig(version="test", data_root=tmp_path, geometry=geometry)


class RecordingChannel:
    """Interaction channel that keeps everything it is told."""

    def __init__(self) -> None:
        self.messages: list[str] = []
        self.successes: list[str] = []
        self.hints: list[str] = []
        self.tables: list[tuple[str, dict]] = []
        self.paths: dict = {}

    def say(self, message: str) -> None:
        self.messages.append(message)

    def success(self, message: str) -> None:
        self.successes.append(message)

    def hint(self, option) -> None:
        self.hints.append(option.command_hint())

    def readouts(self, values: dict, title: str = "Readouts") -> None:
        self.tables.append((title, values))

    def remember_path(self, key: str, path) -> None:
        if path is not None:
            self.paths[key] = path


@pytest.fixture
def channel() -> RecordingChannel:
    return RecordingChannel()
