"""Shared launch option definitions consumed by the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from .controls import DeflectionMode


@dataclass(frozen=True)
class LaunchOptions:
    """Inputs that drive one simulator command."""

    command: str
    accelerating_potential: float | None = None
    deflection_potential: float | None = None
    deflection_mode: DeflectionMode | None = None
    particles: int | None = None
    beam_span: float | None = None
    sweep_min: float = -100.0
    sweep_max: float = 100.0
    sweep_points: int = 21
    input_path: Path | None = None
    output_path: Path | None = None
    save_tracks: bool = False
    vectors: bool = False

    def command_hint(self) -> str:
        short = f"crtsim --no-banner --command {self.command}"
        args = []
        if self.command in ("preview", "fire", "sweep"):
            if self.accelerating_potential is not None:
                args.append(f"--accel {self.accelerating_potential:g}")
            if self.deflection_mode is not None:
                args.append(f"--mode {self.deflection_mode.value}")
        if self.command in ("preview", "fire") and self.deflection_potential is not None:
            args.append(f"--deflect {self.deflection_potential:g}")
        if self.command in ("preview", "fire") and self.vectors:
            args.append("--vectors")
        if self.command == "fire":
            if self.particles is not None:
                args.append(f"--particles {self.particles}")
            if self.beam_span is not None:
                args.append(f"--span {self.beam_span:g}")
            if self.save_tracks:
                args.append("--save-tracks")
        elif self.command == "sweep":
            args.extend(
                [
                    f"--sweep-min {self.sweep_min:g}",
                    f"--sweep-max {self.sweep_max:g}",
                    f"--sweep-points {self.sweep_points}",
                ]
            )
        elif self.command == "visualize" and self.input_path:
            args.append(f"--input {self.input_path}")
        if self.output_path:
            args.append(f"--output {self.output_path}")
        return " ".join([short, *args])

    @classmethod
    def conversational_commands(cls) -> Iterable[str]:
        return ("preview", "fire", "sweep", "visualize", "screen", "scene")
