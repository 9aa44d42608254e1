"""Per-invocation control parameters for the trajectory engine."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any


class DeflectionMode(str, Enum):
    """Mutually exclusive ways the deflection region acts on the particle."""

    UNIFORM_FIELD = "uniform"
    CURVED_FIELD = "curved"

    @classmethod
    def parse(cls, value: "str | DeflectionMode") -> "DeflectionMode":
        if isinstance(value, DeflectionMode):
            return value
        text = str(value).strip().lower()
        aliases = {"electric": cls.UNIFORM_FIELD, "magnetic": cls.CURVED_FIELD}
        if text in aliases:
            return aliases[text]
        for mode in cls:
            if text in (mode.value, mode.name.lower()):
                return mode
        choices = ", ".join(mode.value for mode in cls)
        raise ValueError(f"Unknown deflection mode '{value}' (expected one of: {choices})")


@dataclass(frozen=True)
class ControlParameters:
    """Slider-style inputs: potentials in volts, offsets in meters."""

    accelerating_potential: float = 2000.0
    deflection_potential: float = 0.0
    deflection_mode: DeflectionMode = DeflectionMode.UNIFORM_FIELD
    lateral_offset: float = 0.0
    initial_lateral_velocity: float = 0.0

    def with_updates(self, **changes: Any) -> "ControlParameters":
        if "deflection_mode" in changes:
            changes["deflection_mode"] = DeflectionMode.parse(changes["deflection_mode"])
        return replace(self, **changes)
