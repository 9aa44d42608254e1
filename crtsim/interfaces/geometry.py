"""Scene geometry of the simulated tube."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


class ConfigurationError(ValueError):
    """Raised when a scene geometry violates its ordering invariant."""


@dataclass(frozen=True)
class SceneGeometry:
    """Longitudinal layout and transverse extent of the tube, in meters.

    The trajectory engine never validates this object; callers that accept
    geometry from the outside world (config files, CLI prompts) should call
    :meth:`validate` first.
    """

    tube_length: float = 0.5
    tube_height: float = 0.25
    source_x: float = 0.02
    deflection_start: float = 0.18
    deflection_length: float = 0.06
    plate_spacing: float = 0.010
    detection_x: float = 0.46

    @property
    def deflection_end(self) -> float:
        return self.deflection_start + self.deflection_length

    @property
    def centerline(self) -> float:
        return self.tube_height / 2

    def with_updates(self, **changes: Any) -> "SceneGeometry":
        return replace(self, **changes)

    def validate(self) -> "SceneGeometry":
        """Check ``0 <= source < start < end < detection <= length``.

        Returns:
            ``self`` so calls can be chained.

        Raises:
            ConfigurationError: listing every violated relation.
        """

        problems: list[str] = []
        if self.tube_height <= 0:
            problems.append(f"tube_height must be positive (got {self.tube_height})")
        if self.plate_spacing <= 0:
            problems.append(f"plate_spacing must be positive (got {self.plate_spacing})")
        ordered = [
            ("0", 0.0),
            ("source_x", self.source_x),
            ("deflection_start", self.deflection_start),
            ("deflection_end", self.deflection_end),
            ("detection_x", self.detection_x),
            ("tube_length", self.tube_length),
        ]
        for index, ((left_name, left), (right_name, right)) in enumerate(
            zip(ordered, ordered[1:])
        ):
            inclusive = index in (0, len(ordered) - 2)
            ok = left <= right if inclusive else left < right
            if not ok:
                op = "<=" if inclusive else "<"
                problems.append(f"{left_name} ({left}) {op} {right_name} ({right})")
        if problems:
            raise ConfigurationError("Invalid scene geometry: " + "; ".join(problems))
        return self
