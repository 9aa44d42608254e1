"""Impact-versus-potential chart comparing the two deflection modes."""

from __future__ import annotations

import json
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from ..interfaces.visualization import PlotArtifact
from ..physics.sweep import SweepResult
from ..utils.paths import coerce_data_path


class SweepPlotter:
    def __init__(self, figsize: tuple[float, float] = (8, 4)) -> None:
        self.figsize = figsize

    def plot(
        self,
        result: SweepResult,
        output_path: Path | str | None = None,
        title: str | None = None,
    ) -> PlotArtifact:
        fig, ax = plt.subplots(figsize=self.figsize)
        ax.plot(result.potentials, result.uniform_impacts, label="uniform field", color="#1f77b4")
        ax.plot(
            result.potentials,
            result.curved_impacts,
            label="curved field",
            color="#ff7f0e",
            linestyle="--",
        )
        ax.axhline(result.centerline, color="#999999", linestyle=":", linewidth=0.8)
        ax.set_xlabel("Deflection potential [V]")
        ax.set_ylabel("Impact position [m]")
        ax.set_title(
            title
            or f"Impact vs deflection potential (max deviation {result.max_relative_deviation:.2%})"
        )
        ax.legend()
        ax.grid(linestyle="--", alpha=0.4)
        fig.tight_layout()

        saved_path: Path | None = None
        if output_path is not None:
            saved_path = coerce_data_path(output_path, ".png")
            saved_path.parent.mkdir(parents=True, exist_ok=True)
            fig.savefig(saved_path)
        plt.close(fig)
        return PlotArtifact(path=saved_path)


def write_sweep_summary(result: SweepResult, output_path: Path | str) -> Path:
    """Write the sweep as JSON records plus the max relative deviation."""

    target = coerce_data_path(output_path, ".json")
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as fh:
        json.dump(
            {
                "centerline": result.centerline,
                "max_relative_deviation": result.max_relative_deviation,
                "records": result.to_records(),
            },
            fh,
            indent=2,
        )
    return target
