"""Modular command handlers for the tube simulator CLI."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, List, Protocol

from ..interfaces.config import SimulationConfig
from ..interfaces.controls import ControlParameters
from ..interfaces.launch_options import LaunchOptions
from ..interfaces.tracks import Track
from ..physics import (
    DetectionScreen,
    SweepResult,
    TrackSimulator,
    compute_beam,
    compute_track,
    describe_track,
    linspace_potentials,
    sweep_deflection,
)
from ..utils.paths import coerce_data_path
from ..utils.track_io import load_track_bundle, save_track_bundle
from ..visualization import SweepPlotter, TrackPlotter, write_sweep_summary


class InteractionChannel(Protocol):
    def say(self, message: str) -> None:  # pragma: no cover - simple logging interface
        ...

    def success(self, message: str) -> None:  # pragma: no cover - simple logging interface
        ...

    def hint(self, option: LaunchOptions) -> None:  # pragma: no cover - simple logging interface
        ...

    def readouts(
        self, values: dict[str, Any], title: str = "Readouts"
    ) -> None:  # pragma: no cover - simple logging interface
        ...

    def remember_path(
        self, key: str, path: Path | None
    ) -> None:  # pragma: no cover - persistence helper
        ...


def controls_from_options(options: LaunchOptions, config: SimulationConfig) -> ControlParameters:
    """Overlay the options' overrides on the configured default controls."""

    overrides: dict[str, Any] = {}
    if options.accelerating_potential is not None:
        overrides["accelerating_potential"] = float(options.accelerating_potential)
    if options.deflection_potential is not None:
        overrides["deflection_potential"] = float(options.deflection_potential)
    if options.deflection_mode is not None:
        overrides["deflection_mode"] = options.deflection_mode
    return config.controls.with_updates(**overrides)


def simulator_from_config(config: SimulationConfig) -> TrackSimulator:
    return TrackSimulator(
        deflection_samples=config.deflection_samples,
        integration_steps=config.integration_steps,
    )


def _default_output(config: SimulationConfig, stem: str, suffix: str = ".png") -> Path:
    tag = datetime.now().strftime("%Y%m%d-%H%M%S")
    base = config.plots_dir if suffix == ".png" else config.tracks_dir
    return base / f"{stem}-{tag}{suffix}"


def _output_for(
    options: LaunchOptions, config: SimulationConfig, stem: str, suffix: str = ".png"
) -> Path:
    """Requested output anchored under the configured data root, or a fresh default."""

    if options.output_path:
        return coerce_data_path(options.output_path, suffix, config.data_root)
    return _default_output(config, stem, suffix)


def run_preview(
    options: LaunchOptions, channel: InteractionChannel, config: SimulationConfig
) -> Track:
    controls = controls_from_options(options, config)
    channel.say(
        f"Tracing one particle at {controls.accelerating_potential:g} V / "
        f"{controls.deflection_potential:g} V ({controls.deflection_mode.value} field)."
    )
    track = compute_track(config.geometry, controls, simulator=simulator_from_config(config))
    channel.readouts(describe_track(track, config.geometry, controls), title="Preview")

    output_path = _output_for(options, config, "preview")
    artifact = TrackPlotter().plot(
        [track], config.geometry, output_path=output_path, vectors=options.vectors
    )
    channel.success(f"Preview rendered at [bold green]{artifact.path}[/].")
    channel.hint(options)
    return track


def run_fire(
    options: LaunchOptions,
    channel: InteractionChannel,
    config: SimulationConfig,
    screen: DetectionScreen | None = None,
) -> List[Track]:
    controls = controls_from_options(options, config)
    count = options.particles if options.particles is not None else config.beam_particles
    span = options.beam_span if options.beam_span is not None else config.beam_span
    screen = screen or DetectionScreen(config.geometry.tube_height, config.accumulate_hits)

    channel.say(f"Firing a beam of {max(1, count)} particle(s) across {span * 1e3:g} mm.")
    tracks = compute_beam(
        config.geometry, controls, count, span, simulator=simulator_from_config(config)
    )
    hits = screen.record(tracks)
    channel.readouts(
        {
            "particles": len(tracks),
            "mean_impact_m": float(hits.mean()),
            "beam_spread_m": float(hits.max() - hits.min()),
            "screen_hits": len(screen),
            "screen_spread_m": screen.spread,
        },
        title="Beam",
    )

    output_path = _output_for(options, config, "beam")
    artifact = TrackPlotter().plot(
        tracks,
        config.geometry,
        output_path=output_path,
        impacts=screen.impacts,
        vectors=options.vectors,
    )
    channel.success(f"Beam rendered at [bold green]{artifact.path}[/].")
    if options.save_tracks:
        bundle = save_track_bundle(tracks, _default_output(config, "beam", ".npz"))
        channel.success(f"Saved {len(tracks)} track(s) to [bold green]{bundle}[/].")
        channel.remember_path("track_bundle", bundle)
    channel.hint(options)
    return tracks


def run_sweep(
    options: LaunchOptions, channel: InteractionChannel, config: SimulationConfig
) -> SweepResult:
    controls = controls_from_options(options, config)
    potentials = linspace_potentials(options.sweep_min, options.sweep_max, options.sweep_points)
    channel.say(
        f"Sweeping {options.sweep_points} deflection potentials from "
        f"{options.sweep_min:g} V to {options.sweep_max:g} V in both modes."
    )
    result = sweep_deflection(
        config.geometry, controls, potentials, simulator=simulator_from_config(config)
    )
    output_path = _output_for(options, config, "sweep")
    artifact = SweepPlotter().plot(result, output_path=output_path)
    assert artifact.path is not None
    summary = write_sweep_summary(result, artifact.path.with_suffix(".json"))
    channel.readouts(
        {"max_relative_deviation": result.max_relative_deviation, "summary": str(summary)},
        title="Sweep",
    )
    channel.success(f"Sweep chart saved to [bold green]{artifact.path}[/].")
    channel.hint(options)
    return result


def run_visualize(
    options: LaunchOptions, channel: InteractionChannel, config: SimulationConfig
) -> Path | None:
    assert options.input_path, "Visualize command requires an input track bundle."
    channel.say("Rendering your saved track bundle now.")
    input_path = coerce_data_path(options.input_path, ".npz", config.data_root)
    tracks = load_track_bundle(input_path)
    if options.output_path:
        output_path = coerce_data_path(options.output_path, ".png", config.data_root)
    else:
        output_path = config.plots_dir / f"{input_path.stem}.png"
    artifact = TrackPlotter().plot(tracks, config.geometry, output_path=output_path)
    channel.success(f"Rendered {len(tracks)} track(s) at [bold green]{artifact.path}[/].")
    channel.hint(options)
    channel.remember_path("track_bundle", input_path)
    return artifact.path


def run_screen(screen: DetectionScreen, channel: InteractionChannel, clear: bool = False) -> None:
    channel.readouts(
        {
            "hits": len(screen),
            "mean_impact_m": screen.mean_impact,
            "spread_m": screen.spread,
            "accumulating": screen.accumulate,
        },
        title="Detection screen",
    )
    if clear:
        screen.clear()
        channel.say("Cleared the detection screen.")
