"""Conversational and scripted entry point for the tube simulator CLI."""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Sequence

import questionary

from ..interfaces.config import SimulationConfig
from ..interfaces.controls import DeflectionMode
from ..interfaces.launch_options import LaunchOptions
from ..physics import DetectionScreen
from ..utils.config import load_config
from ..utils.track_io import list_track_files
from .chat import TubeChat
from .commands import run_fire, run_preview, run_screen, run_sweep, run_visualize

SCRIPTED_COMMANDS = ("preview", "fire", "sweep", "visualize")


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="CRTSim CLI entry point", add_help=True)
    parser.add_argument(
        "--command",
        choices=SCRIPTED_COMMANDS,
        default=None,
        help="Run a single command non-interactively and exit.",
    )
    parser.add_argument("--config", default=None, help="Override the config.yml path.")
    parser.add_argument("--accel", type=float, default=None, help="Accelerating potential [V].")
    parser.add_argument("--deflect", type=float, default=None, help="Deflection potential [V].")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in DeflectionMode],
        default=None,
        help="Deflection mode.",
    )
    parser.add_argument("--particles", type=int, default=None, help="Beam particle count.")
    parser.add_argument("--span", type=float, default=None, help="Beam spread [m].")
    parser.add_argument("--sweep-min", type=float, default=-100.0)
    parser.add_argument("--sweep-max", type=float, default=100.0)
    parser.add_argument("--sweep-points", type=int, default=21)
    parser.add_argument("--input", default=None, help="Track bundle (.npz) to visualize.")
    parser.add_argument("--output", default=None, help="Where to save the rendered plot.")
    parser.add_argument(
        "--save-tracks", action="store_true", help="Also save fired tracks as an .npz bundle."
    )
    parser.add_argument(
        "--vectors", action="store_true", help="Draw the exit velocity vector at the plate exit."
    )
    parser.add_argument(
        "--skip-banner",
        action="store_true",
        help="Suppress the startup banner (useful for scripts).",
    )
    return parser.parse_args(argv)


def options_from_args(args: argparse.Namespace) -> LaunchOptions:
    return LaunchOptions(
        command=args.command,
        accelerating_potential=args.accel,
        deflection_potential=args.deflect,
        deflection_mode=DeflectionMode.parse(args.mode) if args.mode else None,
        particles=args.particles,
        beam_span=args.span,
        sweep_min=args.sweep_min,
        sweep_max=args.sweep_max,
        sweep_points=args.sweep_points,
        input_path=Path(args.input) if args.input else None,
        output_path=Path(args.output) if args.output else None,
        save_tracks=args.save_tracks,
        vectors=args.vectors,
    )


def dispatch(
    options: LaunchOptions,
    chat: TubeChat,
    config: SimulationConfig,
    screen: DetectionScreen | None = None,
) -> None:
    if options.command == "preview":
        run_preview(options, chat, config)
    elif options.command == "fire":
        run_fire(options, chat, config, screen)
    elif options.command == "sweep":
        run_sweep(options, chat, config)
    elif options.command == "visualize":
        run_visualize(options, chat, config)
    else:
        raise ValueError(f"Unsupported command: {options.command}")


def run_conversational_cli(config: SimulationConfig) -> None:
    """Launch the CLI in a question-and-answer style."""

    chat = TubeChat()
    chat.greet()
    screen = DetectionScreen(config.geometry.tube_height, config.accumulate_hits)

    while True:
        command = _choose_command()
        if not command or command == "exit":
            chat.say("Powering down the tube. Come back anytime!")
            break

        options: LaunchOptions | None = None
        try:
            if command == "screen":
                with_clear = questionary.confirm("Clear the screen afterwards?", default=False).ask()
                run_screen(screen, chat, clear=bool(with_clear))
                continue
            if command == "scene":
                config = _scene_update(chat, config)
                screen = DetectionScreen(config.geometry.tube_height, screen.accumulate)
                continue
            options = _collect_options(command, chat, config)
        except KeyboardInterrupt:
            chat.say("Command canceled. Returning to the main menu.")
            continue
        except ValueError as error:
            chat.wrap_error(error)
            continue

        try:
            dispatch(options, chat, config, screen)
        except Exception as error:  # pragma: no cover - interactive shell
            chat.wrap_error(error, options)


def _choose_command() -> str | None:
    choices = [*LaunchOptions.conversational_commands(), "exit"]
    return questionary.select("What would you like to do?", choices=choices).ask()


def _collect_options(command: str, chat: TubeChat, config: SimulationConfig) -> LaunchOptions:
    if command == "preview":
        return _preview_options(chat, config)
    if command == "fire":
        return _fire_options(chat, config)
    if command == "sweep":
        return _sweep_options(chat, config)
    if command == "visualize":
        return _visualize_options(chat, config)
    raise ValueError(f"Unsupported command: {command}")


def _ask_mode(config: SimulationConfig) -> DeflectionMode:
    choice = questionary.select(
        "Deflection mode",
        choices=[
            questionary.Choice(title="Uniform field (plates)", value="uniform"),
            questionary.Choice(title="Curved field (coil)", value="curved"),
        ],
        default=config.controls.deflection_mode.value,
    ).ask()
    if choice is None:
        raise KeyboardInterrupt
    return DeflectionMode.parse(choice)


def _preview_options(chat: TubeChat, config: SimulationConfig) -> LaunchOptions:
    accel = _ask_float(chat, "Accelerating potential [V]", default=config.controls.accelerating_potential)
    deflect = _ask_float(chat, "Deflection potential [V]", default=config.controls.deflection_potential)
    mode = _ask_mode(config)
    vectors = questionary.confirm("Draw the exit velocity vector?", default=True).ask()
    return LaunchOptions(
        command="preview",
        accelerating_potential=accel,
        deflection_potential=deflect,
        deflection_mode=mode,
        vectors=bool(vectors),
    )


def _fire_options(chat: TubeChat, config: SimulationConfig) -> LaunchOptions:
    accel = _ask_float(chat, "Accelerating potential [V]", default=config.controls.accelerating_potential)
    deflect = _ask_float(chat, "Deflection potential [V]", default=config.controls.deflection_potential)
    mode = _ask_mode(config)
    particles = _ask_int(chat, "Particles in the beam", default=config.beam_particles)
    span = _ask_float(chat, "Beam spread [m]", default=config.beam_span)
    save = questionary.confirm("Save the tracks as an .npz bundle?", default=False).ask()
    return LaunchOptions(
        command="fire",
        accelerating_potential=accel,
        deflection_potential=deflect,
        deflection_mode=mode,
        particles=particles,
        beam_span=span,
        save_tracks=bool(save),
    )


def _sweep_options(chat: TubeChat, config: SimulationConfig) -> LaunchOptions:
    accel = _ask_float(chat, "Accelerating potential [V]", default=config.controls.accelerating_potential)
    low = _ask_float(chat, "Lowest deflection potential [V]", default=-100.0)
    high = _ask_float(chat, "Highest deflection potential [V]", default=100.0)
    points = _ask_int(chat, "Number of potentials", default=21)
    return LaunchOptions(
        command="sweep",
        accelerating_potential=accel,
        sweep_min=low,
        sweep_max=high,
        sweep_points=points,
    )


def _visualize_options(chat: TubeChat, config: SimulationConfig) -> LaunchOptions:
    saved = list_track_files(config.tracks_dir)
    input_path: Path | None = None
    if saved:
        choices = [questionary.Choice(title=path.name, value=str(path)) for path in saved]
        choices.append(questionary.Choice(title="Somewhere else…", value=""))
        picked = questionary.select("Which track bundle?", choices=choices).ask()
        if picked is None:
            raise KeyboardInterrupt
        input_path = Path(picked) if picked else None
    if input_path is None:
        input_path = _ask_path(chat, "Path to the track bundle (.npz)", default_key="track_bundle")
    return LaunchOptions(command="visualize", input_path=input_path)


def _scene_update(chat: TubeChat, config: SimulationConfig) -> SimulationConfig:
    geometry = config.geometry
    updated = geometry.with_updates(
        plate_spacing=_ask_float(chat, "Plate spacing [m]", default=geometry.plate_spacing),
        deflection_start=_ask_float(chat, "Plate start [m]", default=geometry.deflection_start),
        deflection_length=_ask_float(chat, "Plate length [m]", default=geometry.deflection_length),
    ).validate()
    chat.say(
        f"Plates now span {updated.deflection_start:g}–{updated.deflection_end:g} m, "
        f"{updated.plate_spacing * 1e3:g} mm apart. The detection screen was reset."
    )
    return replace(config, geometry=updated)


def _ask_int(chat: TubeChat, prompt: str, *, default: int) -> int:
    while True:
        response = questionary.text(prompt, default=str(default)).ask()
        if response is None:
            raise KeyboardInterrupt
        candidate = response.strip()
        if not candidate:
            return default
        try:
            return int(candidate)
        except ValueError:
            chat.say("That wasn't a whole number. Please try again.")


def _ask_float(chat: TubeChat, prompt: str, *, default: float) -> float:
    while True:
        response = questionary.text(prompt, default=f"{default:g}").ask()
        if response is None:
            raise KeyboardInterrupt
        candidate = response.strip()
        if not candidate:
            return default
        try:
            return float(candidate)
        except ValueError:
            chat.say("Please enter a valid number (decimal allowed).")


def _ask_path(chat: TubeChat, prompt: str, *, default_key: str) -> Path:
    default_value = chat.default_path(default_key)
    default_text = default_value.as_posix() if default_value else ""
    while True:
        response = questionary.text(prompt, default=default_text).ask()
        if response is None:
            raise KeyboardInterrupt
        candidate = response.strip()
        if not candidate:
            if default_value:
                chat.say(f"Using the last known path: {default_value}")
                return default_value
            chat.say("This path is required. Please try again.")
            continue
        resolved = Path(candidate).expanduser()
        chat.remember_path(default_key, resolved)
        return resolved


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    config = load_config(args.config)
    if not args.skip_banner:
        from ..main import welcome_message  # local import to avoid circular dependency

        TubeChat().console.print(welcome_message(config.version))

    if args.command:
        chat = TubeChat()
        dispatch(options_from_args(args), chat, config)
        return

    run_conversational_cli(config)
