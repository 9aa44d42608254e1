"""Unified CRTSim entry point that greets users then launches the CLI."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from rich.console import Console
from rich.style import Style
from rich.text import Text

console = Console()


def welcome_message(version: str) -> Text:
    banner_lines = [
        " ██████╗██████╗ ████████╗",
        "██╔════╝██╔══██╗╚══██╔══╝",
        "██║     ██████╔╝   ██║   ",
        "██║     ██╔══██╗   ██║   ",
        "╚██████╗██║  ██║   ██║   ",
        " ╚═════╝╚═╝  ╚═╝   ╚═╝   ",
    ]
    # phosphor green fading to amber
    gradient = ["#39FF14", "#7DFF3A", "#B7F25A", "#E8D66A", "#FFB347", "#E8D66A", "#B7F25A", "#7DFF3A"]

    text = Text()
    for line in banner_lines:
        for idx, char in enumerate(line):
            text.append(char, Style(color=gradient[idx % len(gradient)], bold=True))
        text.append("\n")
    text.append("CRTSim – cathode-ray tube trajectory simulator\n", Style(color="cyan", bold=True))
    text.append(f"Version: {version}\n\n", Style(color="bright_cyan"))
    text.append(
        "Accelerate an electron, bend it with plates or a coil, and watch where it lands.\n",
        Style(color="white"),
    )
    return text


def _parse_args(argv: Sequence[str]) -> tuple[argparse.Namespace, list[str]]:
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument(
        "--no-banner", action="store_true", help="Suppress the ASCII welcome message."
    )
    return parser.parse_known_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    raw_args = list(argv) if argv is not None else sys.argv[1:]
    parsed, passthrough = _parse_args(raw_args)

    from .cli import main as cli_entry  # local import to avoid circular dependency

    cli_args = list(passthrough)
    if parsed.no_banner:
        cli_args.append("--skip-banner")
    try:
        cli_entry.main(cli_args)
    except KeyboardInterrupt:
        console.print("\n[red]Aborted by user.[/red]")
        sys.exit(0)


if __name__ == "__main__":  # pragma: no cover - CLI entry
    main()
