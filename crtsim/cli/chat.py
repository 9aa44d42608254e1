"""Conversation-style helpers powered by Rich for the tube simulator CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from rich import traceback
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..interfaces.launch_options import LaunchOptions

traceback.install()


@dataclass
class TubeChat:
    console: Console = Console()
    _last_paths: dict[str, Path] = field(default_factory=dict)

    def _guide_note(self) -> str:
        return "[bold white]Automating this?[/] crtsim --help lists every flag."

    def default_path(self, key: str) -> Path | None:
        return self._last_paths.get(key)

    def remember_path(self, key: str, path: Path | None) -> None:
        if path is not None:
            self._last_paths[key] = path

    def greet(self) -> None:
        commands = " | ".join([*LaunchOptions.conversational_commands(), "exit"])
        self.console.print(
            Panel(
                "[bold cyan]Tube is warm. Set the potentials and fire when ready.[/]",
                title="CRTSim",
                subtitle=f"({commands})",
            )
        )

    def say(self, message: str, style: str = "cyan") -> None:
        self.console.print(f"[bold {style}]→[/] {message}")

    def success(self, message: str) -> None:
        self.console.print(Panel(message, title="✨ Success", style="green"))

    def readouts(self, values: dict[str, Any], title: str = "Readouts") -> None:
        table = Table(title=title, show_header=False, box=None, pad_edge=False)
        table.add_column("name", style="bold white")
        table.add_column("value", style="bright_cyan", justify="right")
        for name, value in values.items():
            if isinstance(value, float):
                text = f"{value:.4f}" if 1e-3 <= abs(value) < 1e4 else f"{value:.3e}"
            else:
                text = str(value)
            table.add_row(name, text)
        self.console.print(table)

    def hint(self, option: LaunchOptions) -> None:
        self.console.print(
            Panel(
                f"[bold yellow]Try this command[/]: {option.command_hint()}\n\n{self._guide_note()}",
                title="Command Clue",
                style="bright_yellow",
            )
        )

    def wrap_error(self, error: Exception, option: LaunchOptions | None = None) -> None:
        self.console.print(
            Panel(
                f"[bold red]{error.__class__.__name__} happened:[/]\n{error}\n\n{self._guide_note()}",
                title="Oops",
                style="bright_red",
            )
        )
        if option:
            self.hint(option)
