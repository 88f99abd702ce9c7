"""Common interactive CLI utilities for Sixth Man."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Iterable, Mapping, Optional, Sequence

from prompt_toolkit import prompt as pt_prompt
from prompt_toolkit.completion import FuzzyWordCompleter
from prompt_toolkit.history import FileHistory
from prompt_toolkit.key_binding import KeyBindings
from rich.console import Console
from rich.table import Table

from tools.utils.config import settings

console = Console()


def _stdin_isatty() -> bool:
    """Check if stdin is a TTY (terminal)."""
    return sys.stdin.isatty()


@dataclass
class CommandContext:
    """Holds CLI command metadata."""

    name: str
    handler: Callable[[str], None]
    description: str


class CommandRegistry:
    """Registers and dispatches CLI commands."""

    def __init__(self) -> None:
        self._commands: Dict[str, CommandContext] = {}

    def register(
        self, command: str, handler: Callable[[str], None], description: str
    ) -> None:
        self._commands[command] = CommandContext(command, handler, description)

    def get(self, command: str) -> Optional[CommandContext]:
        return self._commands.get(command)

    def descriptions(self) -> Iterable[CommandContext]:
        return self._commands.values()

    def names(self) -> Sequence[str]:
        return tuple(sorted(self._commands))


def prompt_with_completion(
    commands: Sequence[str],
    base_prompt: str = "/",
    history_file: Optional[Path] = None,
) -> str:
    kb = KeyBindings()

    @kb.add("escape")
    def _(event) -> None:  # pragma: no cover - interactive
        event.app.exit(result="")

    # Setup persistent history file
    history_file = history_file or settings.data_dir / "history"
    history_file.parent.mkdir(parents=True, exist_ok=True)

    history = FileHistory(str(history_file))

    if commands and _stdin_isatty():
        completer = FuzzyWordCompleter(commands)
        return pt_prompt(
            f"{base_prompt} ",
            completer=completer,
            complete_in_thread=True,
            complete_while_typing=True,
            key_bindings=kb,
            history=history,
        ).strip()

    if _stdin_isatty():
        return pt_prompt(f"{base_prompt} ", key_bindings=kb, history=history).strip()

    return input(f"{base_prompt} ").strip()


def show_capabilities(
    registry: CommandRegistry,
    aliases: Optional[Mapping[str, Sequence[str]]] = None,
    console_instance: Optional[Console] = None,
) -> None:
    out = console_instance or console
    table = Table(title="Sixth Man CLI Capabilities")
    table.add_column("Command", justify="left")
    table.add_column("Description", justify="left")

    already_rendered: set[str] = set()
    alias_lookup = aliases or {}

    for ctx in registry.descriptions():
        if ctx.name in already_rendered:
            continue

        alias_list = list(alias_lookup.get(ctx.name, ()))
        label = " , ".join([ctx.name, *alias_list]) if alias_list else ctx.name
        table.add_row(label, ctx.description)

        already_rendered.add(ctx.name)
        already_rendered.update(alias_list)

    out.print(table)

    injury_file = settings.injury_file
    out.print()
    if injury_file.exists():
        out.print(f"[dim]Injury file: {injury_file}[/dim]")
    else:
        out.print(f"[dim]No injury file at {injury_file} (try /injuries --demo)[/dim]")


def render_command_help(
    command_name: str,
    description: str,
    arguments: Sequence[Mapping[str, str | bool]],
    console_instance: Console,
) -> None:
    """Render help information for a command.

    Args:
        command_name: The command name (e.g., '/injuries')
        description: Command description
        arguments: List of argument definitions with 'name', 'required', 'description', 'default'
        console_instance: Rich Console instance to print to
    """
    console_instance.print(f"[bold cyan]{command_name}[/bold cyan] - {description}\n")

    if not arguments:
        console_instance.print("This command takes no arguments.\n")
        return

    table = Table(title=f"{command_name} Arguments", show_header=True)
    table.add_column("Argument", justify="left", style="cyan")
    table.add_column("Required", justify="center", style="yellow")
    table.add_column("Default", justify="left", style="green")
    table.add_column("Description", justify="left")

    for arg in arguments:
        name = str(arg.get("name", ""))
        required = "Yes" if arg.get("required") else "No"
        default = str(arg.get("default", "")) if arg.get("default") else "-"
        desc = str(arg.get("description", ""))
        table.add_row(name, required, default, desc)

    console_instance.print(table)
