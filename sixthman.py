#!/usr/bin/env python3
"""Sixth Man interactive CLI.

Run ``python sixthman.py`` for the interactive shell, or pass a single
command, e.g. ``python sixthman.py /injuries --demo``.
"""

from __future__ import annotations

import logging
import sys
from typing import Dict, List, Optional, Sequence, Tuple

from rich.console import Console
from rich.markup import escape

from commands import Command, CommandError
from commands.edit_command import EditCommand
from commands.help_command import HelpCommand
from commands.import_command import ImportCommand
from commands.injury_command import InjuryCommand
from tools.injury.errors import InjuryProjectionError
from tools.utils.cli_common import CommandRegistry, prompt_with_completion
from tools.utils.config import Settings, settings

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("/exit", "/quit")


def build_commands(
    console: Console, config: Optional[Settings] = None
) -> Tuple[CommandRegistry, Dict[str, Command]]:
    """Register every command and its aliases.

    Returns:
        The registry used for help/completion and a lookup of name -> command
    """
    registry = CommandRegistry()
    aliases: Dict[str, Sequence[str]] = {}
    lookup: Dict[str, Command] = {}

    commands: List[Command] = [
        InjuryCommand(console, config),
        ImportCommand(console, config),
        EditCommand(console, config),
    ]
    commands.append(HelpCommand(console, registry, aliases))

    for command in commands:
        registry.register(command.name, command.run, command.description)
        lookup[command.name] = command
        if command.aliases:
            aliases[command.name] = command.aliases
            for alias in command.aliases:
                lookup[alias] = command

    registry.register(EXIT_COMMANDS[0], lambda _: None, "Exit the CLI.")
    aliases[EXIT_COMMANDS[0]] = EXIT_COMMANDS[1:]
    return registry, lookup


def dispatch(line: str, lookup: Dict[str, Command], console: Console) -> bool:
    """Run one command line. Returns False when the shell should exit."""
    line = line.strip()
    if not line:
        return True

    name = line.split()[0]
    if name in EXIT_COMMANDS:
        return False

    command = lookup.get(name)
    logger.debug(f"Dispatching {name}")
    if command is None:
        console.print(f"Unknown command: {name}. Type /help for options.", style="yellow")
        return True

    try:
        command.run(line)
    except (CommandError, InjuryProjectionError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    # Configure logging - can be controlled via LOG_LEVEL environment variable
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    console = Console()
    registry, lookup = build_commands(console)

    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        dispatch(" ".join(args), lookup, console)
        return 0

    console.print(f"[bold]{settings.app_name}[/bold] - type /help for commands")
    while True:
        try:
            line = prompt_with_completion(sorted({*registry.names(), *lookup, *EXIT_COMMANDS}))
        except (EOFError, KeyboardInterrupt):
            break
        if not dispatch(line, lookup, console):
            break

    return 0


if __name__ == "__main__":
    sys.exit(main())
