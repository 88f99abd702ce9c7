"""Import injured players from a saved Yahoo roster into the injury file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.markup import escape

from commands import Command, CommandError, read_input_file
from tools.injury.errors import InvalidRecordError
from tools.injury.injury_store import save_injuries
from tools.injury.roster_parser import load_roster_file, parse_roster_injuries
from tools.utils.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)

USAGE = "Usage: /import <roster.json> [--max-teammates <n>] [--output <path>]"


def parse_import_args(command: str) -> Dict[str, Any]:
    """Parse arguments for the /import command."""
    parts = command.split()
    args: Dict[str, Any] = {"roster": None, "max_teammates": None, "output": None}

    remaining = parts[1:]
    i = 0
    while i < len(remaining):
        token = remaining[i]
        if token in ("--max-teammates", "--output"):
            if i + 1 >= len(remaining):
                raise CommandError(f"{token} requires a value")
            value = remaining[i + 1]
            if token == "--output":
                args["output"] = value
            else:
                try:
                    args["max_teammates"] = int(value)
                except ValueError as e:
                    raise CommandError(f"--max-teammates must be a number, got {value}") from e
                if args["max_teammates"] < 1:
                    raise CommandError("--max-teammates must be at least 1")
            i += 2
        elif token.startswith("--"):
            raise CommandError(f"Unknown option: {token}")
        elif args["roster"] is None:
            args["roster"] = token
            i += 1
        else:
            raise CommandError(USAGE)

    if args["roster"] is None:
        raise CommandError(USAGE)

    return args


class ImportCommand(Command):
    """Build injury records from a roster payload and save them."""

    def __init__(self, console: Console, config: Optional[Settings] = None) -> None:
        super().__init__(console)
        self.config = config or default_settings

    @property
    def name(self) -> str:
        return "/import"

    @property
    def description(self) -> str:
        return "Import injured players and their teammates from a saved Yahoo roster."

    @property
    def arguments(self) -> List[Dict[str, str | bool]]:
        return [
            {
                "name": "<roster.json>",
                "required": True,
                "description": "Roster JSON: a list of Yahoo players, or {\"players\": [...]}",
            },
            {
                "name": "--max-teammates",
                "required": False,
                "description": "Teammates kept per injured player, in roster order",
                "default": str(self.config.max_teammates),
            },
            {
                "name": "--output",
                "required": False,
                "description": "Injury file to write",
                "default": str(self.config.injury_file),
            },
        ]

    def execute(self, command: str) -> None:
        args = parse_import_args(command)
        roster_path = Path(args["roster"]).expanduser()
        output = Path(args["output"]).expanduser() if args["output"] else self.config.injury_file

        try:
            roster = read_input_file(load_roster_file, roster_path, "Roster file")
            injuries = parse_roster_injuries(
                roster,
                max_teammates=args["max_teammates"] or self.config.max_teammates,
                default_minutes=self.config.default_teammate_minutes,
                default_usage=self.config.default_teammate_usage,
            )
        except InvalidRecordError as e:
            raise CommandError(f"Invalid roster record: {e}") from e

        if not injuries:
            self.console.print(
                f"No injured players found in {escape(str(roster_path))}; "
                f"{escape(str(output))} left unchanged.",
                style="yellow",
            )
            return

        try:
            save_injuries(output, injuries)
        except OSError as e:
            raise CommandError(f"Could not write injury file {output}: {e}") from e

        self.console.print(
            f"[green]✓[/green] Imported {len(injuries)} injured players to {escape(str(output))}"
        )
        for injury in injuries:
            status = f" ({escape(injury.status)})" if injury.status else ""
            self.console.print(
                f"  {escape(str(injury.id))}: {escape(injury.label)}{status}, "
                f"{len(injury.teammates)} teammates"
            )
