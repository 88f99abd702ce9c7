"""Edit one teammate field in the injury file and re-project that injury."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from rich.console import Console
from rich.markup import escape

from commands import Command, CommandError, read_input_file
from commands.injury_command import render_reports
from tools.injury.batch import project_injuries
from tools.injury.errors import InvalidRecordError
from tools.injury.injury_models import InjuredPlayer
from tools.injury.injury_store import load_injuries, save_injuries, update_teammate_field
from tools.utils.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)

USAGE = "Usage: /edit <injury-id> <teammate> <field> <value> [--file <path>]"


def parse_edit_args(command: str) -> Dict[str, Any]:
    """Parse arguments for the /edit command.

    The value is everything after the field, so ``/edit 1 2 min 32 min`` sets
    the value to ``"32 min"``.
    """
    parts = command.split()[1:]
    args: Dict[str, Any] = {"file": None}

    if "--file" in parts:
        idx = parts.index("--file")
        if idx + 1 >= len(parts):
            raise CommandError("--file requires a path")
        args["file"] = parts[idx + 1]
        parts = parts[:idx] + parts[idx + 2 :]

    unknown = [p for p in parts if p.startswith("--")]
    if unknown:
        raise CommandError(f"Unknown option: {unknown[0]}")
    if len(parts) < 4:
        raise CommandError(USAGE)

    args["injury"] = parts[0]
    args["teammate"] = parts[1]
    args["field"] = parts[2]
    args["value"] = " ".join(parts[3:])
    return args


def find_injury(injuries: Sequence[InjuredPlayer], injury_id: str) -> int:
    """Return the position of the injury whose ID matches ``injury_id``."""
    for idx, injury in enumerate(injuries):
        if str(injury.id) == injury_id:
            return idx
    raise CommandError(f"No injury with ID {injury_id}")


def find_teammate(injury: InjuredPlayer, query: str) -> int:
    """Resolve a teammate by 1-based number or unique name fragment.

    Returns:
        0-based index into ``injury.teammates``
    """
    if query.isdigit():
        number = int(query)
        if not 1 <= number <= len(injury.teammates):
            raise CommandError(
                f"{injury.label} has {len(injury.teammates)} teammates, no #{number}"
            )
        return number - 1

    needle = query.lower()
    matches = [
        idx for idx, teammate in enumerate(injury.teammates)
        if needle in teammate.name.lower()
    ]
    if not matches:
        raise CommandError(f"No teammate of {injury.label} matches '{query}'")
    if len(matches) > 1:
        names = ", ".join(injury.teammates[idx].name for idx in matches)
        raise CommandError(f"'{query}' matches several teammates: {names}")
    return matches[0]


class EditCommand(Command):
    """Change a teammate's minutes, usage or stat and show the new projection."""

    def __init__(self, console: Console, config: Optional[Settings] = None) -> None:
        super().__init__(console)
        self.config = config or default_settings

    @property
    def name(self) -> str:
        return "/edit"

    @property
    def description(self) -> str:
        return "Edit a teammate's minutes, usage or stat, save it and re-project."

    @property
    def arguments(self) -> List[Dict[str, str | bool]]:
        return [
            {
                "name": "<injury-id>",
                "required": True,
                "description": "ID of the injured player (see /injuries --json)",
            },
            {
                "name": "<teammate>",
                "required": True,
                "description": "Teammate number (1 = first row) or part of their name",
            },
            {
                "name": "<field>",
                "required": True,
                "description": "current_minutes, current_usage or a stat (pts, reb, 3PTM, fg...)",
            },
            {
                "name": "<value>",
                "required": True,
                "description": "New value; unparseable input becomes 0",
            },
            {
                "name": "--file",
                "required": False,
                "description": "Injury file to edit",
                "default": str(self.config.injury_file),
            },
        ]

    def execute(self, command: str) -> None:
        args = parse_edit_args(command)
        path = Path(args["file"]).expanduser() if args["file"] else self.config.injury_file

        try:
            injuries = read_input_file(
                load_injuries, path, "Injury file", hint="use /import to create one"
            )
            injury_idx = find_injury(injuries, args["injury"])
            injury = injuries[injury_idx]
            teammate_idx = find_teammate(injury, args["teammate"])
            updated = update_teammate_field(
                injury, teammate_idx, args["field"], args["value"]
            )
        except InvalidRecordError as e:
            raise CommandError(f"Invalid edit: {e}") from e

        injuries = list(injuries)
        injuries[injury_idx] = updated
        try:
            save_injuries(path, injuries)
        except OSError as e:
            raise CommandError(f"Could not write injury file {path}: {e}") from e

        teammate = updated.teammates[teammate_idx]
        logger.info(
            f"Edited {args['field']} of {teammate.name} for injury {updated.id}"
        )
        self.console.print(
            f"[green]✓[/green] Updated {escape(args['field'])} for "
            f"{escape(teammate.name)} ({escape(updated.label)})"
        )

        reports = project_injuries(
            [updated],
            minute_factor=self.config.minute_redistribution_factor,
            usage_factor=self.config.usage_redistribution_factor,
        )
        render_reports(self.console, reports)
