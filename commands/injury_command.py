"""Injury redistribution report command for the Sixth Man CLI."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from rich.console import Console
from rich.markup import escape

from commands import Command, CommandError, read_input_file
from tools.injury.batch import InjuryReport, project_injuries, summarize_reports
from tools.injury.demo_data import DEMO_INJURIES
from tools.injury.errors import InvalidRecordError
from tools.injury.injury_models import InjuredPlayer
from tools.injury.injury_store import injuries_from_payload, load_injuries
from tools.utils.config import Settings, settings as default_settings
from tools.utils.render import render_projection_table

logger = logging.getLogger(__name__)


def parse_injury_args(command: str) -> Dict[str, Any]:
    """Parse arguments for the /injuries command."""
    parts = command.split()
    args: Dict[str, Any] = {"demo": False, "json": False, "file": None, "player": None}

    remaining = parts[1:]
    i = 0
    while i < len(remaining):
        token = remaining[i]
        if token == "--demo":
            args["demo"] = True
            i += 1
        elif token == "--json":
            args["json"] = True
            i += 1
        elif token == "--file":
            if i + 1 >= len(remaining):
                raise CommandError("--file requires a path")
            args["file"] = remaining[i + 1]
            i += 2
        elif token == "--player":
            # Player names may span several tokens, up to the next option
            name_parts: List[str] = []
            i += 1
            while i < len(remaining) and not remaining[i].startswith("--"):
                name_parts.append(remaining[i])
                i += 1
            if not name_parts:
                raise CommandError("--player requires a name")
            args["player"] = " ".join(name_parts)
        elif token.startswith("--"):
            raise CommandError(f"Unknown option: {token}")
        else:
            raise CommandError(
                "Usage: /injuries [--file <path>] [--demo] [--json] [--player <name>]"
            )

    if args["demo"] and args["file"]:
        raise CommandError("--demo and --file cannot be combined")

    return args


def _filter_by_player(injuries: Sequence[InjuredPlayer], query: str) -> List[InjuredPlayer]:
    needle = query.lower()
    return [
        injury
        for injury in injuries
        if needle in injury.player.lower() or needle == str(injury.id).lower()
    ]


def render_reports(console: Console, reports: Sequence[InjuryReport]) -> None:
    """Print one projection table per report, then a summary line."""
    for report in reports:
        if report.error is not None:
            console.print(
                f"[red]✗[/red] {escape(report.injury.label)}: {escape(str(report.error))}"
            )
            continue

        console.print(render_projection_table(report))
        for err in report.errors:
            console.print(
                f"  [yellow]⚠[/yellow] Excluded {escape(err.teammate_name)}: {escape(str(err))}"
            )
        console.print()

    summary = summarize_reports(reports)
    console.print(
        f"{summary['injuries']} injuries, "
        f"{summary['projected_teammates']} teammates projected, "
        f"{summary['excluded_teammates']} excluded, "
        f"{summary['degenerate']} without a usable roster",
        style="dim",
    )


class InjuryCommand(Command):
    """Project how injured players' minutes and usage redistribute to teammates."""

    def __init__(self, console: Console, config: Optional[Settings] = None) -> None:
        super().__init__(console)
        self.config = config or default_settings

    @property
    def name(self) -> str:
        return "/injuries"

    @property
    def aliases(self) -> Sequence[str]:
        return ("/inj",)

    @property
    def description(self) -> str:
        return "Project teammate stats with injured players' minutes and usage redistributed."

    @property
    def arguments(self) -> List[Dict[str, str | bool]]:
        return [
            {
                "name": "--file",
                "required": False,
                "description": "Injury JSON file to load",
                "default": str(self.config.injury_file),
            },
            {
                "name": "--demo",
                "required": False,
                "description": "Use the built-in sample injuries",
            },
            {
                "name": "--json",
                "required": False,
                "description": "Print projections as JSON instead of tables",
            },
            {
                "name": "--player",
                "required": False,
                "description": "Only show injuries matching this player name or ID",
            },
        ]

    def _load(self, args: Dict[str, Any]) -> List[InjuredPlayer]:
        if args["demo"]:
            return injuries_from_payload(DEMO_INJURIES)

        path = Path(args["file"]).expanduser() if args["file"] else self.config.injury_file
        return read_input_file(
            load_injuries, path, "Injury file", hint="use --demo for sample data"
        )

    def execute(self, command: str) -> None:
        args = parse_injury_args(command)
        try:
            injuries = self._load(args)
        except InvalidRecordError as e:
            raise CommandError(f"Invalid injury record: {e}") from e

        if args["player"]:
            injuries = _filter_by_player(injuries, args["player"])

        if not injuries:
            self.console.print("No injured players to project.", style="yellow")
            return

        reports = project_injuries(
            injuries,
            minute_factor=self.config.minute_redistribution_factor,
            usage_factor=self.config.usage_redistribution_factor,
        )

        if args["json"]:
            self.console.print_json(
                json.dumps({"injuries": [report.to_dict() for report in reports]})
            )
            return

        render_reports(self.console, reports)
