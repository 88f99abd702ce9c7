"""Command modules for the Sixth Man CLI."""

from __future__ import annotations

from abc import ABC, abstractmethod
import json
from pathlib import Path
from typing import Callable, Dict, List, Sequence, TypeVar

from rich.console import Console


class Command(ABC):
    """Base class for CLI commands."""

    def __init__(self, console: Console) -> None:
        self.console = console

    @property
    @abstractmethod
    def name(self) -> str:
        """Primary command name (e.g., '/injuries')."""

    @property
    def aliases(self) -> Sequence[str]:
        """Additional aliases for this command (e.g., ['/inj'] for '/injuries')."""
        return ()

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what this command does."""

    @property
    def arguments(self) -> List[Dict[str, str | bool]]:
        """Return list of argument definitions for this command.

        Each argument is a dict with keys:
        - name: The argument name (e.g., '--file', '--json')
        - required: Boolean indicating if the argument is required
        - description: Human-readable description of the argument
        - default: (optional) Default value if not provided

        Returns empty list by default (no arguments).
        """
        return []

    def should_show_help(self, command: str) -> bool:
        """Check if help flag (-h or --help) is present in command string."""
        parts = command.split()
        return "-h" in parts or "--help" in parts

    def show_help(self) -> None:
        """Display help information for this command."""
        from tools.utils.cli_common import render_command_help

        render_command_help(self.name, self.description, self.arguments, self.console)

    def run(self, command: str) -> None:
        """Show help when -h/--help is given, otherwise execute the command."""
        if self.should_show_help(command):
            self.show_help()
            return
        self.execute(command)

    @abstractmethod
    def execute(self, command: str) -> None:
        """Execute the command with the full command string."""


class CommandError(Exception):
    """Custom exception for command parsing errors."""


T = TypeVar("T")


def read_input_file(
    loader: Callable[[Path], T], path: Path, label: str, hint: str = ""
) -> T:
    """Run a file loader, turning unreadable or malformed files into CommandError.

    Args:
        loader: Function that reads and parses the file
        path: File to read
        label: What the file holds, used in messages (e.g. "Injury file")
        hint: Extra text appended when the file does not exist

    Returns:
        Whatever the loader returns
    """
    try:
        return loader(path)
    except FileNotFoundError as e:
        suffix = f" ({hint})" if hint else ""
        raise CommandError(f"{label} not found: {path}{suffix}") from e
    except json.JSONDecodeError as e:
        raise CommandError(f"{label} {path} is not valid JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise CommandError(f"{label} {path} is not UTF-8 text: {e}") from e
    except OSError as e:
        raise CommandError(f"Could not read {label.lower()} {path}: {e}") from e
