"""Structured errors raised or reported by the injury redistribution engine."""

from __future__ import annotations

from typing import Any, Optional


class InjuryProjectionError(Exception):
    """Base class for injury projection errors."""


class DegenerateRosterError(InjuryProjectionError):
    """Roster totals are zero, so minute or usage shares are undefined."""

    def __init__(self, injury_id: Any, total_minutes: float, total_usage: float) -> None:
        self.injury_id = injury_id
        self.total_minutes = total_minutes
        self.total_usage = total_usage
        super().__init__(
            f"Injury {injury_id}: cannot redistribute with total teammate "
            f"minutes={total_minutes:.1f} and total teammate usage={total_usage:.1f}"
        )


class InsufficientBaselineError(InjuryProjectionError):
    """A teammate has zero current minutes or usage and cannot be projected."""

    def __init__(self, injury_id: Any, teammate_name: str, field: str) -> None:
        self.injury_id = injury_id
        self.teammate_name = teammate_name
        self.field = field
        super().__init__(
            f"Injury {injury_id}: {teammate_name} has no {field} baseline to project from"
        )


class InvalidRecordError(InjuryProjectionError):
    """An input record is malformed or outside the accepted numeric ranges."""

    def __init__(
        self,
        record: str,
        field: Optional[str] = None,
        value: Any = None,
        reason: str = "invalid value",
    ) -> None:
        self.record = record
        self.field = field
        self.value = value
        self.reason = reason
        location = f"{record}.{field}" if field else record
        super().__init__(f"{location}: {reason} (got {value!r})")
