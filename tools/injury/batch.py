"""Project many injuries at once, isolating failures per injury and teammate."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence

from tools.injury.errors import DegenerateRosterError, InsufficientBaselineError
from tools.injury.injury_models import InjuredPlayer, ProjectionResult
from tools.injury.redistribution import (
    MIN_REDISTRIBUTION_FACTOR,
    USAGE_REDISTRIBUTION_FACTOR,
    project,
    split_outcomes,
)

logger = logging.getLogger(__name__)


@dataclass
class InjuryReport:
    """Projection outcome for a single injury."""

    injury: InjuredPlayer
    results: List[ProjectionResult] = field(default_factory=list)
    errors: List[InsufficientBaselineError] = field(default_factory=list)
    error: Optional[DegenerateRosterError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        injury = self.injury
        return {
            "id": injury.id,
            "player": injury.player,
            "team": injury.team,
            "position": injury.position,
            "injury": injury.injury,
            "status": injury.status,
            "average_minutes": injury.average_minutes,
            "usage_rate": injury.usage_rate,
            "teammates": [result.to_dict() for result in self.results],
            "excluded": [
                {"name": err.teammate_name, "field": err.field, "message": str(err)}
                for err in self.errors
            ],
            "error": str(self.error) if self.error else None,
        }


def project_injuries(
    injuries: Iterable[InjuredPlayer],
    *,
    minute_factor: float = MIN_REDISTRIBUTION_FACTOR,
    usage_factor: float = USAGE_REDISTRIBUTION_FACTOR,
) -> List[InjuryReport]:
    """Run the redistribution engine over each injury independently.

    Args:
        injuries: Injured players to project
        minute_factor: Share of each injured player's minutes redistributed
        usage_factor: Share of each injured player's usage redistributed

    Returns:
        One InjuryReport per injury, in input order. A degenerate roster is
        recorded on its report and does not stop the remaining injuries.
    """
    reports: List[InjuryReport] = []
    for injury in injuries:
        try:
            outcomes = project(
                injury, minute_factor=minute_factor, usage_factor=usage_factor
            )
        except DegenerateRosterError as e:
            logger.warning(f"Skipping injury {injury.id}: {e}")
            reports.append(InjuryReport(injury=injury, error=e))
            continue

        results, errors = split_outcomes(outcomes)
        reports.append(InjuryReport(injury=injury, results=results, errors=errors))

    logger.info(f"Projected {len(reports)} injuries")
    return reports


def summarize_reports(reports: Sequence[InjuryReport]) -> Dict[str, int]:
    """Count projected teammates and failures across reports."""
    return {
        "injuries": len(reports),
        "degenerate": sum(1 for r in reports if not r.ok),
        "projected_teammates": sum(len(r.results) for r in reports),
        "excluded_teammates": sum(len(r.errors) for r in reports),
    }
