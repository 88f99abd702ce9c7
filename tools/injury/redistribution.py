"""Redistribute an injured player's minutes and usage among teammates.

The injured player's lost minutes and usage are split among teammates in
proportion to their current share of team minutes and usage, then converted
into projected per-game box scores:

- Points, threes and turnovers scale with projected minutes and the square
  root of the usage multiplier.
- Assists scale with projected minutes and the usage multiplier to the 0.6.
- Rebounds, steals and blocks scale with projected minutes only.
- FG% takes a linear efficiency penalty of 2% per unit of usage increase.

Every function here is pure. Teammates that cannot be projected are reported
in place as ``InsufficientBaselineError`` instances so the rest of the roster
is still projected.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional, Sequence, Tuple, Union

from tools.injury.errors import DegenerateRosterError, InsufficientBaselineError
from tools.injury.injury_models import (
    INCREASE_STATS,
    STAT_FIELDS,
    BoxScoreProfile,
    InjuredPlayer,
    ProjectionResult,
    TeammateRecord,
)

logger = logging.getLogger(__name__)

# Share of the injured player's minutes the roster absorbs; the rest is lost
# to lineup changes and rest.
MIN_REDISTRIBUTION_FACTOR = 0.85

# Possessions are harder to reclaim than minutes.
USAGE_REDISTRIBUTION_FACTOR = 0.70

# FG% lost per unit increase of the usage multiplier, relative to current FG%.
FG_PCT_PENALTY_PER_USAGE = 0.02

# Exponent applied to the usage multiplier for each counting stat.
# Zero means the stat scales with minutes only.
USAGE_EXPONENTS: Dict[str, float] = {
    "points": 0.5,
    "threes": 0.5,
    "turnovers": 0.5,
    "assists": 0.6,
    "rebounds": 0.0,
    "steals": 0.0,
    "blocks": 0.0,
}

TeammateOutcome = Union[ProjectionResult, InsufficientBaselineError]

__all__ = [
    "FG_PCT_PENALTY_PER_USAGE",
    "MIN_REDISTRIBUTION_FACTOR",
    "USAGE_EXPONENTS",
    "USAGE_REDISTRIBUTION_FACTOR",
    "TeammateOutcome",
    "percent_change",
    "project",
    "project_stats",
    "split_outcomes",
]


def _round_pct(value: float) -> int:
    """Round a percentage to an integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def percent_change(projected: float, current: float) -> Optional[int]:
    """Return the relative change from current to projected as an integer percent.

    Args:
        projected: Projected value
        current: Current value

    Returns:
        Rounded percentage change, or None when current is zero
    """
    if current == 0:
        return None
    return _round_pct((projected - current) / current * 100)


def project_stats(
    stats: BoxScoreProfile,
    current_minutes: float,
    projected_minutes: float,
    usage_multiplier: float,
) -> BoxScoreProfile:
    """Project a box score onto new minutes and usage.

    Args:
        stats: Current per-game box score
        current_minutes: Current minutes per game (must be non-zero)
        projected_minutes: Projected minutes per game
        usage_multiplier: Projected usage divided by current usage

    Returns:
        Projected BoxScoreProfile
    """
    projected: Dict[str, float] = {}
    for stat, exponent in USAGE_EXPONENTS.items():
        rate = stats.get(stat) / current_minutes
        value = rate * projected_minutes
        if exponent:
            value *= usage_multiplier**exponent
        projected[stat] = value

    projected["fg_pct"] = stats.fg_pct * (
        1 - (usage_multiplier - 1) * FG_PCT_PENALTY_PER_USAGE
    )
    return BoxScoreProfile(**{stat: projected[stat] for stat in STAT_FIELDS})


def _missing_baseline(teammate: TeammateRecord) -> Optional[str]:
    if teammate.current_minutes == 0:
        return "current_minutes"
    if teammate.current_usage == 0:
        return "current_usage"
    return None


def _project_teammate(
    injury: InjuredPlayer,
    teammate: TeammateRecord,
    total_minutes: float,
    total_usage: float,
    minute_factor: float,
    usage_factor: float,
) -> ProjectionResult:
    minute_share = teammate.current_minutes / total_minutes
    usage_share = teammate.current_usage / total_usage

    additional_minutes = injury.average_minutes * minute_share * minute_factor
    additional_usage = injury.usage_rate * usage_share * usage_factor

    projected_minutes = teammate.current_minutes + additional_minutes
    projected_usage = teammate.current_usage + additional_usage
    usage_multiplier = projected_usage / teammate.current_usage

    projected_stats = project_stats(
        teammate.stats, teammate.current_minutes, projected_minutes, usage_multiplier
    )

    stat_increase_pct = {
        stat: percent_change(projected_stats.get(stat), teammate.stats.get(stat))
        for stat in INCREASE_STATS
    }

    return ProjectionResult(
        teammate=teammate,
        additional_minutes=additional_minutes,
        additional_usage=additional_usage,
        projected_minutes=projected_minutes,
        projected_usage=projected_usage,
        usage_multiplier=usage_multiplier,
        minute_increase_pct=_round_pct(additional_minutes / teammate.current_minutes * 100),
        usage_increase_pct=_round_pct(additional_usage / teammate.current_usage * 100),
        projected_stats=projected_stats,
        stat_increase_pct=stat_increase_pct,
        fg_pct_change_pct=percent_change(projected_stats.fg_pct, teammate.stats.fg_pct),
        turnover_change_pct=percent_change(
            projected_stats.turnovers, teammate.stats.turnovers
        ),
    )


def project(
    injury: InjuredPlayer,
    *,
    minute_factor: float = MIN_REDISTRIBUTION_FACTOR,
    usage_factor: float = USAGE_REDISTRIBUTION_FACTOR,
) -> List[TeammateOutcome]:
    """Project every teammate's production with the injured player out.

    Args:
        injury: Injured player with their teammates (assumed validated)
        minute_factor: Share of the injured player's minutes redistributed
        usage_factor: Share of the injured player's usage redistributed

    Returns:
        One entry per teammate, in input order: a ProjectionResult, or an
        InsufficientBaselineError when the teammate has zero current minutes
        or usage

    Raises:
        DegenerateRosterError: If total teammate minutes or usage is zero
    """
    teammates = injury.teammates
    if not teammates:
        logger.debug(f"Injury {injury.id} has no teammates, nothing to redistribute")
        return []

    total_minutes = sum(tm.current_minutes for tm in teammates)
    total_usage = sum(tm.current_usage for tm in teammates)
    if total_minutes == 0 or total_usage == 0:
        raise DegenerateRosterError(injury.id, total_minutes, total_usage)

    outcomes: List[TeammateOutcome] = []
    for teammate in teammates:
        missing = _missing_baseline(teammate)
        if missing:
            error = InsufficientBaselineError(injury.id, teammate.name, missing)
            logger.warning(str(error))
            outcomes.append(error)
            continue

        result = _project_teammate(
            injury, teammate, total_minutes, total_usage, minute_factor, usage_factor
        )
        logger.debug(
            f"Injury {injury.id}: {teammate.name} +{result.additional_minutes:.1f} min, "
            f"+{result.additional_usage:.1f} usage (x{result.usage_multiplier:.3f})"
        )
        outcomes.append(result)

    return outcomes


def split_outcomes(
    outcomes: Sequence[TeammateOutcome],
) -> Tuple[List[ProjectionResult], List[InsufficientBaselineError]]:
    """Separate projected teammates from excluded ones, keeping order."""
    results = [o for o in outcomes if isinstance(o, ProjectionResult)]
    errors = [o for o in outcomes if isinstance(o, InsufficientBaselineError)]
    return results, errors
