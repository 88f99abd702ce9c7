"""Boundary checks for injury records before they reach the engine."""

from __future__ import annotations

import math
from typing import Any

from tools.injury.errors import InvalidRecordError
from tools.injury.injury_models import STAT_FIELDS, InjuredPlayer, TeammateRecord

MAX_USAGE_RATE = 100.0
MAX_FG_PCT = 100.0


def _check_number(record: str, field: str, value: Any, upper: float = math.inf) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidRecordError(record, field, value, "must be a number")
    if not math.isfinite(value):
        raise InvalidRecordError(record, field, value, "must be finite")
    if value < 0:
        raise InvalidRecordError(record, field, value, "must not be negative")
    if value > upper:
        raise InvalidRecordError(record, field, value, f"must not exceed {upper:g}")


def validate_teammate(teammate: TeammateRecord, injury_id: Any = None) -> TeammateRecord:
    """Check a teammate's minutes, usage and box score ranges.

    Zero minutes or usage pass here; the engine reports them per teammate.

    Raises:
        InvalidRecordError: If any value is non-numeric, non-finite or out of range
    """
    record = f"injury[{injury_id}].teammate[{teammate.name}]"
    _check_number(record, "current_minutes", teammate.current_minutes)
    _check_number(record, "current_usage", teammate.current_usage, MAX_USAGE_RATE)
    for stat in STAT_FIELDS:
        upper = MAX_FG_PCT if stat == "fg_pct" else math.inf
        _check_number(record, f"stats.{stat}", teammate.stats.get(stat), upper)
    return teammate


def validate_injury(injury: InjuredPlayer) -> InjuredPlayer:
    """Check an injured player record and all of its teammates.

    Returns:
        The same record, for chaining

    Raises:
        InvalidRecordError: On the first out-of-range value found
    """
    if injury.id is None or injury.id == "":
        raise InvalidRecordError("injury", "id", injury.id, "is required")

    record = f"injury[{injury.id}]"
    _check_number(record, "average_minutes", injury.average_minutes)
    _check_number(record, "usage_rate", injury.usage_rate, MAX_USAGE_RATE)
    for teammate in injury.teammates:
        validate_teammate(teammate, injury.id)
    return injury
