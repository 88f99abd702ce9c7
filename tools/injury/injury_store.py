"""Load, save and edit locally stored injury records.

The injury file holds user-edited injury state as JSON::

    {"injuries": [{"id": 1, "average_minutes": 34.8, "usage_rate": 29.4,
                   "teammates": [...]}]}

Both snake_case keys and the web client's camelCase keys (``avgMinutes``,
``currentMin``, ``pts``, ``fg``...) are accepted. Only inputs are stored;
projections are always recomputed.
"""

from __future__ import annotations

import json
import logging
import math
import re
from dataclasses import asdict, replace
from pathlib import Path
from typing import Any, Dict, List, Union

from pydantic import AliasChoices, BaseModel, Field, ValidationError

from tools.injury.errors import InvalidRecordError
from tools.injury.injury_models import BoxScoreProfile, InjuredPlayer, TeammateRecord
from tools.injury.validation import validate_injury, validate_teammate
from tools.utils.file_utils import atomic_write
from tools.utils.stat_mappings import get_field_for_stat

logger = logging.getLogger(__name__)


def _aliases(*names: str) -> AliasChoices:
    return AliasChoices(*names)


class BoxScorePayload(BaseModel):
    """Box score as stored in the injury file."""

    points: float = Field(0.0, validation_alias=_aliases("points", "pts"))
    rebounds: float = Field(0.0, validation_alias=_aliases("rebounds", "reb"))
    assists: float = Field(0.0, validation_alias=_aliases("assists", "ast"))
    steals: float = Field(0.0, validation_alias=_aliases("steals", "stl"))
    blocks: float = Field(0.0, validation_alias=_aliases("blocks", "blk"))
    turnovers: float = Field(0.0, validation_alias=_aliases("turnovers", "tov", "to"))
    fg_pct: float = Field(0.0, validation_alias=_aliases("fg_pct", "fg"))
    threes: float = Field(0.0, validation_alias=_aliases("threes", "3pm"))

    def to_profile(self) -> BoxScoreProfile:
        return BoxScoreProfile(**self.model_dump())


class TeammatePayload(BaseModel):
    """Teammate as stored in the injury file."""

    name: str
    position: str = ""
    current_minutes: float = Field(
        validation_alias=_aliases("current_minutes", "currentMin")
    )
    current_usage: float = Field(
        validation_alias=_aliases("current_usage", "currentUsage")
    )
    stats: BoxScorePayload = Field(default_factory=BoxScorePayload)

    def to_record(self) -> TeammateRecord:
        return TeammateRecord(
            name=self.name,
            position=self.position,
            current_minutes=self.current_minutes,
            current_usage=self.current_usage,
            stats=self.stats.to_profile(),
        )


class InjuryPayload(BaseModel):
    """Injured player as stored in the injury file."""

    id: Union[int, str]
    average_minutes: float = Field(
        validation_alias=_aliases("average_minutes", "avgMinutes")
    )
    usage_rate: float = Field(validation_alias=_aliases("usage_rate", "usageRate"))
    teammates: List[TeammatePayload] = Field(default_factory=list)
    player: str = ""
    team: str = ""
    position: str = ""
    injury: str = ""
    status: str = ""

    def to_record(self) -> InjuredPlayer:
        return InjuredPlayer(
            id=self.id,
            average_minutes=self.average_minutes,
            usage_rate=self.usage_rate,
            teammates=[tm.to_record() for tm in self.teammates],
            player=self.player,
            team=self.team,
            position=self.position,
            injury=self.injury,
            status=self.status,
        )


def _invalid_from_validation_error(record: str, error: ValidationError) -> InvalidRecordError:
    first = error.errors()[0]
    loc = ".".join(str(part) for part in first.get("loc", ()))
    return InvalidRecordError(record, loc or None, first.get("input"), first.get("msg", "invalid"))


def injuries_from_payload(data: Any) -> List[InjuredPlayer]:
    """Parse and validate injury records from decoded JSON.

    Args:
        data: ``{"injuries": [...]}`` or a bare list of injury dicts

    Returns:
        Validated InjuredPlayer records in file order

    Raises:
        InvalidRecordError: If any record is malformed or out of range
    """
    if isinstance(data, dict):
        data = data.get("injuries", [])
    if not isinstance(data, list):
        raise InvalidRecordError("injuries", None, type(data).__name__, "expected a list")

    injuries: List[InjuredPlayer] = []
    for idx, entry in enumerate(data):
        try:
            payload = InjuryPayload.model_validate(entry)
        except ValidationError as e:
            raise _invalid_from_validation_error(f"injuries[{idx}]", e) from e
        injuries.append(validate_injury(payload.to_record()))
    return injuries


def injury_to_payload(injury: InjuredPlayer) -> Dict[str, Any]:
    """Convert an injury record to its snake_case JSON form."""
    return asdict(injury)


def load_injuries(path: Union[str, Path]) -> List[InjuredPlayer]:
    """Load injury records from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the file is not valid JSON
        UnicodeDecodeError: If the file is not UTF-8 text
        OSError: If the path cannot be read (a directory, no permission)
        InvalidRecordError: If any record is invalid
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    injuries = injuries_from_payload(data)
    logger.info(f"Loaded {len(injuries)} injuries from {path}")
    return injuries


def save_injuries(path: Union[str, Path], injuries: List[InjuredPlayer]) -> None:
    """Write injury records to a JSON file atomically."""
    content = json.dumps(
        {"injuries": [injury_to_payload(injury) for injury in injuries]}, indent=2
    )
    atomic_write(path, content + "\n")
    logger.info(f"Saved {len(injuries)} injuries to {path}")


# Editable teammate fields, keyed by accepted name
_TEAMMATE_FIELDS = {
    "current_minutes": "current_minutes",
    "currentMin": "current_minutes",
    "current_usage": "current_usage",
    "currentUsage": "current_usage",
}

_STAT_FIELDS = {
    "points": "points",
    "pts": "points",
    "rebounds": "rebounds",
    "reb": "rebounds",
    "assists": "assists",
    "ast": "assists",
    "steals": "steals",
    "stl": "steals",
    "blocks": "blocks",
    "blk": "blocks",
    "turnovers": "turnovers",
    "tov": "turnovers",
    "to": "turnovers",
    "fg_pct": "fg_pct",
    "fg": "fg_pct",
    "threes": "threes",
    "3pm": "threes",
}


# Leading number of a user-entered string
_NUMBER_PREFIX = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def _parse_float(value: Any) -> float:
    """Parse a user-entered value, treating anything unparseable as 0.

    Strings are read up to the end of their leading number, so "32 min" is 32.
    """
    if isinstance(value, str):
        match = _NUMBER_PREFIX.match(value)
        value = match.group(0) if match else None
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return 0.0
    return parsed if math.isfinite(parsed) else 0.0


def update_teammate_field(
    injury: InjuredPlayer, teammate_index: int, field: str, value: Any
) -> InjuredPlayer:
    """Return a copy of ``injury`` with one teammate field changed.

    The input record is left untouched so callers can simply re-project the
    returned copy.

    Args:
        injury: Injury to edit
        teammate_index: Position of the teammate in ``injury.teammates``
        field: ``current_minutes``, ``current_usage`` or a box score stat
               (camelCase aliases such as ``currentMin`` or ``pts`` and Yahoo
               stat names such as ``3PTM`` accepted)
        value: New value; unparseable input becomes 0.0

    Raises:
        InvalidRecordError: For an unknown field, a bad index, or an
                            out-of-range value
    """
    if not 0 <= teammate_index < len(injury.teammates):
        raise InvalidRecordError(
            f"injury[{injury.id}]", "teammates", teammate_index, "no teammate at index"
        )

    teammate = injury.teammates[teammate_index]
    number = _parse_float(value)
    stat = _STAT_FIELDS.get(field) or get_field_for_stat(field)

    if field in _TEAMMATE_FIELDS:
        updated = replace(teammate, **{_TEAMMATE_FIELDS[field]: number})
    elif stat:
        stats = replace(teammate.stats, **{stat: number})
        updated = replace(teammate, stats=stats)
    else:
        raise InvalidRecordError(
            f"injury[{injury.id}].teammate[{teammate.name}]", field, value, "unknown field"
        )

    validate_teammate(updated, injury.id)

    teammates = list(injury.teammates)
    teammates[teammate_index] = updated
    return replace(injury, teammates=teammates)
