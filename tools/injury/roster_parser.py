"""Build injury records from already-fetched Yahoo Fantasy roster payloads.

A rostered player with a non-healthy ``status`` (``INJ``, ``O``, ``DTD``...)
becomes an ``InjuredPlayer``; the other players on the same roster become its
teammates. Nothing here touches the network.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from tools.injury.errors import InvalidRecordError
from tools.injury.injury_models import BoxScoreProfile, InjuredPlayer, TeammateRecord
from tools.injury.validation import validate_injury
from tools.utils.config import settings
from tools.utils.serialization import (
    ensure_string,
    extract_player_name,
    extract_stats_from_player,
    serialize_player_entry,
)
from tools.utils.stat_mappings import get_field_for_yahoo_stat_id, is_percentage_stat

logger = logging.getLogger(__name__)

HEALTHY_STATUSES = {"", "healthy"}

# League-average placeholder for teammates with no stats on their payload
DEFAULT_TEAMMATE_STATS = BoxScoreProfile(
    points=12.0,
    rebounds=4.5,
    assists=3.2,
    steals=0.8,
    blocks=0.5,
    turnovers=1.5,
    fg_pct=45.0,
    threes=1.8,
)


def _to_percent(value: float) -> float:
    """Normalize a rate given as a fraction (0.476) or percent (47.6) to percent.

    Values of 1 and above are already percentages, so a 1.0% usage stays 1.0.
    """
    return value * 100 if 0 < value < 1 else value


def is_injured(player: Dict[str, Any]) -> bool:
    status = (ensure_string(player.get("status")) or "").strip()
    return status.lower() not in HEALTHY_STATUSES


def parse_player_stats(player: Dict[str, Any]) -> Dict[str, float]:
    """Map a player's Yahoo stats to per-game profile fields.

    Counting stats are divided by games played when Yahoo reports totals
    alongside a games-played stat. FG% and usage are normalized to 0-100.

    Args:
        player: Serialized Yahoo player dict

    Returns:
        Dict keyed by profile field name plus ``minutes`` and ``usage`` when known
    """
    raw = extract_stats_from_player(player)

    parsed: Dict[str, float] = {}
    for stat_id, value in raw.items():
        field = get_field_for_yahoo_stat_id(stat_id)
        if field:
            parsed[field] = value

    games = parsed.pop("games_played", 0.0)
    if games > 0:
        for field in list(parsed):
            if not is_percentage_stat(field):
                parsed[field] = parsed[field] / games

    if "fg_pct" in parsed:
        parsed["fg_pct"] = _to_percent(parsed["fg_pct"])

    usage = player.get("usage_pct")
    if usage is not None:
        try:
            parsed["usage"] = _to_percent(float(usage))
        except (TypeError, ValueError):
            logger.debug(f"Ignoring unparseable usage_pct {usage!r}")

    return parsed


def _profile_from_stats(stats: Dict[str, float]) -> BoxScoreProfile:
    fields = {
        name: stats[name]
        for name in BoxScoreProfile.__dataclass_fields__
        if name in stats
    }
    if not fields:
        return DEFAULT_TEAMMATE_STATS
    return BoxScoreProfile(**fields)


def parse_teammate(
    player: Dict[str, Any],
    default_minutes: Optional[float] = None,
    default_usage: Optional[float] = None,
) -> TeammateRecord:
    """Build a TeammateRecord from a serialized Yahoo player.

    Missing (or zero) minutes and usage fall back to the configured defaults.
    """
    if default_minutes is None:
        default_minutes = settings.default_teammate_minutes
    if default_usage is None:
        default_usage = settings.default_teammate_usage

    stats = parse_player_stats(player)
    return TeammateRecord(
        name=extract_player_name(player),
        position=ensure_string(player.get("display_position")) or "",
        current_minutes=stats.get("minutes") or default_minutes,
        current_usage=stats.get("usage") or default_usage,
        stats=_profile_from_stats(stats),
    )


def parse_roster_injuries(
    roster: Iterable[Any],
    max_teammates: Optional[int] = None,
    default_minutes: Optional[float] = None,
    default_usage: Optional[float] = None,
) -> List[InjuredPlayer]:
    """Find injured players on a roster and pair each with its teammates.

    Args:
        roster: Player entries (dicts, yfpy Player objects, or ``{"player": ...}``)
        max_teammates: Cap on teammates per injury, in roster order
        default_minutes: Fallback minutes for teammates without a minutes stat
        default_usage: Fallback usage for teammates without a usage rate

    Returns:
        Validated InjuredPlayer records, one per injured player, in roster order

    Raises:
        InvalidRecordError: If a parsed record falls outside accepted ranges
    """
    if max_teammates is None:
        max_teammates = settings.max_teammates

    players = []
    for entry in roster:
        player = serialize_player_entry(entry)
        if player is None:
            logger.debug(f"Skipping roster entry that could not be serialized: {entry!r}")
            continue
        players.append(player)

    injuries: List[InjuredPlayer] = []
    for player in players:
        if not is_injured(player):
            continue

        player_id = player.get("player_id") or player.get("player_key")
        teammates = [
            parse_teammate(other, default_minutes, default_usage)
            for other in players
            if other is not player
        ][:max_teammates]

        stats = parse_player_stats(player)
        injury = InjuredPlayer(
            id=player_id,
            average_minutes=stats.get("minutes", 0.0),
            usage_rate=stats.get("usage", 0.0),
            teammates=teammates,
            player=extract_player_name(player),
            team=ensure_string(player.get("editorial_team_full_name")) or "",
            position=ensure_string(player.get("display_position")) or "",
            injury=ensure_string(player.get("injury_note")) or "",
            status=ensure_string(player.get("status")) or "",
        )
        injuries.append(validate_injury(injury))
        logger.info(
            f"Found injured player {injury.label} ({injury.status}) "
            f"with {len(teammates)} teammates"
        )

    return injuries


def load_roster_file(path: Union[str, Path]) -> List[Any]:
    """Read a saved roster payload from a JSON file.

    The file may hold a bare list of player entries, or an object with the
    entries under ``players`` or ``roster``.

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the file is not valid JSON
        InvalidRecordError: If no player list is found
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("players", data.get("roster"))
    if not isinstance(data, list):
        raise InvalidRecordError("roster", None, type(data).__name__, "expected a list of players")

    logger.info(f"Read {len(data)} roster entries from {path}")
    return data
