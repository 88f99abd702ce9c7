"""Utilities for serializing yfpy objects and extracting data from them."""

from __future__ import annotations

from typing import Any, Dict, Optional


def serialize_yfpy_object(obj: Any) -> Optional[Dict]:
    """Convert a yfpy object to a dictionary.

    Args:
        obj: Object to serialize (dict, yfpy object, or other)

    Returns:
        Dictionary representation, or None if object cannot be serialized
    """
    if obj is None:
        return None

    if isinstance(obj, dict):
        return obj

    # Try yfpy's serialized() method first
    if hasattr(obj, "serialized"):
        return obj.serialized()

    # Fall back to __dict__
    if hasattr(obj, "__dict__"):
        return obj.__dict__

    return None


def serialize_player_entry(entry: Any) -> Optional[dict]:
    """Serialize a roster entry, unwrapping the nested ``{"player": ...}`` shape.

    Args:
        entry: Player dict, yfpy Player object, or ``{"player": ...}`` wrapper

    Returns:
        Serialized player dict or None if unable to serialize
    """
    player = serialize_yfpy_object(entry)
    if isinstance(player, dict) and "player" in player:
        nested = player.get("player")
        # Raw Yahoo JSON wraps the player in a list of attribute dicts
        if isinstance(nested, list):
            merged: Dict[str, Any] = {}
            for part in nested:
                part = serialize_yfpy_object(part)
                if isinstance(part, dict):
                    merged.update(part)
            return merged
        player = serialize_yfpy_object(nested)

    return player if isinstance(player, dict) else None


def extract_stats_from_player(player: dict) -> Dict[str, float]:
    """Extract stat dictionary from a player object.

    Handles both dict and yfpy Player objects, extracting the stats
    from player_stats container.

    Args:
        player: Player dict or yfpy Player object

    Returns:
        Dictionary mapping stat_id to float value
    """
    if not isinstance(player, dict):
        player = serialize_yfpy_object(player)

    if not player:
        return {}

    stats_container = player.get("player_stats", {})
    stats_container = serialize_yfpy_object(stats_container) or stats_container

    # Extract stats array
    stat_entries = (
        stats_container.get("stats")
        if isinstance(stats_container, dict)
        else stats_container
    )

    result: Dict[str, float] = {}
    for stat_entry in stat_entries or []:
        # Serialize the stat entry
        stat_entry = serialize_yfpy_object(stat_entry) or stat_entry

        # Get the stat object
        stat_obj = (
            stat_entry.get("stat") if isinstance(stat_entry, dict) else stat_entry
        )
        stat_obj = serialize_yfpy_object(stat_obj) or stat_obj

        if not isinstance(stat_obj, dict):
            continue

        stat_id = str(stat_obj.get("stat_id"))
        try:
            value = float(stat_obj.get("value", 0.0))
        except (TypeError, ValueError):
            # Yahoo reports "-" for stats with no games
            continue
        result[stat_id] = value

    return result


def extract_player_name(player: dict) -> str:
    """Get a player's full name from a serialized player.

    Yahoo nests the name as ``{"full": ..., "first": ..., "last": ...}``.
    """
    name = player.get("name")
    name = serialize_yfpy_object(name) if name is not None else None
    if isinstance(name, dict):
        full = name.get("full")
        if full:
            return ensure_string(full) or ""
        parts = [name.get("first"), name.get("last")]
        return " ".join(ensure_string(p) for p in parts if p)
    return ensure_string(name) or ""


def ensure_string(value: Any) -> Optional[str]:
    """Ensure a value is a string, handling bytes and other types.

    Args:
        value: Value to convert to string

    Returns:
        String representation or None if value is None
    """
    if value is None:
        return None

    if isinstance(value, bytes):
        return value.decode("utf-8", errors="ignore")

    if isinstance(value, str):
        return value

    return str(value)
