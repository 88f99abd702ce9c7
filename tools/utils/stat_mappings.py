"""Stat name mapping utilities for converting between different formats.

Maps stat names/abbreviations between different representations:
- Yahoo stat IDs (e.g., "12" for points, "5" for FG%)
- Yahoo stat names (e.g., "3PTM", "FG%")
- Box score profile field names (lowercase: "threes", "fg_pct")
"""

from __future__ import annotations

from typing import Dict

# Yahoo Fantasy NBA stat IDs used when reading roster player stats
YAHOO_STAT_ID_TO_FIELD: Dict[str, str] = {
    "0": "games_played",
    "2": "minutes",
    "5": "fg_pct",
    "10": "threes",
    "12": "points",
    "15": "rebounds",
    "16": "assists",
    "17": "steals",
    "18": "blocks",
    "19": "turnovers",
}

# Column labels used when rendering box score fields
FIELD_DISPLAY_NAMES: Dict[str, str] = {
    "points": "PTS",
    "rebounds": "REB",
    "assists": "AST",
    "steals": "STL",
    "blocks": "BLK",
    "turnovers": "TO",
    "fg_pct": "FG%",
    "threes": "3PM",
}


def build_stat_name_to_field_mapping() -> Dict[str, str]:
    """Map stat names/abbreviations to box score profile field names.

    Returns:
        Dictionary mapping Yahoo stat names to profile field names

    Examples:
        >>> mapping = build_stat_name_to_field_mapping()
        >>> mapping["3PTM"]
        'threes'
        >>> mapping["FG%"]
        'fg_pct'
    """
    return {
        # Percentage stats
        "FG%": "fg_pct",
        # Counting stats
        "3PTM": "threes",
        "3PM": "threes",
        "PTS": "points",
        "REB": "rebounds",
        "AST": "assists",
        "ST": "steals",
        "STL": "steals",
        "BLK": "blocks",
        "TO": "turnovers",
    }


def get_field_for_stat(stat_name: str) -> str:
    """Get the profile field name for a given stat name.

    Args:
        stat_name: Yahoo stat name (e.g., "3PTM", "FG%")

    Returns:
        Field name (e.g., "threes", "fg_pct"), or empty string if not found
    """
    mapping = build_stat_name_to_field_mapping()
    return mapping.get(stat_name, "")


def get_field_for_yahoo_stat_id(stat_id: str) -> str:
    """Get the profile field name for a Yahoo stat ID, or empty string."""
    return YAHOO_STAT_ID_TO_FIELD.get(str(stat_id), "")


def get_display_name(field_name: str) -> str:
    """Get the column label for a profile field (e.g., "points" -> "PTS")."""
    return FIELD_DISPLAY_NAMES.get(field_name, field_name.upper())


def is_percentage_stat(stat_name: str) -> bool:
    """Check if a stat is a percentage stat.

    Percentage stats are carried through as rates rather than scaled by
    minutes or divided by games played.

    Args:
        stat_name: Stat name or profile field name to check

    Returns:
        True if stat is a percentage stat
    """
    return "%" in stat_name or stat_name.endswith("_pct")
