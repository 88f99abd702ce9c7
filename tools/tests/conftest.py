"""Pytest configuration and fixtures for tools tests."""

from __future__ import annotations

import copy
from typing import Dict, List, Optional

import pytest
from rich.console import Console

from tools.injury.demo_data import DEMO_INJURIES
from tools.injury.injury_models import BoxScoreProfile, InjuredPlayer, TeammateRecord
from tools.injury.injury_store import injuries_from_payload
from tools.utils.config import Settings


@pytest.fixture
def temp_data_dir(tmp_path):
    """Create a temporary data directory for testing."""
    data_dir = tmp_path / "sixthman"
    data_dir.mkdir()
    return data_dir


@pytest.fixture
def console() -> Console:
    """Recording console wide enough that table cells never wrap."""
    return Console(record=True, width=300, color_system=None)


@pytest.fixture
def config(temp_data_dir) -> Settings:
    """Settings pointing the injury file at the temporary data directory."""
    return Settings(
        data_dir=temp_data_dir,
        injury_file=temp_data_dir / "injuries.json",
    )


@pytest.fixture
def sample_stats() -> BoxScoreProfile:
    """Bennedict Mathurin's per-game box score from the demo data."""
    return BoxScoreProfile(
        points=17.2,
        rebounds=5.8,
        assists=2.3,
        steals=0.9,
        blocks=0.4,
        turnovers=2.1,
        fg_pct=44.3,
        threes=2.4,
    )


@pytest.fixture
def make_teammate(sample_stats):
    """Returns a function to create teammate records."""

    def _create_teammate(
        name: str = "Teammate",
        current_minutes: float = 28.5,
        current_usage: float = 24.1,
        stats: Optional[BoxScoreProfile] = None,
        position: str = "SG",
    ) -> TeammateRecord:
        return TeammateRecord(
            name=name,
            position=position,
            current_minutes=current_minutes,
            current_usage=current_usage,
            stats=stats if stats is not None else sample_stats,
        )

    return _create_teammate


@pytest.fixture
def make_injury():
    """Returns a function to create injured player records."""

    def _create_injury(
        teammates: List[TeammateRecord],
        average_minutes: float = 34.8,
        usage_rate: float = 29.4,
        injury_id="test-1",
    ) -> InjuredPlayer:
        return InjuredPlayer(
            id=injury_id,
            average_minutes=average_minutes,
            usage_rate=usage_rate,
            teammates=teammates,
            player="Injured Star",
        )

    return _create_injury


@pytest.fixture
def single_teammate_injury(make_teammate, make_injury) -> InjuredPlayer:
    """An injury with one teammate, so both shares are exactly 1."""
    return make_injury([make_teammate(name="Bennedict Mathurin")])


@pytest.fixture
def demo_payload() -> List[Dict]:
    """Deep copy of the demo injuries so tests can edit freely."""
    return copy.deepcopy(DEMO_INJURIES)


@pytest.fixture
def demo_injuries(demo_payload) -> List[InjuredPlayer]:
    """Demo injuries parsed into records."""
    return injuries_from_payload(demo_payload)


@pytest.fixture
def make_yahoo_player():
    """Returns a function to create serialized Yahoo roster players."""

    def _create_player(
        player_id: str,
        full_name: str,
        position: str = "PG",
        status: str = "",
        injury_note: str = "",
        stats: Optional[Dict[str, object]] = None,
        usage_pct: Optional[float] = None,
    ) -> Dict:
        player = {
            "player_id": player_id,
            "player_key": f"nba.p.{player_id}",
            "name": {"full": full_name},
            "display_position": position,
            "editorial_team_full_name": "Indiana Pacers",
            "status": status,
            "injury_note": injury_note,
            "player_stats": {
                "stats": [
                    {"stat": {"stat_id": stat_id, "value": value}}
                    for stat_id, value in (stats or {}).items()
                ]
            },
        }
        if usage_pct is not None:
            player["usage_pct"] = usage_pct
        return player

    return _create_player
