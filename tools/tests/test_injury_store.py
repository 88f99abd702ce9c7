"""Tests for loading, saving and editing injury records."""

from __future__ import annotations

import copy
import json

import pytest

from tools.injury.errors import InvalidRecordError
from tools.injury.injury_store import (
    injuries_from_payload,
    injury_to_payload,
    load_injuries,
    save_injuries,
    update_teammate_field,
)
from tools.injury.redistribution import project


class TestPayloadParsing:
    """Test parsing injury payloads."""

    @pytest.mark.unit
    def test_camel_case_payload(self, demo_injuries):
        injury = demo_injuries[0]

        assert injury.id == 1
        assert injury.player == "Tyrese Haliburton"
        assert injury.average_minutes == 34.8
        assert injury.usage_rate == 29.4

        teammate = injury.teammates[0]
        assert teammate.name == "Bennedict Mathurin"
        assert teammate.current_minutes == 28.5
        assert teammate.current_usage == 24.1
        assert teammate.stats.points == 17.2
        assert teammate.stats.turnovers == 2.1
        assert teammate.stats.fg_pct == 44.3

    @pytest.mark.unit
    def test_snake_case_payload(self):
        data = {
            "injuries": [
                {
                    "id": "nba.p.6014",
                    "average_minutes": 30.0,
                    "usage_rate": 25.0,
                    "teammates": [
                        {
                            "name": "Backup",
                            "current_minutes": 20.0,
                            "current_usage": 18.0,
                            "stats": {"points": 9.0, "fg_pct": 47.0},
                        }
                    ],
                }
            ]
        }

        (injury,) = injuries_from_payload(data)

        assert injury.id == "nba.p.6014"
        assert injury.teammates[0].stats.points == 9.0
        assert injury.teammates[0].stats.rebounds == 0.0

    @pytest.mark.unit
    def test_bare_list(self, demo_payload):
        assert len(injuries_from_payload(demo_payload)) == 3

    @pytest.mark.unit
    def test_missing_required_field(self, demo_payload):
        del demo_payload[1]["teammates"][0]["currentMin"]

        with pytest.raises(InvalidRecordError) as exc_info:
            injuries_from_payload(demo_payload)

        assert exc_info.value.record == "injuries[1]"
        assert "teammates" in exc_info.value.field

    @pytest.mark.unit
    def test_non_numeric_value(self, demo_payload):
        demo_payload[0]["avgMinutes"] = "lots"

        with pytest.raises(InvalidRecordError):
            injuries_from_payload(demo_payload)

    @pytest.mark.unit
    def test_out_of_range_value(self, demo_payload):
        demo_payload[2]["teammates"][3]["stats"]["fg"] = 152.1

        with pytest.raises(InvalidRecordError) as exc_info:
            injuries_from_payload(demo_payload)

        assert exc_info.value.field == "stats.fg_pct"

    @pytest.mark.unit
    def test_not_a_list(self):
        with pytest.raises(InvalidRecordError):
            injuries_from_payload({"injuries": "none"})


class TestInjuryFile:
    """Test reading and writing the injury file."""

    @pytest.mark.unit
    def test_save_then_load(self, demo_injuries, temp_data_dir):
        path = temp_data_dir / "injuries.json"

        save_injuries(path, demo_injuries)
        loaded = load_injuries(path)

        assert loaded == demo_injuries

    @pytest.mark.unit
    def test_saved_file_uses_snake_case(self, demo_injuries, temp_data_dir):
        path = temp_data_dir / "nested" / "injuries.json"

        save_injuries(path, demo_injuries[:1])

        data = json.loads(path.read_text())
        entry = data["injuries"][0]
        assert entry["average_minutes"] == 34.8
        assert entry["teammates"][0]["current_minutes"] == 28.5
        assert entry["teammates"][0]["stats"]["fg_pct"] == 44.3

    @pytest.mark.unit
    def test_missing_file(self, temp_data_dir):
        with pytest.raises(FileNotFoundError):
            load_injuries(temp_data_dir / "missing.json")

    @pytest.mark.unit
    def test_injury_to_payload(self, single_teammate_injury):
        payload = injury_to_payload(single_teammate_injury)

        assert payload["id"] == "test-1"
        assert payload["teammates"][0]["name"] == "Bennedict Mathurin"
        assert injuries_from_payload([payload]) == [single_teammate_injury]


class TestUpdateTeammateField:
    """Edits return a new record and leave the input untouched."""

    @pytest.mark.unit
    def test_updates_minutes(self, demo_injuries):
        injury = demo_injuries[0]
        snapshot = copy.deepcopy(injury)

        updated = update_teammate_field(injury, 0, "currentMin", "32.5")

        assert updated.teammates[0].current_minutes == 32.5
        assert updated.teammates[1] == injury.teammates[1]
        assert injury == snapshot

    @pytest.mark.unit
    def test_updates_stat(self, demo_injuries):
        updated = update_teammate_field(demo_injuries[1], 3, "threes", 0.4)

        assert updated.teammates[3].stats.threes == 0.4
        assert updated.teammates[3].stats.points == 11.7

    @pytest.mark.unit
    def test_stat_alias(self, demo_injuries):
        updated = update_teammate_field(demo_injuries[1], 0, "pts", 25)
        assert updated.teammates[0].stats.points == 25.0

    @pytest.mark.unit
    def test_yahoo_stat_name(self, demo_injuries):
        updated = update_teammate_field(demo_injuries[2], 1, "3PTM", "2.6")

        assert updated.teammates[1].stats.threes == 2.6
        assert updated.teammates[1].name == "Kelly Oubre Jr."

    @pytest.mark.unit
    def test_unparseable_value_becomes_zero(self, demo_injuries):
        updated = update_teammate_field(demo_injuries[0], 2, "current_usage", "")
        assert updated.teammates[2].current_usage == 0.0

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "raw, expected",
        [("32 min", 32.0), (" 24.5%", 24.5), (".5", 0.5), ("1e1x", 10.0), ("min 32", 0.0)],
    )
    def test_leading_number_is_read(self, demo_injuries, raw, expected):
        updated = update_teammate_field(demo_injuries[0], 1, "currentMin", raw)
        assert updated.teammates[1].current_minutes == expected

    @pytest.mark.unit
    def test_recompute_after_edit(self, demo_injuries):
        injury = demo_injuries[0]
        before = project(injury)

        after = project(update_teammate_field(injury, 0, "current_minutes", 35.0))

        assert after[0].additional_minutes > before[0].additional_minutes
        assert after[0].current_minutes == 35.0

    @pytest.mark.unit
    def test_unknown_field(self, demo_injuries):
        with pytest.raises(InvalidRecordError):
            update_teammate_field(demo_injuries[0], 0, "plus_minus", 3)

    @pytest.mark.unit
    def test_bad_index(self, demo_injuries):
        with pytest.raises(InvalidRecordError):
            update_teammate_field(demo_injuries[0], 4, "pts", 3)

    @pytest.mark.unit
    def test_negative_value_rejected(self, demo_injuries):
        with pytest.raises(InvalidRecordError):
            update_teammate_field(demo_injuries[0], 0, "reb", -2)
