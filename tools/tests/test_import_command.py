"""Tests for the /import command."""

from __future__ import annotations

import json

import pytest

from commands import CommandError
from commands.import_command import ImportCommand, parse_import_args
from tools.injury.injury_store import load_injuries


@pytest.fixture
def roster_file(temp_data_dir, make_yahoo_player):
    """A saved Pacers roster with Haliburton out."""
    roster = [
        make_yahoo_player(
            "6014",
            "Tyrese Haliburton",
            status="INJ",
            injury_note="Achilles",
            stats={"2": 34.8},
            usage_pct=0.294,
        ),
        make_yahoo_player("6200", "Bennedict Mathurin", "SG", stats={"2": 28.5, "12": 17.2}, usage_pct=24.1),
        make_yahoo_player("5800", "Aaron Nesmith", "SF"),
        make_yahoo_player("5500", "Obi Toppin", "PF"),
        make_yahoo_player("4900", "T.J. McConnell", "PG"),
        make_yahoo_player("6300", "Jarace Walker", "PF"),
    ]
    path = temp_data_dir / "roster.json"
    path.write_text(json.dumps({"players": roster}))
    return path


class TestParseImportArgs:
    """Test /import argument parsing."""

    @pytest.mark.unit
    def test_all_options(self):
        args = parse_import_args("/import roster.json --max-teammates 3 --output out.json")

        assert args == {"roster": "roster.json", "max_teammates": 3, "output": "out.json"}

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "command",
        [
            "/import",
            "/import a.json b.json",
            "/import a.json --max-teammates",
            "/import a.json --max-teammates many",
            "/import a.json --max-teammates 0",
            "/import a.json --merge",
        ],
    )
    def test_invalid(self, command):
        with pytest.raises(CommandError):
            parse_import_args(command)


class TestImportCommand:
    """Test importing rosters into the injury file."""

    @pytest.mark.integration
    def test_import_writes_injury_file(self, console, config, roster_file):
        ImportCommand(console, config).execute(f"/import {roster_file}")

        (injury,) = load_injuries(config.injury_file)
        assert injury.id == "6014"
        assert injury.player == "Tyrese Haliburton"
        assert injury.average_minutes == 34.8
        assert [tm.name for tm in injury.teammates] == [
            "Bennedict Mathurin",
            "Aaron Nesmith",
            "Obi Toppin",
            "T.J. McConnell",
        ]

        output = console.export_text()
        assert "Imported 1 injured players" in output
        assert "6014: Tyrese Haliburton (INJ), 4 teammates" in output

    @pytest.mark.integration
    def test_max_teammates_and_output(self, console, config, roster_file):
        output_path = config.data_dir / "pacers.json"

        ImportCommand(console, config).execute(
            f"/import {roster_file} --max-teammates 2 --output {output_path}"
        )

        (injury,) = load_injuries(output_path)
        assert len(injury.teammates) == 2
        assert not config.injury_file.exists()

    @pytest.mark.integration
    def test_healthy_roster_leaves_file_alone(self, console, config, make_yahoo_player):
        path = config.data_dir / "healthy.json"
        path.write_text(json.dumps([make_yahoo_player("1", "A"), make_yahoo_player("2", "B")]))

        ImportCommand(console, config).execute(f"/import {path}")

        assert "No injured players found" in console.export_text()
        assert not config.injury_file.exists()

    @pytest.mark.integration
    def test_imported_injuries_project(self, console, config, roster_file):
        import sixthman

        _, lookup = sixthman.build_commands(console, config)

        assert sixthman.dispatch(f"/import {roster_file}", lookup, console)
        assert sixthman.dispatch("/injuries", lookup, console)

        output = console.export_text()
        assert "Bennedict Mathurin" in output
        assert "1 injuries, 4 teammates projected" in output

    @pytest.mark.unit
    def test_missing_roster(self, console, config):
        with pytest.raises(CommandError, match="Roster file not found"):
            ImportCommand(console, config).execute(f"/import {config.data_dir / 'none.json'}")

    @pytest.mark.unit
    def test_not_a_roster(self, console, config):
        path = config.data_dir / "bad.json"
        path.write_text(json.dumps({"teams": []}))

        with pytest.raises(CommandError, match="Invalid roster record"):
            ImportCommand(console, config).execute(f"/import {path}")

    @pytest.mark.unit
    def test_out_of_range_player(self, console, config, roster_file):
        data = json.loads(roster_file.read_text())
        data["players"][0]["usage_pct"] = 140.0
        roster_file.write_text(json.dumps(data))

        with pytest.raises(CommandError, match="Invalid roster record"):
            ImportCommand(console, config).execute(f"/import {roster_file}")
