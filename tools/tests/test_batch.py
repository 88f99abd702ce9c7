"""Tests for batch injury projection."""

from __future__ import annotations

import pytest

from tools.injury.batch import InjuryReport, project_injuries, summarize_reports
from tools.injury.errors import DegenerateRosterError


@pytest.mark.unit
def test_projects_every_injury(demo_injuries):
    reports = project_injuries(demo_injuries)

    assert [r.injury.id for r in reports] == [1, 2, 3]
    assert all(r.ok for r in reports)
    assert all(len(r.results) == 4 for r in reports)


@pytest.mark.unit
def test_degenerate_injury_does_not_abort_batch(demo_injuries, make_teammate, make_injury):
    degenerate = make_injury(
        [make_teammate(current_minutes=0.0)], injury_id="empty-minutes"
    )

    reports = project_injuries([demo_injuries[0], degenerate, demo_injuries[1]])

    assert [r.ok for r in reports] == [True, False, True]
    assert isinstance(reports[1].error, DegenerateRosterError)
    assert reports[1].results == []
    assert len(reports[2].results) == 4


@pytest.mark.unit
def test_excluded_teammates_are_reported(make_teammate, make_injury):
    injury = make_injury(
        [make_teammate(name="Starter"), make_teammate(name="Injured Too", current_usage=0.0)]
    )

    (report,) = project_injuries([injury])

    assert report.ok
    assert [r.name for r in report.results] == ["Starter"]
    assert [e.teammate_name for e in report.errors] == ["Injured Too"]


@pytest.mark.unit
def test_factors_are_passed_through(demo_injuries):
    (report,) = project_injuries(demo_injuries[:1], minute_factor=1.0, usage_factor=1.0)

    assert sum(r.additional_minutes for r in report.results) == pytest.approx(34.8)
    assert sum(r.additional_usage for r in report.results) == pytest.approx(29.4)


@pytest.mark.unit
def test_summarize_reports(demo_injuries, make_teammate, make_injury):
    reports = project_injuries(
        [
            demo_injuries[0],
            make_injury([make_teammate(current_usage=0.0)]),
            make_injury([make_teammate(), make_teammate(current_minutes=0.0)]),
        ]
    )

    assert summarize_reports(reports) == {
        "injuries": 3,
        "degenerate": 1,
        "projected_teammates": 5,
        "excluded_teammates": 1,
    }


@pytest.mark.unit
def test_report_to_dict(demo_injuries, make_teammate, make_injury):
    ok_report, bad_report = project_injuries(
        [demo_injuries[0], make_injury([make_teammate(current_minutes=0.0)])]
    )

    data = ok_report.to_dict()
    assert data["player"] == "Tyrese Haliburton"
    assert data["status"] == "Out (Season)"
    assert len(data["teammates"]) == 4
    assert data["teammates"][0]["name"] == "Bennedict Mathurin"
    assert data["error"] is None

    bad = bad_report.to_dict()
    assert bad["teammates"] == []
    assert "cannot redistribute" in bad["error"]


@pytest.mark.unit
def test_empty_batch():
    assert project_injuries([]) == []
    assert summarize_reports([]) == {
        "injuries": 0,
        "degenerate": 0,
        "projected_teammates": 0,
        "excluded_teammates": 0,
    }


@pytest.mark.unit
def test_report_defaults(single_teammate_injury):
    report = InjuryReport(injury=single_teammate_injury)
    assert report.ok
    assert report.results == [] and report.errors == []
