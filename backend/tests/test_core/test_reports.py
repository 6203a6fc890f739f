"""
Unit tests for roster reports.
"""
import pytest
from datetime import date

from app.core.duty_assignment import DutyAssignmentService
from app.core.errors import ValidationError
from app.core.person_directory import PersonDirectory
from app.core.reports import (
    CSV_COLUMNS,
    build_roster,
    roster_to_csv,
    summarize_roster,
)


@pytest.fixture
def crew(db_session):
    """Three people: one active, one retired, one never assigned."""
    directory = PersonDirectory(db_session)
    for name in ["Ada", "Grace", "Alan"]:
        directory.create(name)

    service = DutyAssignmentService(db_session)
    service.assign_duty("Grace", "Major", "Commander", date(2024, 1, 1))
    service.assign_duty("Ada", "Colonel", "Pilot", date(2020, 1, 1))
    service.assign_duty("Ada", "Colonel", "RETIRED", date(2020, 1, 11))
    return db_session


class TestRoster:
    """Tests for roster building."""

    def test_statuses(self, crew):
        statuses = {e.name: e.status for e in build_roster(crew)}

        assert statuses == {"Ada": "retired", "Alan": "unassigned", "Grace": "active"}

    @pytest.mark.parametrize("status_filter,expected", [
        ("active", ["Grace"]),
        ("retired", ["Ada"]),
        ("unassigned", ["Alan"]),
        ("all", ["Ada", "Alan", "Grace"]),
    ])
    def test_filters(self, crew, status_filter, expected):
        assert [e.name for e in build_roster(crew, status_filter)] == expected

    def test_unknown_filter(self, crew):
        with pytest.raises(ValidationError):
            build_roster(crew, "deceased")


class TestSummary:
    """Tests for roster summary statistics."""

    def test_counts(self, crew):
        summary = summarize_roster(crew, today=date(2024, 1, 21))

        assert summary.total_people == 3
        assert summary.active_astronauts == 1
        assert summary.retired_astronauts == 1
        assert summary.unassigned_people == 1

    def test_utilization_percentage(self, crew):
        summary = summarize_roster(crew, today=date(2024, 1, 21))

        # Ada and Grace have careers, Alan does not
        assert summary.utilization_percentage == pytest.approx(66.67)

    def test_average_career_days(self, crew):
        summary = summarize_roster(crew, today=date(2024, 1, 21))

        # Ada: 2020-01-01 .. 2020-01-10 -> 9 days, Grace: 2024-01-01 .. today -> 20 days
        assert summary.average_career_days == pytest.approx(14.5)

    def test_empty_directory(self, db_session):
        summary = summarize_roster(db_session)

        assert summary.total_people == 0
        assert summary.average_career_days is None
        assert summary.utilization_percentage == 0.0


class TestCsvExport:
    """Tests for CSV rendering."""

    def test_header_and_rows(self, crew):
        lines = roster_to_csv(build_roster(crew)).splitlines()

        assert lines[0] == ",".join(CSV_COLUMNS)
        assert lines[1] == "Ada,Colonel,RETIRED,retired,2020-01-01,2020-01-10"
        assert lines[2] == "Alan,,,unassigned,,"
        assert lines[3] == "Grace,Major,Commander,active,2024-01-01,"
