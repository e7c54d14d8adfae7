"""Tests for dashboard filters and rule-based triage insights."""

from bank_portal.models.submission import MEETING_STATUSES, TASK_STATUSES, MeetingDocuments
from bank_portal.teams.catalog import CASH_MANAGEMENT, FUND_FINANCE
from bank_portal.triage import (
    assess_submission,
    document_count,
    filter_meetings,
    filter_tasks,
    status_counts,
)
from bank_portal.triage.insights import priority_level, risk_factors
from tests.conftest import make_meeting, make_task


def _tasks() -> list:
    return [
        make_task(id="1", company_name="Northwind Capital", status="pending"),
        make_task(
            id="2",
            company_name="Fabrikam Holdings",
            contact_email="ops@fabrikam.example",
            selected_group=CASH_MANAGEMENT,
            status="reviewed",
        ),
        make_task(id="3", company_name="Tailspin Partners", brief_description="Acquisition financing"),
    ]


class TestFilterTasks:
    def test_no_filters_returns_all(self) -> None:
        assert [t.id for t in filter_tasks(_tasks())] == ["1", "2", "3"]

    def test_search_is_case_insensitive(self) -> None:
        assert [t.id for t in filter_tasks(_tasks(), "FABRIKAM")] == ["2"]

    def test_search_covers_email_and_brief(self) -> None:
        assert [t.id for t in filter_tasks(_tasks(), "ops@")] == ["2"]
        assert [t.id for t in filter_tasks(_tasks(), "acquisition")] == ["3"]

    def test_status_filter(self) -> None:
        assert [t.id for t in filter_tasks(_tasks(), status="reviewed")] == ["2"]

    def test_team_filter(self) -> None:
        assert [t.id for t in filter_tasks(_tasks(), team=FUND_FINANCE.id)] == ["1", "3"]

    def test_filters_combine(self) -> None:
        assert filter_tasks(_tasks(), "northwind", status="reviewed") == []


class TestFilterMeetings:
    def test_search_and_status(self) -> None:
        meetings = [
            make_meeting(id="a"),
            make_meeting(id="b", company_name="Adventure Works", status="scheduled"),
        ]
        assert [m.id for m in filter_meetings(meetings, "adventure")] == ["b"]
        assert [m.id for m in filter_meetings(meetings, status="pending")] == ["a"]


class TestCounts:
    def test_status_counts_zero_filled(self) -> None:
        counts = status_counts(_tasks(), TASK_STATUSES)
        assert counts == {"pending": 2, "reviewed": 1, "assigned": 0, "completed": 0, "total": 3}

    def test_status_counts_empty(self) -> None:
        counts = status_counts([], MEETING_STATUSES)
        assert counts["total"] == 0
        assert counts["scheduled"] == 0

    def test_document_count_task(self) -> None:
        task = make_task(deal_documents=["a.pdf", "b.xlsx"], investor_documents=["c.pdf"])
        assert document_count(task) == 3

    def test_document_count_meeting(self) -> None:
        meeting = make_meeting(
            documents=MeetingDocuments(financial_documents=["a", "b"], internal_controls=["c"])
        )
        assert document_count(meeting) == 3


class TestInsights:
    def test_large_sponsor_is_high_priority(self) -> None:
        insights = assess_submission(make_task())
        assert insights.priority == "high"
        assert insights.client_profile.size == "Large"
        assert insights.client_profile.type == "Sponsor"
        assert insights.client_profile.relationship == "New Prospect"
        assert insights.client_profile.complexity == "Medium"
        assert insights.opportunities == ["High-value sponsor with significant AUM"]

    def test_existing_client_is_medium(self) -> None:
        task = make_task(is_sponsor=False, has_worked_with_bank=True)
        assert priority_level(task) == "medium"

    def test_many_documents_is_medium_and_complex(self) -> None:
        task = make_task(is_sponsor=False, deal_documents=[f"d{i}.pdf" for i in range(6)])
        assert priority_level(task) == "medium"
        assert assess_submission(task).client_profile.complexity == "High"

    def test_plain_prospect_is_low(self) -> None:
        task = make_task(is_sponsor=False, aum="")
        insights = assess_submission(task)
        assert insights.priority == "low"
        assert insights.opportunities == ["Standard opportunity for relationship development"]

    def test_risk_factors_flag_gaps(self) -> None:
        task = make_task(deal_documents=[], detailed_description="Short")
        assert risk_factors(task) == [
            "New client - requires additional due diligence",
            "Limited deal documentation provided",
            "Brief description may indicate unclear requirements",
        ]

    def test_standard_risk_profile(self) -> None:
        task = make_task(has_worked_with_bank=True, detailed_description="x" * 100)
        assert risk_factors(task) == ["Standard risk profile"]

    def test_cross_sell_opportunities(self) -> None:
        task = make_task(other_problems="FX hedging", future_teams="Capital Markets", is_sponsor=False)
        assert assess_submission(task).opportunities == [
            "Cross-selling opportunities identified in additional problems",
            "Future team collaborations mentioned",
        ]
