"""Pytest fixtures for bank-portal tests."""

import tempfile
from datetime import datetime, timezone
from pathlib import Path
from types import SimpleNamespace

import pytest

from bank_portal.models.submission import MeetingDocuments, MeetingSubmission, TaskSubmission
from bank_portal.store import LocalStorage
from bank_portal.teams.catalog import FUND_FINANCE


def make_task(**kwargs) -> TaskSubmission:
    """Minimal task submission for testing."""
    defaults = {
        "id": "1760000000000",
        "brief_description": "Subscription line for our new fund",
        "selected_group": FUND_FINANCE,
        "detailed_description": "We are raising Fund III and need a subscription line.",
        "contact_person": "Dana Reyes",
        "contact_email": "dana@example.com",
        "contact_phone": "555-0100",
        "company_name": "Northwind Capital",
        "is_sponsor": True,
        "aum": "$2.5B",
        "fund_strategy": "Mid-market buyout",
        "deal_documents": ["term-sheet.pdf"],
        "deal_documents_content": {"term-sheet.pdf": "Facility size 250m\n"},
        "investor_documents": [],
        "investor_documents_content": {},
        "submitted_at": datetime(2026, 10, 1, 9, 30, 15, 123000, tzinfo=timezone.utc),
    }
    defaults.update(kwargs)
    return TaskSubmission(**defaults)


def make_meeting(**kwargs) -> MeetingSubmission:
    """Minimal meeting request for testing."""
    defaults = {
        "id": "1760000000500",
        "company_name": "Contoso Treasury",
        "contact_person": "Sam Lee",
        "email": "sam@contoso.example",
        "phone": "555-0199",
        "meeting_date": "2026-11-03",
        "documents": MeetingDocuments(financial_documents=["fy25.pdf"], treasury_systems=["tms.pdf"]),
        "additional_notes": "Morning preferred",
        "submitted_at": datetime(2026, 10, 2, 14, 0, tzinfo=timezone.utc),
    }
    defaults.update(kwargs)
    return MeetingSubmission(**defaults)


class FakePage:
    """Page stand-in that reports fixed text fragments to the visitor callback."""

    def __init__(self, fragments: list[str]):
        self._fragments = fragments

    def extract_text(self, visitor_text=None) -> str:
        for fragment in self._fragments:
            visitor_text(fragment, None, None, None, 12)
        return "".join(self._fragments)


def fake_pdf_engine(pages: list[list[str]]) -> SimpleNamespace:
    """Module stand-in whose PdfReader yields FakePages in order."""
    return SimpleNamespace(
        PdfReader=lambda stream: SimpleNamespace(pages=[FakePage(p) for p in pages])
    )


@pytest.fixture
def temp_db() -> Path:
    """Temporary database path for isolated tests."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        path = Path(f.name)
    yield path
    path.unlink(missing_ok=True)


@pytest.fixture
def storage(temp_db: Path) -> LocalStorage:
    """LocalStorage with temporary database."""
    return LocalStorage(temp_db)
