"""Task and meeting submission records."""

from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import Field

from bank_portal.models.base import CamelModel
from bank_portal.models.team import TeamOption

# Bumped whenever the persisted record shape changes; see store.schema
SCHEMA_VERSION = 2

TaskStatus = Literal["pending", "reviewed", "assigned", "completed"]
MeetingStatus = Literal["pending", "reviewed", "scheduled", "completed"]

TASK_STATUSES: tuple[str, ...] = ("pending", "reviewed", "assigned", "completed")
MEETING_STATUSES: tuple[str, ...] = ("pending", "reviewed", "scheduled", "completed")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TaskSubmission(CamelModel):
    """Client task request routed to a bank team."""

    id: str = Field(..., description="Unique id derived from the creation timestamp")
    schema_version: int = SCHEMA_VERSION

    brief_description: str = ""
    selected_group: TeamOption
    detailed_description: str = ""

    has_worked_with_bank: bool = Field(default=False, alias="hasWorkedWithSMBC")
    bank_relationship: str = Field(default="", alias="smbcRelationship")

    contact_person: str = ""
    contact_email: str = ""
    contact_phone: str = ""
    company_name: str = ""

    is_sponsor: bool = False
    aum: str = ""
    fund_strategy: str = ""

    deal_documents: list[str] = Field(default_factory=list)
    investor_documents: list[str] = Field(default_factory=list)
    deal_documents_content: Optional[dict[str, str]] = None
    investor_documents_content: Optional[dict[str, str]] = None

    other_problems: str = ""
    future_teams: str = ""

    submitted_at: datetime = Field(default_factory=_utcnow)
    status: TaskStatus = "pending"
    employee_notes: str = ""


class MeetingDocuments(CamelModel):
    """Document names uploaded with a meeting request, by category."""

    financial_documents: list[str] = Field(default_factory=list)
    banking_infrastructure: list[str] = Field(default_factory=list)
    cash_flow_operations: list[str] = Field(default_factory=list)
    internal_controls: list[str] = Field(default_factory=list)
    treasury_systems: list[str] = Field(default_factory=list)

    def total(self) -> int:
        return (
            len(self.financial_documents)
            + len(self.banking_infrastructure)
            + len(self.cash_flow_operations)
            + len(self.internal_controls)
            + len(self.treasury_systems)
        )


class MeetingSubmission(CamelModel):
    """Cash-management team meeting request."""

    id: str
    schema_version: int = SCHEMA_VERSION

    company_name: str = ""
    contact_person: str = ""
    email: str = ""
    phone: str = ""
    meeting_date: str = ""
    documents: MeetingDocuments = Field(default_factory=MeetingDocuments)
    additional_notes: str = ""

    submitted_at: datetime = Field(default_factory=_utcnow)
    status: MeetingStatus = "pending"
    employee_notes: str = ""
