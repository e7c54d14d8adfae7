"""Intake forms filled in by clients, loadable from YAML for the CLI."""

from datetime import datetime
from pathlib import Path
from typing import Optional

try:
    import yaml
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "PyYAML is required for intake form loading. Run: poetry install"
    ) from e
from pydantic import BaseModel, Field, field_validator

from bank_portal.models.submission import MeetingDocuments, MeetingSubmission, TaskSubmission
from bank_portal.models.team import TeamOption


def _load_yaml(path: str | Path) -> dict:
    data = yaml.safe_load(Path(path).read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Intake form {path} must be a mapping")
    return data


class TaskIntakeForm(BaseModel):
    """Detailed task request form. Required: company_name, contact_person, contact_email."""

    brief_description: str = ""
    team: Optional[str] = Field(default=None, description="Team id; defaults to the top suggestion")
    detailed_description: str = ""
    has_worked_with_bank: bool = False
    bank_relationship: str = ""
    contact_person: str
    contact_email: str
    contact_phone: str = ""
    company_name: str
    is_sponsor: bool = False
    aum: str = ""
    fund_strategy: str = ""
    other_problems: str = ""
    future_teams: str = ""

    @field_validator("company_name", "contact_person", "contact_email")
    @classmethod
    def _required(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @classmethod
    def from_yaml(cls, path: str | Path) -> "TaskIntakeForm":
        """Load form from YAML. Supports nested (contact/fund) or flat structure."""
        data = _load_yaml(path)
        contact = data.get("contact", {}) or {}
        fund = data.get("fund", {}) or {}
        flat = dict(data)
        flat.pop("contact", None)
        flat.pop("fund", None)
        for key in ("person", "email", "phone"):
            if key in contact:
                flat[f"contact_{key}"] = contact[key]
        for key in ("aum", "fund_strategy", "is_sponsor"):
            if key in fund:
                flat[key] = fund[key]
        if "strategy" in fund:
            flat["fund_strategy"] = fund["strategy"]
        return cls.model_validate(flat)

    def to_submission(
        self,
        submission_id: str,
        team: TeamOption,
        *,
        deal_documents: Optional[dict[str, str]] = None,
        investor_documents: Optional[dict[str, str]] = None,
        deal_names: Optional[list[str]] = None,
        investor_names: Optional[list[str]] = None,
        submitted_at: Optional[datetime] = None,
    ) -> TaskSubmission:
        """
        Build the record. *_documents map file name -> extracted text (PDFs only);
        *_names list every uploaded file in upload order.
        """
        extra = {"submitted_at": submitted_at} if submitted_at else {}
        return TaskSubmission(
            id=submission_id,
            brief_description=self.brief_description,
            selected_group=team,
            detailed_description=self.detailed_description,
            has_worked_with_bank=self.has_worked_with_bank,
            bank_relationship=self.bank_relationship,
            contact_person=self.contact_person,
            contact_email=self.contact_email,
            contact_phone=self.contact_phone,
            company_name=self.company_name,
            is_sponsor=self.is_sponsor,
            aum=self.aum,
            fund_strategy=self.fund_strategy,
            deal_documents=list(deal_names or (deal_documents or {}).keys()),
            investor_documents=list(investor_names or (investor_documents or {}).keys()),
            deal_documents_content=dict(deal_documents or {}),
            investor_documents_content=dict(investor_documents or {}),
            other_problems=self.other_problems,
            future_teams=self.future_teams,
            **extra,
        )


class MeetingIntakeForm(BaseModel):
    """Cash management meeting request form. Required: company_name, contact_person, email."""

    company_name: str
    contact_person: str
    email: str
    phone: str = ""
    meeting_date: str = ""
    additional_notes: str = ""
    documents: MeetingDocuments = Field(default_factory=MeetingDocuments)

    @field_validator("company_name", "contact_person", "email")
    @classmethod
    def _required(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @classmethod
    def from_yaml(cls, path: str | Path) -> "MeetingIntakeForm":
        return cls.model_validate(_load_yaml(path))

    def to_submission(
        self, submission_id: str, *, submitted_at: Optional[datetime] = None
    ) -> MeetingSubmission:
        extra = {"submitted_at": submitted_at} if submitted_at else {}
        return MeetingSubmission(
            id=submission_id,
            company_name=self.company_name,
            contact_person=self.contact_person,
            email=self.email,
            phone=self.phone,
            meeting_date=self.meeting_date,
            documents=self.documents.model_copy(deep=True),
            additional_notes=self.additional_notes,
            **extra,
        )
