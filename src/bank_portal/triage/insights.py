"""Rule-based reasoning shown to employees next to a task submission.

These are deterministic heuristics over the submitted fields, not model output.
"""

from typing import Literal

from pydantic import BaseModel

from bank_portal.models.submission import TaskSubmission

from .filters import document_count

Priority = Literal["low", "medium", "high"]

# Detailed descriptions shorter than this suggest unclear requirements
_MIN_DESCRIPTION_CHARS = 100
_HIGH_COMPLEXITY_DOCS = 5


class ClientProfile(BaseModel):
    size: Literal["Large", "Medium"]
    type: Literal["Sponsor", "Non-Sponsor"]
    relationship: Literal["Existing Client", "New Prospect"]
    complexity: Literal["High", "Medium"]


class TriageInsights(BaseModel):
    client_profile: ClientProfile
    opportunities: list[str]
    risk_factors: list[str]
    priority: Priority


def client_profile(sub: TaskSubmission) -> ClientProfile:
    return ClientProfile(
        size="Large" if sub.aum else "Medium",
        type="Sponsor" if sub.is_sponsor else "Non-Sponsor",
        relationship="Existing Client" if sub.has_worked_with_bank else "New Prospect",
        complexity="High" if document_count(sub) > _HIGH_COMPLEXITY_DOCS else "Medium",
    )


def opportunity_assessment(sub: TaskSubmission) -> list[str]:
    opportunities: list[str] = []
    if sub.other_problems:
        opportunities.append("Cross-selling opportunities identified in additional problems")
    if sub.future_teams:
        opportunities.append("Future team collaborations mentioned")
    if sub.has_worked_with_bank:
        opportunities.append("Existing banking relationship - potential for expansion")
    if sub.is_sponsor and sub.aum:
        opportunities.append("High-value sponsor with significant AUM")
    return opportunities or ["Standard opportunity for relationship development"]


def risk_factors(sub: TaskSubmission) -> list[str]:
    risks: list[str] = []
    if not sub.has_worked_with_bank:
        risks.append("New client - requires additional due diligence")
    if not sub.deal_documents:
        risks.append("Limited deal documentation provided")
    if len(sub.detailed_description) < _MIN_DESCRIPTION_CHARS:
        risks.append("Brief description may indicate unclear requirements")
    return risks or ["Standard risk profile"]


def priority_level(sub: TaskSubmission) -> Priority:
    profile = client_profile(sub)
    if profile.type == "Sponsor" and profile.size == "Large":
        return "high"
    if document_count(sub) > _HIGH_COMPLEXITY_DOCS or profile.relationship == "Existing Client":
        return "medium"
    return "low"


def assess_submission(sub: TaskSubmission) -> TriageInsights:
    """All triage insights for one task submission."""
    return TriageInsights(
        client_profile=client_profile(sub),
        opportunities=opportunity_assessment(sub),
        risk_factors=risk_factors(sub),
        priority=priority_level(sub),
    )
