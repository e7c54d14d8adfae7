"""Risk analysis returned by the document analysis endpoint. Never persisted."""

from typing import Literal, Optional

from pydantic import Field

from bank_portal.models.base import CamelModel

Severity = Literal["low", "medium", "high", "critical"]

REQUIRED_ANALYSIS_FIELDS: tuple[str, ...] = (
    "regulatoryLegalRisks",
    "investmentRisks",
    "potentialDownsides",
    "summary",
)


class RiskItem(CamelModel):
    """One identified risk, quoting the source text it was drawn from."""

    title: str
    description: str = ""
    severity: Severity = "medium"
    relevant_text: str = ""
    page_reference: Optional[str] = None


class RiskSummary(CamelModel):
    overall_risk_level: Severity = Field(..., description="Overall severity")
    key_concerns: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)


class RiskAnalysis(CamelModel):
    """Structured categorization of a document's risks."""

    regulatory_legal_risks: list[RiskItem] = Field(default_factory=list)
    investment_risks: list[RiskItem] = Field(default_factory=list)
    potential_downsides: list[RiskItem] = Field(default_factory=list)
    summary: RiskSummary

    def all_items(self) -> list[RiskItem]:
        return [
            *self.regulatory_legal_risks,
            *self.investment_risks,
            *self.potential_downsides,
        ]
