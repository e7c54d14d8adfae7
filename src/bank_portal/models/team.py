"""Bank team reference data."""

from typing import Optional

from pydantic import ConfigDict, Field

from bank_portal.models.base import CamelModel


class TeamOption(CamelModel):
    """A bank team a task submission can be routed to. Immutable reference data."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Fixed identifier, e.g. 'fund-finance'")
    name: str
    description: str = ""
    specialties: list[str] = Field(default_factory=list)
    confidence: int = Field(..., ge=0, le=100, description="Static display score")
    icon: Optional[str] = None
