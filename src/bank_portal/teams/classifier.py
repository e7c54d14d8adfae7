"""Keyword-based team suggestion. Static rules, no inference."""

from typing import Optional

from pydantic import BaseModel, Field

from bank_portal.models.team import TeamOption

from .catalog import (
    CASH_MANAGEMENT,
    FUND_FINANCE,
    GENERAL_BANKING,
    MA_FINANCE,
    REAL_ESTATE,
    find_team,
)

# Checked in this order; every matching group contributes its team
_KEYWORD_RULES: list[tuple[tuple[str, ...], TeamOption]] = [
    (("fund", "private equity", "subscription line"), FUND_FINANCE),
    (("liquidity", "working capital", "cash management"), CASH_MANAGEMENT),
    (("acquisition", "m&a", "buyout"), MA_FINANCE),
    (("real estate", "property", "reit"), REAL_ESTATE),
]


class TeamSuggestion(BaseModel):
    """A suggested team with the keywords that triggered it."""

    team: TeamOption
    matched_keywords: list[str] = Field(default_factory=list)
    fallback: bool = False

    @property
    def explanation(self) -> str:
        if self.fallback:
            return "No specific keywords found; suggesting general banking"
        return f"Matches keywords: {', '.join(self.matched_keywords)}"


def explain_suggestions(description: str) -> list[TeamSuggestion]:
    """
    Suggest teams for a free-text task description, with an explanation trail.
    Substring match on the lower-cased text. Falls back to general banking.
    """
    text = (description or "").lower()
    suggestions: list[TeamSuggestion] = []
    for keywords, team in _KEYWORD_RULES:
        matched = [kw for kw in keywords if kw in text]
        if matched:
            suggestions.append(TeamSuggestion(team=team, matched_keywords=matched))
    if not suggestions:
        suggestions.append(TeamSuggestion(team=GENERAL_BANKING, fallback=True))
    return suggestions


def suggest_teams(description: str) -> list[TeamOption]:
    """Ordered candidate teams; the first one is the default recommendation."""
    return [s.team for s in explain_suggestions(description)]


def recommend_team(description: str) -> TeamOption:
    """The pre-selected team for a description."""
    return suggest_teams(description)[0]


def resolve_team(description: str, team_id: Optional[str] = None) -> TeamOption:
    """
    Team chosen by the client: explicit team_id (any catalog team, including
    browse-only ones) or the top suggestion.
    """
    if team_id:
        team = find_team(team_id)
        if team is None:
            raise ValueError(f"Unknown team: {team_id}")
        return team
    return recommend_team(description)
