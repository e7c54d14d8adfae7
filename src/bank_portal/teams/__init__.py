"""Bank team catalog and keyword-based team suggestion."""

from bank_portal.teams.catalog import GENERAL_BANKING, all_teams, find_team
from bank_portal.teams.classifier import (
    TeamSuggestion,
    explain_suggestions,
    recommend_team,
    resolve_team,
    suggest_teams,
)

__all__ = [
    "GENERAL_BANKING",
    "TeamSuggestion",
    "all_teams",
    "explain_suggestions",
    "find_team",
    "recommend_team",
    "resolve_team",
    "suggest_teams",
]
