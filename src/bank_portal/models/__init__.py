"""Data models for teams, submissions, and risk analyses."""

from bank_portal.models.analysis import RiskAnalysis, RiskItem, RiskSummary
from bank_portal.models.forms import MeetingIntakeForm, TaskIntakeForm
from bank_portal.models.submission import (
    MEETING_STATUSES,
    TASK_STATUSES,
    MeetingDocuments,
    MeetingSubmission,
    TaskSubmission,
)
from bank_portal.models.team import TeamOption

__all__ = [
    "MEETING_STATUSES",
    "TASK_STATUSES",
    "MeetingDocuments",
    "MeetingIntakeForm",
    "MeetingSubmission",
    "RiskAnalysis",
    "RiskItem",
    "RiskSummary",
    "TaskIntakeForm",
    "TaskSubmission",
    "TeamOption",
]
