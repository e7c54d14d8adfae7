"""Employee triage: search, filters, counts, and rule-based submission insights."""

from .filters import document_count, filter_meetings, filter_tasks, status_counts
from .insights import TriageInsights, assess_submission

__all__ = [
    "TriageInsights",
    "assess_submission",
    "document_count",
    "filter_meetings",
    "filter_tasks",
    "status_counts",
]
