"""Device-local storage for submissions and session state."""

from bank_portal.store.local_storage import LocalStorage
from bank_portal.store.submissions import (
    MEETING_SUBMISSIONS_KEY,
    TASK_SUBMISSIONS_KEY,
    MeetingSubmissionStore,
    SubmissionStore,
    TaskSubmissionStore,
    next_submission_id,
)

__all__ = [
    "MEETING_SUBMISSIONS_KEY",
    "TASK_SUBMISSIONS_KEY",
    "LocalStorage",
    "MeetingSubmissionStore",
    "SubmissionStore",
    "TaskSubmissionStore",
    "next_submission_id",
]
