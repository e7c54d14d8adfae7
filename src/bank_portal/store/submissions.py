"""Submission stores: most-recent-first lists mirrored to local storage as JSON."""

import logging
from datetime import datetime, timezone
from typing import Generic, Iterable, Optional, TypeVar

from bank_portal.exceptions import DuplicateSubmissionError
from bank_portal.models.submission import (
    MEETING_STATUSES,
    TASK_STATUSES,
    MeetingSubmission,
    TaskSubmission,
)
from bank_portal.store.local_storage import LocalStorage
from bank_portal.store.schema import decode_records, encode_records

logger = logging.getLogger(__name__)

TASK_SUBMISSIONS_KEY = "taskSubmissions"
MEETING_SUBMISSIONS_KEY = "cashManagementSubmissions"

RecordT = TypeVar("RecordT", TaskSubmission, MeetingSubmission)


def next_submission_id(existing_ids: Iterable[str], now: Optional[datetime] = None) -> str:
    """
    Millisecond-timestamp id for a new record. Bumped by one millisecond until
    it does not collide with an existing id.
    """
    now = now or datetime.now(timezone.utc)
    taken = set(existing_ids)
    candidate = int(now.timestamp() * 1000)
    while str(candidate) in taken:
        candidate += 1
    return str(candidate)


class SubmissionStore(Generic[RecordT]):
    """
    Single writer for one list of submissions under one storage key.
    Every mutation re-serializes the whole list; there is no atomic swap or
    journal, so an interrupted write may leave the previous or a truncated value.
    """

    key: str = ""
    model: type = TaskSubmission
    statuses: tuple[str, ...] = ()

    def __init__(self, storage: LocalStorage):
        self._storage = storage

    def load_all(self) -> list[RecordT]:
        """Return all records, newest first. Empty when nothing is stored."""
        raw = self._storage.get_item(self.key)
        if raw is None:
            return []
        return decode_records(self.key, raw, self.model)

    def _save(self, records: list[RecordT]) -> None:
        self._storage.set_item(self.key, encode_records(records))

    def get(self, submission_id: str) -> Optional[RecordT]:
        """Get a single record by id."""
        for record in self.load_all():
            if record.id == submission_id:
                return record
        return None

    def ids(self) -> list[str]:
        return [r.id for r in self.load_all()]

    def append(self, record: RecordT) -> list[RecordT]:
        """Insert a fully formed record at the head and persist. Returns the new list."""
        records = self.load_all()
        if any(r.id == record.id for r in records):
            raise DuplicateSubmissionError(f"Submission {record.id} already exists in {self.key}")
        updated = [record, *records]
        self._save(updated)
        logger.info("Appended submission %s to %s (%d total)", record.id, self.key, len(updated))
        return updated

    def update_status(
        self, submission_id: str, status: str, note: Optional[str] = None
    ) -> list[RecordT]:
        """
        Set status (and the employee note when a non-empty note is given) on the
        matching record; every other field is left as is. Any status may follow
        any other. Unknown id is a no-op and nothing is written.
        """
        if status not in self.statuses:
            raise ValueError(f"status must be one of {list(self.statuses)}, got {status!r}")
        records = self.load_all()
        if not any(r.id == submission_id for r in records):
            logger.debug("update_status: no submission %s in %s", submission_id, self.key)
            return records

        changes: dict = {"status": status}
        if note:
            changes["employee_notes"] = note
        updated = [
            r.model_copy(update=changes) if r.id == submission_id else r for r in records
        ]
        self._save(updated)
        logger.info("Submission %s in %s set to %s", submission_id, self.key, status)
        return updated


class TaskSubmissionStore(SubmissionStore[TaskSubmission]):
    """Task requests, stored under ``taskSubmissions``."""

    key = TASK_SUBMISSIONS_KEY
    model = TaskSubmission
    statuses = TASK_STATUSES


class MeetingSubmissionStore(SubmissionStore[MeetingSubmission]):
    """Cash-management meeting requests, stored under ``cashManagementSubmissions``."""

    key = MEETING_SUBMISSIONS_KEY
    model = MeetingSubmission
    statuses = MEETING_STATUSES
