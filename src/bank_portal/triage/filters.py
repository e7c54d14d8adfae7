"""Dashboard list filtering over in-memory submissions."""

from typing import Iterable, Optional

from bank_portal.models.submission import MeetingSubmission, TaskSubmission

ALL = "all"


def _matches_search(term: str, fields: Iterable[str]) -> bool:
    needle = term.lower()
    return any(needle in (f or "").lower() for f in fields)


def filter_tasks(
    records: Iterable[TaskSubmission],
    search: str = "",
    status: Optional[str] = ALL,
    team: Optional[str] = ALL,
) -> list[TaskSubmission]:
    """
    Case-insensitive search over company, contact person, contact email and
    brief description; status and team id filters ("all" or None disables).
    """
    results: list[TaskSubmission] = []
    for r in records:
        if search and not _matches_search(
            search, (r.company_name, r.contact_person, r.contact_email, r.brief_description)
        ):
            continue
        if status not in (None, ALL) and r.status != status:
            continue
        if team not in (None, ALL) and r.selected_group.id != team:
            continue
        results.append(r)
    return results


def filter_meetings(
    records: Iterable[MeetingSubmission],
    search: str = "",
    status: Optional[str] = ALL,
) -> list[MeetingSubmission]:
    """Search over company, contact person and email; optional status filter."""
    results: list[MeetingSubmission] = []
    for r in records:
        if search and not _matches_search(search, (r.company_name, r.contact_person, r.email)):
            continue
        if status not in (None, ALL) and r.status != status:
            continue
        results.append(r)
    return results


def status_counts(
    records: Iterable[TaskSubmission | MeetingSubmission], statuses: Iterable[str]
) -> dict[str, int]:
    """Count per status (zero-filled for every given status) plus 'total'."""
    counts = {s: 0 for s in statuses}
    total = 0
    for r in records:
        total += 1
        counts[r.status] = counts.get(r.status, 0) + 1
    counts["total"] = total
    return counts


def document_count(record: TaskSubmission | MeetingSubmission) -> int:
    """Number of uploaded document names on a submission."""
    if isinstance(record, MeetingSubmission):
        return record.documents.total()
    return len(record.deal_documents) + len(record.investor_documents)
