"""Unit tests for LocalStorage and the submission stores."""

import json
from datetime import datetime, timezone

import pytest

from bank_portal.exceptions import DuplicateSubmissionError, StorageCorruptionError
from bank_portal.store import (
    MEETING_SUBMISSIONS_KEY,
    TASK_SUBMISSIONS_KEY,
    LocalStorage,
    MeetingSubmissionStore,
    TaskSubmissionStore,
    next_submission_id,
)
from tests.conftest import make_meeting, make_task


@pytest.fixture
def tasks(storage: LocalStorage) -> TaskSubmissionStore:
    return TaskSubmissionStore(storage)


@pytest.fixture
def meetings(storage: LocalStorage) -> MeetingSubmissionStore:
    return MeetingSubmissionStore(storage)


class TestLocalStorage:
    def test_get_missing_returns_none(self, storage: LocalStorage) -> None:
        assert storage.get_item("nothing") is None

    def test_set_get_replace_remove(self, storage: LocalStorage) -> None:
        storage.set_item("k", "one")
        storage.set_item("k", "two")
        assert storage.get_item("k") == "two"
        assert storage.keys() == ["k"]
        storage.remove_item("k")
        assert storage.get_item("k") is None

    def test_values_survive_reopen(self, temp_db) -> None:
        LocalStorage(temp_db).set_item("userRole", "employee")
        assert LocalStorage(temp_db).get_item("userRole") == "employee"


class TestAppend:
    """Tests for append and load_all."""

    def test_load_all_empty(self, tasks: TaskSubmissionStore) -> None:
        assert tasks.load_all() == []

    def test_append_then_load_preserves_record(self, tasks: TaskSubmissionStore) -> None:
        """The appended record comes back at the head with every field intact."""
        record = make_task()
        tasks.append(record)
        loaded = tasks.load_all()
        assert loaded[0] == record
        assert loaded[0].submitted_at == record.submitted_at
        assert isinstance(loaded[0].submitted_at, datetime)

    def test_newest_first(self, tasks: TaskSubmissionStore) -> None:
        tasks.append(make_task(id="1"))
        tasks.append(make_task(id="2"))
        returned = tasks.append(make_task(id="3"))
        assert [r.id for r in returned] == ["3", "2", "1"]
        assert [r.id for r in tasks.load_all()] == ["3", "2", "1"]

    def test_append_assigns_no_defaults(self, tasks: TaskSubmissionStore) -> None:
        """A record appended with a non-default status keeps it."""
        tasks.append(make_task(status="assigned", employee_notes="pre-triaged"))
        (loaded,) = tasks.load_all()
        assert loaded.status == "assigned"
        assert loaded.employee_notes == "pre-triaged"

    def test_duplicate_id_rejected(self, tasks: TaskSubmissionStore) -> None:
        tasks.append(make_task(id="42"))
        with pytest.raises(DuplicateSubmissionError):
            tasks.append(make_task(id="42"))
        assert len(tasks.load_all()) == 1

    def test_persisted_as_camel_case_json(self, tasks: TaskSubmissionStore, storage: LocalStorage) -> None:
        tasks.append(make_task())
        data = json.loads(storage.get_item(TASK_SUBMISSIONS_KEY))
        assert isinstance(data, list)
        assert data[0]["briefDescription"] == "Subscription line for our new fund"
        assert data[0]["selectedGroup"]["id"] == "fund-finance"
        assert data[0]["hasWorkedWithSMBC"] is False
        assert data[0]["schemaVersion"] == 2
        assert data[0]["submittedAt"].startswith("2026-10-01T09:30:15.123")

    def test_stores_are_independent(
        self, tasks: TaskSubmissionStore, meetings: MeetingSubmissionStore, storage: LocalStorage
    ) -> None:
        tasks.append(make_task())
        meetings.append(make_meeting())
        assert len(tasks.load_all()) == 1
        assert len(meetings.load_all()) == 1
        assert set(storage.keys()) == {TASK_SUBMISSIONS_KEY, MEETING_SUBMISSIONS_KEY}


class TestUpdateStatus:
    """Tests for update_status."""

    def test_updates_only_status_and_note(self, tasks: TaskSubmissionStore) -> None:
        tasks.append(make_task(id="1"))
        tasks.append(make_task(id="2", company_name="Other"))
        before = {r.id: r for r in tasks.load_all()}

        after = tasks.update_status("1", "reviewed", "Called the client")

        matching = [r for r in after if r.id == "1"]
        assert len(matching) == 1
        assert matching[0].status == "reviewed"
        assert matching[0].employee_notes == "Called the client"
        assert matching[0].model_dump(exclude={"status", "employee_notes"}) == before[
            "1"
        ].model_dump(exclude={"status", "employee_notes"})
        assert [r for r in after if r.id == "2"][0] == before["2"]
        assert tasks.load_all() == after

    def test_no_note_keeps_existing_note(self, tasks: TaskSubmissionStore) -> None:
        tasks.append(make_task(id="1", employee_notes="first look"))
        tasks.update_status("1", "assigned")
        assert tasks.get("1").employee_notes == "first look"
        tasks.update_status("1", "completed", "")
        assert tasks.get("1").employee_notes == "first look"

    def test_any_transition_allowed(self, tasks: TaskSubmissionStore) -> None:
        tasks.append(make_task(id="1"))
        tasks.update_status("1", "completed")
        tasks.update_status("1", "pending")
        assert tasks.get("1").status == "pending"

    def test_unknown_id_is_noop(self, tasks: TaskSubmissionStore, storage: LocalStorage) -> None:
        tasks.append(make_task(id="1"))
        raw_before = storage.get_item(TASK_SUBMISSIONS_KEY)
        result = tasks.update_status("missing", "reviewed", "note")
        assert result == tasks.load_all()
        assert storage.get_item(TASK_SUBMISSIONS_KEY) == raw_before

    def test_invalid_status_rejected(self, tasks: TaskSubmissionStore) -> None:
        tasks.append(make_task(id="1"))
        with pytest.raises(ValueError, match="status must be one of"):
            tasks.update_status("1", "scheduled")

    def test_meeting_statuses(self, meetings: MeetingSubmissionStore) -> None:
        meetings.append(make_meeting(id="m1"))
        meetings.update_status("m1", "scheduled", "Booked for Tuesday")
        record = meetings.get("m1")
        assert record.status == "scheduled"
        assert record.employee_notes == "Booked for Tuesday"
        with pytest.raises(ValueError):
            meetings.update_status("m1", "assigned")


class TestCorruption:
    def test_invalid_json(self, tasks: TaskSubmissionStore, storage: LocalStorage) -> None:
        storage.set_item(TASK_SUBMISSIONS_KEY, "{not json")
        with pytest.raises(StorageCorruptionError, match="taskSubmissions"):
            tasks.load_all()

    def test_malformed_record_names_index(self, tasks: TaskSubmissionStore, storage: LocalStorage) -> None:
        good = make_task(id="1").model_dump(mode="json", by_alias=True)
        bad = {"id": "2", "briefDescription": "no team"}
        storage.set_item(TASK_SUBMISSIONS_KEY, json.dumps([good, bad]))
        with pytest.raises(StorageCorruptionError) as exc_info:
            tasks.load_all()
        assert exc_info.value.index == 1
        assert "taskSubmissions[1]" in str(exc_info.value)


class TestNextSubmissionId:
    def test_millisecond_timestamp(self) -> None:
        now = datetime(2026, 10, 19, 12, 0, 0, 250000, tzinfo=timezone.utc)
        assert next_submission_id([], now) == str(int(now.timestamp() * 1000))

    def test_bumps_on_collision(self) -> None:
        now = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
        base = int(now.timestamp() * 1000)
        assert next_submission_id([str(base), str(base + 1)], now) == str(base + 2)
