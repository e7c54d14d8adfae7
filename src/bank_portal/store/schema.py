"""Versioned decoding of persisted submission lists.

Every stored record carries ``schemaVersion``. Records written before the
field existed are version 1. Upgrades run in order, one version at a time,
before strict validation into the record model.
"""

import json
import logging
from typing import Callable, TypeVar

from pydantic import BaseModel, ValidationError

from bank_portal.exceptions import StorageCorruptionError
from bank_portal.models.submission import SCHEMA_VERSION

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)
Upgrade = Callable[[dict], dict]

LEGACY_VERSION = 1


# Unanswered yes/no questions and skipped uploads were stored as null
_V1_NULL_DEFAULTS: dict[str, Callable[[], object]] = {
    "hasWorkedWithSMBC": bool,
    "isSponsor": bool,
    "dealDocumentsContent": dict,
    "investorDocumentsContent": dict,
}


def _v1_to_v2(record: dict) -> dict:
    """
    v2 adds triage fields: status (default pending) and employee notes.
    Null answers and null document content present in v1 task records are
    replaced with False and an empty mapping.
    """
    upgraded = dict(record)
    upgraded["status"] = record.get("status") or "pending"
    upgraded["employeeNotes"] = record.get("employeeNotes") or ""
    for field, empty in _V1_NULL_DEFAULTS.items():
        if field in record and record[field] is None:
            upgraded[field] = empty()
    upgraded["schemaVersion"] = 2
    return upgraded


UPGRADES: dict[int, Upgrade] = {
    1: _v1_to_v2,
}


def record_version(record: dict) -> int:
    version = record.get("schemaVersion", LEGACY_VERSION)
    if isinstance(version, bool) or not isinstance(version, int):
        raise ValueError(f"schemaVersion must be an integer, got {version!r}")
    if version < LEGACY_VERSION or version > SCHEMA_VERSION:
        raise ValueError(f"unsupported schemaVersion {version}")
    return version


def upgrade_record(record: dict) -> dict:
    """Apply the upgrade chain until the record is at SCHEMA_VERSION."""
    version = record_version(record)
    while version < SCHEMA_VERSION:
        record = UPGRADES[version](record)
        version = record_version(record)
    return record


def decode_records(key: str, raw: str, model: type[RecordT]) -> list[RecordT]:
    """
    Parse a stored JSON array into validated records.
    Raises StorageCorruptionError for unparseable JSON, a non-array blob, or any
    record that fails upgrade or validation.
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise StorageCorruptionError(key, f"invalid JSON ({e.msg})") from e
    if not isinstance(data, list):
        raise StorageCorruptionError(key, f"expected a JSON array, got {type(data).__name__}")

    records: list[RecordT] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise StorageCorruptionError(key, "record is not an object", index)
        try:
            records.append(model.model_validate(upgrade_record(item)))
        except (ValidationError, ValueError) as e:
            logger.error("Corrupt record %s[%d]: %s", key, index, e)
            raise StorageCorruptionError(key, str(e), index) from e
    return records


def encode_records(records: list[BaseModel]) -> str:
    """Serialize records (camelCase keys, ISO timestamps) for storage."""
    return json.dumps([r.model_dump(mode="json", by_alias=True) for r in records])
