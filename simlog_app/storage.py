# simlog_app/storage.py
import json
import logging
from typing import Callable, Generic, List, Optional, Tuple, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from simlog_app.database import KeyValueStore
from simlog_app.models import IssueReport, IssueStatus, MaintenanceLog, Record, SessionLog
from simlog_app.seed_data import seed_issues, seed_maintenance, seed_sessions
from simlog_app.utils import iso_now, new_record_id, now_ms

logger = logging.getLogger(__name__)

STORAGE_KEYS = {
    "sessions": "simlog_sessions",
    "issues": "simlog_issues",
    "maintenance": "simlog_maintenance",
}

RESOLVED_BY = "Owner (Admin)"

T = TypeVar("T", bound=Record)


class IssueAlreadyResolved(ValueError):
    """Resolved is terminal; an issue is only resolved once."""


class RecordCollection(Generic[T]):
    """
    One named collection, stored newest-first as a single JSON array.
    Every read deserializes the whole array and every write replaces it.
    """

    def __init__(self, kv: KeyValueStore, key: str, model: Type[T], seed: Callable[[], List[T]]):
        self.kv = kv
        self.key = key
        self.model = model
        self._seed = seed
        self._adapter = TypeAdapter(List[model])

    def get_all(self) -> List[T]:
        stored = self.kv.get(self.key)
        if not stored:
            return self._seed()
        try:
            return self._adapter.validate_json(stored)
        except ValidationError as e:
            logger.warning("Stored value under %s is unreadable, using seed data: %s", self.key, e)
            return self._seed()

    def add(self, record: T) -> None:
        self.kv.set(self.key, self.dumps([record] + self.get_all()))
        logger.info("Added %s to %s", record.id, self.key)

    def dumps(self, records: List[T]) -> str:
        return json.dumps([r.to_payload() for r in records])


class IssueCollection(RecordCollection[IssueReport]):

    def get(self, issue_id: str) -> Optional[IssueReport]:
        return next((i for i in self.get_all() if i.id == issue_id), None)

    def replaced(self, updated: IssueReport) -> Optional[List[IssueReport]]:
        issues = self.get_all()
        if not any(i.id == updated.id for i in issues):
            return None
        return [updated if i.id == updated.id else i for i in issues]

    def update(self, updated: IssueReport) -> None:
        issues = self.replaced(updated)
        if issues is None:
            logger.info("No issue with id %s, nothing updated", updated.id)
            return
        self.kv.set(self.key, self.dumps(issues))
        logger.info("Updated issue %s", updated.id)


class SimLogStore:
    """Sessions, issues and maintenance logs for one simulator facility."""

    def __init__(self, db_path: Optional[str] = None):
        self.kv = KeyValueStore(db_path)
        self.sessions = RecordCollection(self.kv, STORAGE_KEYS["sessions"], SessionLog, seed_sessions)
        self.issues = IssueCollection(self.kv, STORAGE_KEYS["issues"], IssueReport, seed_issues)
        self.maintenance = RecordCollection(
            self.kv, STORAGE_KEYS["maintenance"], MaintenanceLog, seed_maintenance
        )

    def resolve_issue(
        self, issue: IssueReport, technician: str = RESOLVED_BY
    ) -> Tuple[IssueReport, MaintenanceLog]:
        """
        Mark an issue Resolved and log the matching maintenance entry.
        Both collections are written in one transaction.
        Raises KeyError for an unknown issue and IssueAlreadyResolved when
        the stored issue is already Resolved.
        """
        issues = self.issues.get_all()
        stored = next((i for i in issues if i.id == issue.id), None)
        if stored is None:
            raise KeyError(issue.id)
        if stored.status == IssueStatus.RESOLVED:
            raise IssueAlreadyResolved(issue.id)

        resolved = issue.model_copy(update={"status": IssueStatus.RESOLVED})
        entry = MaintenanceLog(
            id=new_record_id(),
            date=iso_now(),
            technician=technician,
            action_performed=f"Resolved issue: {issue.description}",
            related_issue_id=issue.id,
            hours_spent=1,
            timestamp=now_ms(),
        )

        issues = [resolved if i.id == issue.id else i for i in issues]
        logs = [entry] + self.maintenance.get_all()

        self.kv.set_many({
            self.issues.key: self.issues.dumps(issues),
            self.maintenance.key: self.maintenance.dumps(logs),
        })
        logger.info("Resolved issue %s, maintenance entry %s", issue.id, entry.id)
        return resolved, entry

    def reset_data(self) -> None:
        self.kv.delete(STORAGE_KEYS.values())
        logger.info("Cleared stored collections, seed data restored")
