"""
Per-user analysis history.

Each user's history is a single JSON list stored under the key
``analysisHistory_<email>``. Appends are read-modify-write guarded by a
version column: the UPDATE only applies when the version read is still
current, otherwise the append is replayed against a fresh read. Two writers
appending at once therefore both keep their record.
"""
import logging
import time
import uuid
from datetime import date
from typing import List, Optional

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError

from models import HistoryEntry
from schemas import HistoryRecord

logger = logging.getLogger(__name__)

KEY_PREFIX = "analysisHistory_"
MAX_WRITE_ATTEMPTS = 5


class HistoryConflict(RuntimeError):
    """The history row kept changing underneath an append."""


def storage_key(email: str) -> str:
    return f"{KEY_PREFIX}{email}"


def job_title_from(job_description: str) -> str:
    first = (job_description or "").split("\n")[0].strip()
    return first[:100] or "Untitled Position"


def new_record(match_percentage: int, resume_text: str, job_description: str) -> HistoryRecord:
    return HistoryRecord(
        id=f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:6]}",
        date=date.today().isoformat(),
        match_percentage=match_percentage,
        job_title=job_title_from(job_description),
        resume_text=resume_text,
        job_description=job_description,
    )


class HistoryStore:
    """Load/append contract over a SQLAlchemy sessionmaker."""

    def __init__(self, session_factory):
        self.Session = session_factory

    def load(self, email: str) -> List[HistoryRecord]:
        """Newest first."""
        with self.Session() as s:
            row = s.get(HistoryEntry, storage_key(email))
            if row is None:
                return []
            return [HistoryRecord.model_validate(r) for r in row.records or []]

    def get(self, email: str, record_id: str) -> Optional[HistoryRecord]:
        for record in self.load(email):
            if record.id == record_id:
                return record
        return None

    def append(self, email: str, record: HistoryRecord) -> List[HistoryRecord]:
        """Prepend a record and persist the whole list. Returns the new list."""
        key = storage_key(email)
        payload = record.model_dump(by_alias=True)

        for attempt in range(1, MAX_WRITE_ATTEMPTS + 1):
            with self.Session() as s:
                row = s.get(HistoryEntry, key)
                if row is None:
                    s.add(HistoryEntry(storage_key=key, records=[payload], version=1))
                    try:
                        s.commit()
                    except IntegrityError:
                        # Another writer created the row first
                        s.rollback()
                        continue
                    records = [payload]
                    break

                current = list(row.records or [])
                if any(r.get("id") == record.id for r in current):
                    records = current
                    break
                records = [payload] + current
                result = s.execute(
                    update(HistoryEntry)
                    .where(HistoryEntry.storage_key == key, HistoryEntry.version == row.version)
                    .values(records=records, version=row.version + 1)
                    .execution_options(synchronize_session=False)
                )
                if result.rowcount == 1:
                    s.commit()
                    break
                s.rollback()
                logger.warning(f"History for {email} changed during append (attempt {attempt}), retrying")
        else:
            raise HistoryConflict(f"Could not save analysis history for {email}")

        logger.info(f"Analysis saved to history for {email} ({len(records)} entries)")
        return [HistoryRecord.model_validate(r) for r in records]
