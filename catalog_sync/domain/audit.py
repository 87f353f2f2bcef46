# catalog_sync/domain/audit.py
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from catalog_sync.core.config import settings
from catalog_sync.core.logging import get_logger
from catalog_sync.db.models.sync_logs import SyncLog

logger = get_logger("catalog_sync.audit")


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class AuditEntry:
    record_id: str
    process: str
    result: str
    row_data: Any = None
    error_message: Optional[str] = None
    sync_type: str = "API"
    event_date: datetime = field(default_factory=_now)


class AuditLog:
    """Sink for per-record audit entries.

    Every entry is emitted as a structured log event. With a session factory
    (or AUDIT_LOG_TO_DB enabled) it is also stored in sync_logs using a
    session of its own, so it is kept even when the ingest call rolls back.
    """

    def __init__(self, session_factory=None):
        if session_factory is None and settings.AUDIT_LOG_TO_DB:
            from catalog_sync.db.base import AsyncSessionLocal

            session_factory = AsyncSessionLocal
        self.session_factory = session_factory

    async def record(self, entry: AuditEntry) -> None:
        event = asdict(entry)
        event["event_date"] = entry.event_date.isoformat()
        log = logger.warning if entry.result == "failed" else logger.info
        log("sync.audit", **event)

        if self.session_factory is None:
            return

        try:
            async with self.session_factory() as session:
                session.add(
                    SyncLog(
                        sync_type=entry.sync_type,
                        record_id=str(entry.record_id)[:100],
                        process=entry.process,
                        row_data=entry.row_data,
                        event_date=entry.event_date,
                        result=entry.result,
                        error_message=entry.error_message,
                    )
                )
                await session.commit()
        except Exception as e:
            # the audit trail must never reject a record
            logger.warning(
                "sync.audit_persist_failed",
                record_id=entry.record_id,
                process=entry.process,
                error=str(e),
                error_type=type(e).__name__,
            )
