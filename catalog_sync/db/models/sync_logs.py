# catalog_sync/db/models/sync_logs.py
from sqlalchemy import JSON, Column, DateTime, Index, Integer, String, Text
from sqlalchemy.sql import func

from catalog_sync.db.base import Base


class SyncLog(Base):
    __tablename__ = "sync_logs"

    """Audit trail of every record received by the bulk endpoints.

    Rows are written outside the ingest transaction so that failed calls,
    which roll back their data, still leave a trace of what was rejected.
    """

    id = Column(Integer, primary_key=True, autoincrement=True)
    sync_type = Column(String(20), nullable=False)
    record_id = Column(String(100), nullable=False)
    process = Column(String(50), nullable=False)
    row_data = Column(JSON, nullable=True)

    event_date = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    result = Column(String(20), nullable=False)
    error_message = Column(Text, nullable=True)

    __table_args__ = (
        Index("ix_sync_logs_process_event_date", "process", "event_date"),
    )
