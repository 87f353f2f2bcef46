# catalog_sync/domain/bulk/processor.py
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from catalog_sync.core.config import settings
from catalog_sync.core.exceptions import BulkProcessingError, DuplicateRecordError, RecordError
from catalog_sync.core.logging import get_logger
from catalog_sync.domain.audit import AuditEntry, AuditLog
from catalog_sync.domain.bulk.schemas import (
    BulkResponse,
    BulkStatus,
    RecordErrorOut,
    RecordOutcome,
    ResponseMeta,
)
from catalog_sync.domain.bulk.strategy import BulkContext, RecordStrategy

logger = get_logger(__name__)

DEFAULT_BATCH_SIZE = 100
SUCCESS_MESSAGE = "Transaction Successful"


@dataclass
class BulkResult:
    label: str
    total: int
    created: int = 0
    updated: int = 0
    deleted: int = 0
    errors: List[RecordErrorOut] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return self.created + self.updated + self.deleted

    @property
    def status(self) -> BulkStatus:
        if self.succeeded == self.total:
            return BulkStatus.SUCCESSFUL
        if self.succeeded == 0:
            return BulkStatus.FAILED
        return BulkStatus.PARTIAL_SUCCESS

    @property
    def message(self) -> str:
        if self.status == BulkStatus.SUCCESSFUL:
            return SUCCESS_MESSAGE
        return f"{self.succeeded} of {self.total} {self.label} processed successfully"

    def count(self, outcome: RecordOutcome) -> None:
        if outcome == RecordOutcome.CREATED:
            self.created += 1
        elif outcome == RecordOutcome.UPDATED:
            self.updated += 1
        elif outcome == RecordOutcome.DELETED:
            self.deleted += 1

    def error_dicts(self) -> List[Dict[str, Any]]:
        return [error.model_dump() for error in self.errors]

    def to_response(self) -> BulkResponse:
        return BulkResponse(
            response=ResponseMeta(code=200, message=self.message, status=self.status),
            errors=self.errors,
        )


class BulkProcessor:
    """Runs a record strategy over a list of raw records.

    Every record is processed exactly once, in input order, inside one
    transaction. A failing record is reported with its original index and
    never stops the others; only a call in which every record failed (or a
    database error) aborts and rolls back.
    """

    def __init__(
        self,
        strategy: RecordStrategy,
        audit_log: Optional[AuditLog] = None,
        delete_record: Optional[bool] = None,
    ):
        self.strategy = strategy
        self.audit_log = audit_log or AuditLog()
        self.delete_record = settings.DELETE_RECORD if delete_record is None else delete_record
        self.logger = logger.bind(process=strategy.process)

    async def process(
        self,
        db: AsyncSession,
        records: Optional[Sequence[Any]],
        batch_size: int = DEFAULT_BATCH_SIZE,
    ) -> BulkResult:
        label = self.strategy.label
        if not records:
            raise BulkProcessingError(f"No {label} provided in the array")
        if batch_size < 1:
            raise ValueError("batch_size must be a positive integer")

        start_time = time.perf_counter()
        result = BulkResult(label=label, total=len(records))
        ctx = BulkContext(db=db, delete_record=self.delete_record)

        self.logger.info("bulk.started", record_count=result.total, batch_size=batch_size)

        async with db.begin():
            for start in range(0, result.total, batch_size):
                chunk = records[start:start + batch_size]
                errors_before = len(result.errors)

                for offset, raw in enumerate(chunk):
                    await self._process_record(ctx, raw, start + offset, result)

                self.logger.info(
                    "bulk.chunk_processed",
                    chunk_start=start,
                    chunk_size=len(chunk),
                    chunk_errors=len(result.errors) - errors_before,
                )

            if result.status == BulkStatus.FAILED:
                self.logger.warning("bulk.all_failed", record_count=result.total)
                # raised inside the transaction block so every write rolls back
                raise BulkProcessingError(
                    f"All {label} contain invalid data",
                    errors=result.error_dicts(),
                )

        self.logger.info(
            "bulk.completed",
            status=result.status.value,
            created=result.created,
            updated=result.updated,
            deleted=result.deleted,
            rejected=len(result.errors),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        return result

    async def _process_record(
        self,
        ctx: BulkContext,
        raw: Any,
        index: int,
        result: BulkResult,
    ) -> None:
        strategy = self.strategy
        record_id = strategy.identify(raw) or f"INVALID_INDEX_{index}"

        try:
            record = strategy.validate(raw)

            key = strategy.natural_key(record)
            if key in ctx.seen_keys:
                raise DuplicateRecordError(strategy.duplicate_message(record))
            ctx.seen_keys.add(key)

            refs = await strategy.resolve(ctx, record)
            outcome = await strategy.upsert(ctx, record, refs)
        except RecordError as e:
            result.errors.append(
                RecordErrorOut(index=index, error=e.message, code=e.code, record=raw)
            )
            await self.audit_log.record(
                AuditEntry(
                    record_id=record_id,
                    process=strategy.process,
                    result=RecordOutcome.FAILED.value,
                    row_data=raw,
                    error_message=e.message,
                )
            )
            return

        result.count(outcome)
        await self.audit_log.record(
            AuditEntry(
                record_id=record_id,
                process=strategy.process,
                result=outcome.value,
                row_data=raw,
            )
        )
