# catalog_sync/domain/uoms/service.py
from typing import Any, Dict, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from catalog_sync.core.exceptions import ReferenceNotFoundError
from catalog_sync.db.models.prod_uoms import ProdUom
from catalog_sync.db.models.products import Product
from catalog_sync.domain.audit import AuditLog
from catalog_sync.domain.bulk.processor import DEFAULT_BATCH_SIZE, BulkProcessor, BulkResult
from catalog_sync.domain.bulk.schemas import RecordOutcome
from catalog_sync.domain.bulk.strategy import BulkContext, RecordStrategy, normalize_key
from .schemas import ProdUomRecord


class ProdUomStrategy(RecordStrategy):
    label = "product units of measure"
    entity = "UOM"
    process = "prod_uoms"
    id_field = "product_id"
    required_fields = (
        "product_id",
        "unit_of_measure",
        "min_order_qty",
        "max_order_qty",
        "order_increment",
        "is_active",
    )
    schema = ProdUomRecord
    deletes_inactive = True

    def natural_key(self, record: ProdUomRecord):
        return normalize_key(record.product_id)

    def duplicate_message(self, record: ProdUomRecord) -> str:
        return f"Duplicate unit of measure for product '{record.product_id}' in the batch"

    async def resolve(self, ctx: BulkContext, record: ProdUomRecord) -> Dict[str, Any]:
        product = await ctx.repository(Product).find_one(reference=record.product_id)
        if product is None:
            raise ReferenceNotFoundError(f"Product with ID {record.product_id} does not exist")
        return {}

    async def upsert(self, ctx: BulkContext, record: ProdUomRecord, refs: Dict[str, Any]) -> RecordOutcome:
        return await self.write(
            ctx,
            ProdUom,
            key={"product_id": record.product_id},
            values={
                "unit_of_measure": record.unit_of_measure,
                "min_order_qty": record.min_order_qty,
                "max_order_qty": record.max_order_qty,
                "order_increment": record.order_increment,
                "is_active": record.is_active,
            },
            is_active=record.is_active,
        )


async def create_prod_uoms_bulk(
    db: AsyncSession,
    records: Sequence[Any],
    batch_size: int = DEFAULT_BATCH_SIZE,
    audit_log: Optional[AuditLog] = None,
    delete_record: Optional[bool] = None,
) -> BulkResult:
    processor = BulkProcessor(ProdUomStrategy(), audit_log=audit_log, delete_record=delete_record)
    return await processor.process(db, records, batch_size)
