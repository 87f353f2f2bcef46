# catalog_sync/domain/stocks/service.py
from typing import Any, Dict, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from catalog_sync.db.models.product_stocks import ProductStock
from catalog_sync.domain.audit import AuditLog
from catalog_sync.domain.bulk.processor import DEFAULT_BATCH_SIZE, BulkProcessor, BulkResult
from catalog_sync.domain.bulk.schemas import RecordOutcome
from catalog_sync.domain.bulk.strategy import BulkContext, RecordStrategy, normalize_key
from .schemas import ProductStockRecord


class ProductStockStrategy(RecordStrategy):
    label = "product stocks"
    entity = "Stock"
    process = "product_stock"
    id_field = "product_id"
    required_fields = ("business_unit", "product_id", "stock", "is_active")
    schema = ProductStockRecord
    deletes_inactive = True

    def natural_key(self, record: ProductStockRecord):
        return normalize_key(record.product_id, record.business_unit)

    def duplicate_message(self, record: ProductStockRecord) -> str:
        return (
            f"Duplicate stock entry for product '{record.product_id}' in business unit "
            f"'{record.business_unit}' in the batch"
        )

    async def resolve(self, ctx: BulkContext, record: ProductStockRecord) -> Dict[str, Any]:
        return {"city_id": await self.resolve_city(ctx, record.business_unit)}

    async def upsert(self, ctx: BulkContext, record: ProductStockRecord, refs: Dict[str, Any]) -> RecordOutcome:
        return await self.write(
            ctx,
            ProductStock,
            key={"product_id": record.product_id, "city_id": refs["city_id"]},
            values={"stock": record.stock, "is_active": record.is_active},
            is_active=record.is_active,
        )


async def create_product_stocks_bulk(
    db: AsyncSession,
    records: Sequence[Any],
    batch_size: int = DEFAULT_BATCH_SIZE,
    audit_log: Optional[AuditLog] = None,
    delete_record: Optional[bool] = None,
) -> BulkResult:
    processor = BulkProcessor(ProductStockStrategy(), audit_log=audit_log, delete_record=delete_record)
    return await processor.process(db, records, batch_size)
