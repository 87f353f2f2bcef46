# catalog_sync/domain/products/service.py
from typing import Any, Dict, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from catalog_sync.db.models.products import Product
from catalog_sync.domain.audit import AuditLog
from catalog_sync.domain.bulk.processor import DEFAULT_BATCH_SIZE, BulkProcessor, BulkResult
from catalog_sync.domain.bulk.schemas import RecordOutcome
from catalog_sync.domain.bulk.strategy import BulkContext, RecordStrategy, normalize_key
from .schemas import ProductRecord


class ProductStrategy(RecordStrategy):
    label = "products"
    entity = "Product"
    process = "product"
    id_field = "reference"
    required_fields = (
        "reference",
        "name",
        "packing",
        "convertion_rate",
        "vat_group",
        "vat",
        "packing_to",
        "is_active",
    )
    schema = ProductRecord

    def natural_key(self, record: ProductRecord):
        return normalize_key(record.reference)

    def duplicate_message(self, record: ProductRecord) -> str:
        return f"Duplicate reference '{record.reference}' in the batch"

    async def upsert(self, ctx: BulkContext, record: ProductRecord, refs: Dict[str, Any]) -> RecordOutcome:
        return await self.write(
            ctx,
            Product,
            key={"reference": record.reference},
            values={
                "name": record.name,
                "packing": record.packing,
                "convertion_rate": record.convertion_rate,
                "vat_group": record.vat_group,
                "vat": record.vat,
                "packing_to": record.packing_to,
                "is_active": record.is_active,
            },
            is_active=record.is_active,
        )


async def create_products_bulk(
    db: AsyncSession,
    records: Sequence[Any],
    batch_size: int = DEFAULT_BATCH_SIZE,
    audit_log: Optional[AuditLog] = None,
) -> BulkResult:
    processor = BulkProcessor(ProductStrategy(), audit_log=audit_log)
    return await processor.process(db, records, batch_size)
