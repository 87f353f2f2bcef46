# catalog_sync/domain/prices/service.py
from typing import Any, Dict, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from catalog_sync.core.exceptions import ReferenceNotFoundError
from catalog_sync.db.models.catalogs import Catalog
from catalog_sync.db.models.product_prices import ProductPrice
from catalog_sync.domain.audit import AuditLog
from catalog_sync.domain.bulk.processor import DEFAULT_BATCH_SIZE, BulkProcessor, BulkResult
from catalog_sync.domain.bulk.schemas import RecordOutcome
from catalog_sync.domain.bulk.strategy import BulkContext, RecordStrategy, normalize_key
from .schemas import ProductPriceRecord


class ProductPriceStrategy(RecordStrategy):
    label = "product prices"
    entity = "Price"
    process = "product_price"
    id_field = "product_id"
    required_fields = ("business_unit", "catalog", "product_id", "price", "vlr_impu_consumo", "is_active")
    schema = ProductPriceRecord
    deletes_inactive = True

    def natural_key(self, record: ProductPriceRecord):
        return normalize_key(record.business_unit, record.catalog, record.product_id)

    def duplicate_message(self, record: ProductPriceRecord) -> str:
        return (
            f"Duplicate price for product '{record.product_id}' in catalog "
            f"'{record.catalog}' of business unit '{record.business_unit}' in the batch"
        )

    async def resolve(self, ctx: BulkContext, record: ProductPriceRecord) -> Dict[str, Any]:
        city_id = await self.resolve_city(ctx, record.business_unit)
        catalog = await ctx.repository(Catalog).find_one(name=record.catalog, city_id=city_id)
        if catalog is None:
            raise ReferenceNotFoundError(
                f"Catalog '{record.catalog}' not found for business unit '{record.business_unit}'"
            )
        return {"catalog_id": catalog.id}

    async def upsert(self, ctx: BulkContext, record: ProductPriceRecord, refs: Dict[str, Any]) -> RecordOutcome:
        values = {
            "price": record.price,
            "vlr_impu_consumo": record.vlr_impu_consumo,
            "is_active": record.is_active,
        }
        if record.discount is not None:
            values["discount"] = record.discount

        return await self.write(
            ctx,
            ProductPrice,
            key={"catalog_id": refs["catalog_id"], "product_reference": record.product_id},
            values=values,
            is_active=record.is_active,
        )


async def create_product_prices_bulk(
    db: AsyncSession,
    records: Sequence[Any],
    batch_size: int = DEFAULT_BATCH_SIZE,
    audit_log: Optional[AuditLog] = None,
    delete_record: Optional[bool] = None,
) -> BulkResult:
    processor = BulkProcessor(ProductPriceStrategy(), audit_log=audit_log, delete_record=delete_record)
    return await processor.process(db, records, batch_size)
