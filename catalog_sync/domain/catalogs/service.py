# catalog_sync/domain/catalogs/service.py
from typing import Any, Dict, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from catalog_sync.db.models.catalogs import Catalog
from catalog_sync.domain.audit import AuditLog
from catalog_sync.domain.bulk.processor import DEFAULT_BATCH_SIZE, BulkProcessor, BulkResult
from catalog_sync.domain.bulk.schemas import RecordOutcome
from catalog_sync.domain.bulk.strategy import BulkContext, RecordStrategy, normalize_key
from .schemas import CatalogRecord


class CatalogStrategy(RecordStrategy):
    label = "catalogs"
    entity = "Catalog"
    process = "catalog"
    id_field = "name_catalog"
    required_fields = ("name_catalog", "business_unit", "is_active")
    schema = CatalogRecord
    # catalogs keep their row when deactivated
    deletes_inactive = False

    def natural_key(self, record: CatalogRecord):
        return normalize_key(record.name_catalog, record.business_unit)

    def duplicate_message(self, record: CatalogRecord) -> str:
        return (
            f"Duplicate catalog '{record.name_catalog}' for business unit "
            f"'{record.business_unit}' in the batch"
        )

    async def resolve(self, ctx: BulkContext, record: CatalogRecord) -> Dict[str, Any]:
        return {"city_id": await self.resolve_city(ctx, record.business_unit)}

    async def upsert(self, ctx: BulkContext, record: CatalogRecord, refs: Dict[str, Any]) -> RecordOutcome:
        return await self.write(
            ctx,
            Catalog,
            key={"name": record.name_catalog, "city_id": refs["city_id"]},
            values={"is_active": record.is_active},
            is_active=record.is_active,
        )


async def create_catalogs_bulk(
    db: AsyncSession,
    records: Sequence[Any],
    batch_size: int = DEFAULT_BATCH_SIZE,
    audit_log: Optional[AuditLog] = None,
) -> BulkResult:
    processor = BulkProcessor(CatalogStrategy(), audit_log=audit_log)
    return await processor.process(db, records, batch_size)
