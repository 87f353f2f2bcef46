# catalog_sync/api/v1/routes_products.py
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_sync.api.v1.bulk import read_records, run_bulk
from catalog_sync.core.config import settings
from catalog_sync.core.security import require_credentials
from catalog_sync.db.base import get_db
from catalog_sync.domain.bulk.schemas import BulkResponse
from catalog_sync.domain.products.service import ProductStrategy, create_products_bulk
from catalog_sync.services.notifications import ErrorNotifier, get_notifier


router = APIRouter(prefix="/products", tags=["products"])


@router.post("", response_model=BulkResponse, summary="Create or update products in bulk")
async def create_products_endpoint(
    request: Request,
    batch_size: int = Query(settings.BATCH_SIZE, alias="batchSize", ge=1),
    _user: str = Depends(require_credentials),
    db: AsyncSession = Depends(get_db),
    notifier: ErrorNotifier = Depends(get_notifier),
):
    records = await read_records(request, "products")
    return await run_bulk(
        service=create_products_bulk,
        strategy=ProductStrategy,
        db=db,
        records=records,
        batch_size=batch_size,
        notifier=notifier,
    )
