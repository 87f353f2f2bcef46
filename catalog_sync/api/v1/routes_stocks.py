# catalog_sync/api/v1/routes_stocks.py
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_sync.api.v1.bulk import read_records, run_bulk
from catalog_sync.core.config import settings
from catalog_sync.core.security import require_credentials
from catalog_sync.db.base import get_db
from catalog_sync.domain.bulk.schemas import BulkResponse
from catalog_sync.domain.stocks.service import ProductStockStrategy, create_product_stocks_bulk
from catalog_sync.services.notifications import ErrorNotifier, get_notifier


router = APIRouter(prefix="/product-stocks", tags=["product-stocks"])


@router.post("", response_model=BulkResponse, summary="Create, update or delete product stock in bulk")
async def process_product_stocks_endpoint(
    request: Request,
    batch_size: int = Query(settings.BATCH_SIZE, alias="batchSize", ge=1),
    _user: str = Depends(require_credentials),
    db: AsyncSession = Depends(get_db),
    notifier: ErrorNotifier = Depends(get_notifier),
):
    records = await read_records(request, "product_stock")
    return await run_bulk(
        service=create_product_stocks_bulk,
        strategy=ProductStockStrategy,
        db=db,
        records=records,
        batch_size=batch_size,
        notifier=notifier,
    )
