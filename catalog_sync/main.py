from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from catalog_sync.api.v1.routes_catalogs import router as catalogs_router
from catalog_sync.api.v1.routes_prices import router as prices_router
from catalog_sync.api.v1.routes_products import router as products_router
from catalog_sync.api.v1.routes_stocks import router as stocks_router
from catalog_sync.api.v1.routes_uoms import router as uoms_router
from catalog_sync.core.config import settings
from catalog_sync.core.exceptions import BulkProcessingError
from catalog_sync.core.logging import configure_logging, get_logger
from catalog_sync.db.base import create_all, engine

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.DB_CREATE_ALL:
        await create_all()
    logger.info("app.started")
    yield
    await engine.dispose()
    logger.info("app.stopped")


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(title="catalog-sync", lifespan=lifespan)

    app.include_router(catalogs_router)
    app.include_router(products_router)
    app.include_router(prices_router)
    app.include_router(stocks_router)
    app.include_router(uoms_router)

    @app.exception_handler(BulkProcessingError)
    async def bulk_processing_error_handler(request: Request, exc: BulkProcessingError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_response())

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
