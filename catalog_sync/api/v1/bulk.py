# catalog_sync/api/v1/bulk.py
from typing import Any, Awaitable, Callable, List, Type

from fastapi import HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_sync.core.exceptions import BulkProcessingError
from catalog_sync.core.logging import get_logger
from catalog_sync.core.sanitize import clean_strings
from catalog_sync.domain.bulk.processor import BulkResult
from catalog_sync.domain.bulk.schemas import BulkResponse
from catalog_sync.domain.bulk.strategy import RecordStrategy
from catalog_sync.services.notifications import ErrorNotifier, summarize_errors

logger = get_logger(__name__)

BulkService = Callable[[AsyncSession, List[Any], int], Awaitable[BulkResult]]


async def read_records(request: Request, wrapper: str) -> List[Any]:
    """Pull the wrapper array out of the JSON body and sanitize its strings."""
    try:
        body = await request.json()
    except ValueError:
        body = None

    if not isinstance(body, dict):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid input data")

    records = body.get(wrapper)
    if not isinstance(records, list):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f'Input must contain a "{wrapper}" array',
        )

    return clean_strings(records)


async def run_bulk(
    *,
    service: BulkService,
    strategy: Type[RecordStrategy],
    db: AsyncSession,
    records: List[Any],
    batch_size: int,
    notifier: ErrorNotifier,
) -> BulkResponse:
    """Call a bulk service and translate its outcome for the HTTP layer.

    Rejected records trigger an error notification both on partial success
    and on total failure; any other exception is reported and turned into a
    500 with a generic message.
    """
    label = strategy.label

    logger.info("bulk.request_received", process=strategy.process, record_count=len(records))

    try:
        result = await service(db, records, batch_size)
    except BulkProcessingError as e:
        if e.errors:
            await notifier.send_error_email(
                f"Errors processing {label}:\n"
                + summarize_errors(strategy.entity, strategy.id_field, e.errors)
            )
        raise
    except Exception as e:
        logger.error(
            "bulk.request_failed",
            process=strategy.process,
            error=str(e),
            error_type=type(e).__name__,
            exc_info=True,
        )
        await notifier.send_error_email(f"Critical error processing {label}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error processing {label} in bulk",
        ) from e

    if result.errors:
        await notifier.send_error_email(
            f"Errors processing {label}:\n"
            + summarize_errors(strategy.entity, strategy.id_field, result.error_dicts())
        )

    return result.to_response()
