# catalog_sync/domain/bulk/schemas.py
import enum
from decimal import Decimal
from typing import Any, List

from pydantic import BaseModel, BeforeValidator, Field

# column limits shared by the record schemas
INTEGER_MAX = 2**31 - 1
BIGINT_MAX = 2**63 - 1


def _to_decimal(value: Any) -> Any:
    """JSON numbers become Decimal; anything else is left to strict validation."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        # str() keeps the shortest repr, so 19.99 stays 19.99
        return Decimal(str(value))
    return value


Amount = BeforeValidator(_to_decimal)


class BulkStatus(str, enum.Enum):
    SUCCESSFUL = "successful"
    PARTIAL_SUCCESS = "partial_success"
    FAILED = "failed"


class RecordOutcome(str, enum.Enum):
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    FAILED = "failed"


class RecordErrorOut(BaseModel):
    """Error detail for a single rejected record."""

    index: int = Field(..., ge=0, description="0-based position of the record in the request")
    error: str = Field(..., description="Human-readable error message")
    code: str = Field(..., description="Machine-readable error code")
    record: Any = Field(None, description="The record exactly as received")


class ResponseMeta(BaseModel):
    code: int
    message: str
    status: BulkStatus


class BulkResponse(BaseModel):
    """Body returned by every bulk endpoint."""

    response: ResponseMeta
    errors: List[RecordErrorOut] = Field(default_factory=list)
