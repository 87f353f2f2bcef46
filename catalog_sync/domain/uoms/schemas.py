# catalog_sync/domain/uoms/schemas.py
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from catalog_sync.domain.bulk.schemas import INTEGER_MAX


class ProdUomRecord(BaseModel):
    """Ordering rules for one product."""

    model_config = ConfigDict(strict=True, str_strip_whitespace=True)

    product_id: str = Field(..., max_length=20)
    unit_of_measure: str = Field(..., max_length=10)
    min_order_qty: int = Field(..., ge=0, le=INTEGER_MAX)
    max_order_qty: int = Field(..., ge=0, le=INTEGER_MAX)
    order_increment: int = Field(..., ge=0, le=INTEGER_MAX)
    is_active: Literal[0, 1]
