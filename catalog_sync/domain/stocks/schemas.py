# catalog_sync/domain/stocks/schemas.py
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from catalog_sync.domain.bulk.schemas import BIGINT_MAX


class ProductStockRecord(BaseModel):
    model_config = ConfigDict(strict=True, str_strip_whitespace=True)

    business_unit: str
    product_id: str = Field(..., max_length=20)
    stock: int = Field(..., ge=0, le=BIGINT_MAX)
    is_active: Literal[0, 1]
