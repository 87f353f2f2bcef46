# catalog_sync/domain/products/schemas.py
from decimal import Decimal
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from catalog_sync.domain.bulk.schemas import Amount


class ProductRecord(BaseModel):
    model_config = ConfigDict(strict=True, str_strip_whitespace=True)

    reference: str = Field(..., max_length=20)
    name: str = Field(..., max_length=50)
    packing: str = Field(..., max_length=3)
    convertion_rate: Annotated[Decimal, Amount] = Field(
        ..., gt=0, max_digits=15, decimal_places=8
    )
    vat_group: str = Field(..., max_length=10)
    vat: Annotated[Decimal, Amount] = Field(
        ..., ge=0, lt=100, max_digits=4, decimal_places=2
    )
    packing_to: str = Field(..., max_length=3)
    is_active: Literal[0, 1]
