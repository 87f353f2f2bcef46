# catalog_sync/domain/prices/schemas.py
from decimal import Decimal
from typing import Annotated, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from catalog_sync.domain.bulk.schemas import Amount


class ProductPriceRecord(BaseModel):
    """Price operation: create, update, or delete when is_active is 0."""

    model_config = ConfigDict(strict=True, str_strip_whitespace=True)

    business_unit: str
    catalog: str = Field(..., max_length=20)
    product_id: str = Field(..., max_length=20)
    price: Annotated[Decimal, Amount] = Field(
        ..., ge=0, max_digits=17, decimal_places=4
    )
    vlr_impu_consumo: Annotated[Decimal, Amount] = Field(
        ..., ge=0, max_digits=19, decimal_places=4
    )
    discount: Optional[Annotated[Decimal, Amount]] = Field(
        None, ge=0, lt=100, max_digits=4, decimal_places=2
    )
    is_active: Literal[0, 1]
