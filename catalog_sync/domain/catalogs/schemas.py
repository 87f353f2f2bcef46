# catalog_sync/domain/catalogs/schemas.py
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class CatalogRecord(BaseModel):
    """One catalog as sent by the ERP; the city is given by name."""

    model_config = ConfigDict(strict=True, str_strip_whitespace=True)

    name_catalog: str = Field(..., max_length=20)
    business_unit: str
    is_active: Literal[0, 1]
