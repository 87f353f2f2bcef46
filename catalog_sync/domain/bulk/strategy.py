"""
Per-resource rules plugged into the bulk processor.

A strategy knows how to validate one raw record, which natural key makes it
unique inside a call, which foreign natural keys it must resolve and how to
write it. The processor owns ordering, error collection, transaction and
outcome classification.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence, Set, Tuple, Type

from pydantic import BaseModel, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_sync.core.exceptions import (
    InvalidFieldsError,
    MissingFieldsError,
    ReferenceNotFoundError,
)
from catalog_sync.db.models.cities import City
from catalog_sync.db.repositories.base import Repository
from catalog_sync.domain.bulk.schemas import RecordOutcome


@dataclass
class BulkContext:
    """State scoped to a single bulk call."""

    db: AsyncSession
    delete_record: bool = True
    seen_keys: Set[Tuple[str, ...]] = field(default_factory=set)
    city_ids: Dict[str, int] = field(default_factory=dict)

    def repository(self, model) -> Repository:
        return Repository(self.db, model)


def is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def normalize_key(*parts: Any) -> Tuple[str, ...]:
    return tuple(str(part).strip().casefold() for part in parts)


def format_violation(error: Dict[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ())) or "record"
    return f"{location}: {error['msg']}"


class RecordStrategy:
    label: str = "records"
    entity: str = "Record"
    process: str = "record"
    id_field: str = "id"
    required_fields: Sequence[str] = ()
    schema: Type[BaseModel]
    deletes_inactive: bool = False

    def identify(self, raw: Any) -> Optional[str]:
        if isinstance(raw, dict) and not is_missing(raw.get(self.id_field)):
            return str(raw[self.id_field])
        return None

    def validate(self, raw: Any) -> BaseModel:
        if not isinstance(raw, dict):
            raise InvalidFieldsError(["record: must be an object"])

        missing = [name for name in self.required_fields if is_missing(raw.get(name))]
        if missing:
            raise MissingFieldsError(missing)

        try:
            return self.schema.model_validate(raw)
        except ValidationError as e:
            raise InvalidFieldsError([format_violation(err) for err in e.errors()]) from e

    def natural_key(self, record: BaseModel) -> Tuple[str, ...]:
        raise NotImplementedError

    def duplicate_message(self, record: BaseModel) -> str:
        raise NotImplementedError

    async def resolve(self, ctx: BulkContext, record: BaseModel) -> Dict[str, Any]:
        return {}

    async def upsert(self, ctx: BulkContext, record: BaseModel, refs: Dict[str, Any]) -> RecordOutcome:
        raise NotImplementedError

    async def resolve_city(self, ctx: BulkContext, business_unit: str) -> int:
        """Business unit name -> city id, cached for the rest of the call."""
        city_id = ctx.city_ids.get(business_unit)
        if city_id is None:
            city = await ctx.repository(City).find_one(name=business_unit)
            if city is None:
                raise ReferenceNotFoundError(f"Business unit '{business_unit}' not found")
            city_id = city.id
            ctx.city_ids[business_unit] = city_id
        return city_id

    async def write(
        self,
        ctx: BulkContext,
        model,
        key: Dict[str, Any],
        values: Dict[str, Any],
        is_active: int,
    ) -> RecordOutcome:
        """Insert, update or delete the row identified by ``key``."""
        repo = ctx.repository(model)
        existing = await repo.find_one(**key)

        if existing is None:
            await repo.save(repo.build(**key, **values))
            return RecordOutcome.CREATED

        if self.deletes_inactive and is_active == 0 and ctx.delete_record:
            await repo.remove(existing)
            return RecordOutcome.DELETED

        for name, value in values.items():
            setattr(existing, name, value)
        await repo.save(existing)
        return RecordOutcome.UPDATED
