import pytest

from catalog_sync.core.exceptions import BulkProcessingError
from catalog_sync.db.models import ProductStock
from catalog_sync.domain.bulk.schemas import BulkStatus
from catalog_sync.domain.stocks.service import create_product_stocks_bulk


def stock(product_id, business_unit="BOG", quantity=10, is_active=1):
    return {
        "business_unit": business_unit,
        "product_id": product_id,
        "stock": quantity,
        "is_active": is_active,
    }


async def test_creates_stock_per_city(db, seeded, fetch_all):
    records = [stock("P-001", "BOG", 10), stock("P-001", "MED", 4)]

    result = await create_product_stocks_bulk(db, records)

    assert result.created == 2
    rows = {row.city_id: row.stock for row in await fetch_all(ProductStock)}
    assert rows == {seeded["BOG"]: 10, seeded["MED"]: 4}


async def test_stock_is_overwritten_not_accumulated(db, seeded, fetch_all):
    await create_product_stocks_bulk(db, [stock("P-001", quantity=10)])
    result = await create_product_stocks_bulk(db, [stock("P-001", quantity=3)])

    assert result.updated == 1
    rows = await fetch_all(ProductStock)
    assert [row.stock for row in rows] == [3]


async def test_inactive_stock_is_deleted(db, seeded, count_rows):
    await create_product_stocks_bulk(db, [stock("P-001"), stock("P-002")])
    result = await create_product_stocks_bulk(
        db, [stock("P-001", is_active=0)], delete_record=True
    )

    assert result.deleted == 1
    assert result.status == BulkStatus.SUCCESSFUL
    assert await count_rows(ProductStock) == 1


async def test_inactive_stock_is_updated_when_deletes_are_disabled(db, seeded, fetch_all):
    await create_product_stocks_bulk(db, [stock("P-001")])
    result = await create_product_stocks_bulk(
        db, [stock("P-001", is_active=0)], delete_record=False
    )

    assert result.updated == 1
    rows = await fetch_all(ProductStock)
    assert rows[0].is_active == 0


async def test_duplicate_product_and_city(db, seeded):
    records = [stock("P-001", quantity=1), stock("P-001", quantity=2), stock("P-002")]

    result = await create_product_stocks_bulk(db, records)

    assert result.status == BulkStatus.PARTIAL_SUCCESS
    assert result.errors[0].index == 1
    assert result.errors[0].error == (
        "Duplicate stock entry for product 'P-001' in business unit 'BOG' in the batch"
    )


async def test_unknown_business_unit(db, seeded):
    result = await create_product_stocks_bulk(db, [stock("P-001"), stock("P-001", "CALI")])

    assert result.errors[0].code == "not_found"
    assert result.errors[0].error == "Business unit 'CALI' not found"


@pytest.mark.parametrize("quantity", [-1, 2.5, "10"])
async def test_invalid_quantity(db, seeded, quantity):
    with pytest.raises(BulkProcessingError) as exc_info:
        await create_product_stocks_bulk(db, [stock("P-001", quantity=quantity)])

    assert exc_info.value.errors[0]["code"] == "invalid_fields"
    assert "stock" in exc_info.value.errors[0]["error"]


async def test_quantity_beyond_column_range_fails_only_that_record(db, seeded, fetch_all):
    records = [stock("P-001", quantity=5), stock("P-002", quantity=2**64)]

    result = await create_product_stocks_bulk(db, records)

    assert result.status == BulkStatus.PARTIAL_SUCCESS
    assert result.errors[0].index == 1
    assert result.errors[0].code == "invalid_fields"
    assert "stock" in result.errors[0].error
    rows = await fetch_all(ProductStock)
    assert [(row.product_id, row.stock) for row in rows] == [("P-001", 5)]


async def test_largest_bigint_quantity_is_stored(db, seeded, fetch_all):
    result = await create_product_stocks_bulk(db, [stock("P-001", quantity=2**63 - 1)])

    assert result.created == 1
    rows = await fetch_all(ProductStock)
    assert rows[0].stock == 2**63 - 1
