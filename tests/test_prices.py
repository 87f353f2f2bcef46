from decimal import Decimal

import pytest

from catalog_sync.core.exceptions import BulkProcessingError
from catalog_sync.db.models import ProductPrice
from catalog_sync.domain.prices.service import create_product_prices_bulk


def price(product_id, catalog="GENERAL", business_unit="BOG", **overrides):
    data = {
        "business_unit": business_unit,
        "catalog": catalog,
        "product_id": product_id,
        "price": 2500,
        "vlr_impu_consumo": 0,
        "is_active": 1,
    }
    data.update(overrides)
    return data


async def test_creates_price_in_catalog_of_business_unit(db, seeded, fetch_all):
    result = await create_product_prices_bulk(db, [price("P-001", discount=5.5)])

    assert result.created == 1
    assert result.message == "Transaction Successful"
    rows = await fetch_all(ProductPrice)
    assert len(rows) == 1
    assert rows[0].product_reference == "P-001"
    assert float(rows[0].price) == 2500
    assert float(rows[0].discount) == 5.5


async def test_discount_defaults_to_zero(db, seeded, fetch_all):
    await create_product_prices_bulk(db, [price("P-001")])

    rows = await fetch_all(ProductPrice)
    assert float(rows[0].discount) == 0


async def test_same_product_in_two_catalogs(db, seeded, count_rows):
    records = [price("P-001", business_unit="BOG"), price("P-001", business_unit="MED")]

    result = await create_product_prices_bulk(db, records)

    assert result.created == 2
    assert await count_rows(ProductPrice) == 2


async def test_existing_price_is_updated(db, seeded, fetch_all):
    await create_product_prices_bulk(db, [price("P-001")])
    result = await create_product_prices_bulk(db, [price("P-001", price=3100)])

    assert result.updated == 1
    rows = await fetch_all(ProductPrice)
    assert float(rows[0].price) == 3100


async def test_inactive_price_is_deleted(db, seeded, count_rows, audit_log):
    await create_product_prices_bulk(db, [price("P-001"), price("P-002")])
    result = await create_product_prices_bulk(
        db, [price("P-001", is_active=0)], audit_log=audit_log, delete_record=True
    )

    assert result.deleted == 1
    assert result.message == "Transaction Successful"
    assert audit_log.entries[0].result == "deleted"
    assert await count_rows(ProductPrice) == 1


async def test_inactive_price_is_kept_when_deletes_are_disabled(db, seeded, fetch_all):
    await create_product_prices_bulk(db, [price("P-001")])
    result = await create_product_prices_bulk(
        db, [price("P-001", is_active=0)], delete_record=False
    )

    assert result.updated == 1
    assert result.deleted == 0
    rows = await fetch_all(ProductPrice)
    assert rows[0].is_active == 0


async def test_inactive_price_without_existing_row_is_created(db, seeded, count_rows):
    result = await create_product_prices_bulk(db, [price("P-001", is_active=0)])

    assert result.created == 1
    assert await count_rows(ProductPrice) == 1


async def test_unknown_catalog_is_rejected(db, seeded):
    records = [price("P-001"), price("P-002", catalog="OUTLET")]

    result = await create_product_prices_bulk(db, records)

    assert result.errors[0].index == 1
    assert result.errors[0].code == "not_found"
    assert result.errors[0].error == "Catalog 'OUTLET' not found for business unit 'BOG'"


async def test_unknown_business_unit_is_rejected(db, seeded):
    records = [price("P-001"), price("P-001", business_unit="CALI")]

    result = await create_product_prices_bulk(db, records)

    assert result.errors[0].error == "Business unit 'CALI' not found"


async def test_first_occurrence_claims_key_even_when_it_fails(db, seeded):
    records = [price("P-001", catalog="OUTLET"), price("P-001", catalog="OUTLET")]

    with pytest.raises(BulkProcessingError) as exc_info:
        await create_product_prices_bulk(db, records)

    codes = [error["code"] for error in exc_info.value.errors]
    assert codes == ["not_found", "duplicate"]


@pytest.mark.parametrize(
    "overrides",
    [
        {"price": -1},
        {"price": "2500"},
        {"vlr_impu_consumo": -0.5},
        {"discount": 100},
        {"catalog": "C" * 21},
    ],
)
async def test_invalid_values_are_rejected(db, seeded, overrides):
    with pytest.raises(BulkProcessingError) as exc_info:
        await create_product_prices_bulk(db, [price("P-001", **overrides)])

    assert exc_info.value.errors[0]["code"] == "invalid_fields"


@pytest.mark.parametrize(
    "overrides",
    [
        {"price": 10**13},
        {"price": 12.34567},
        {"vlr_impu_consumo": 10**15},
        {"discount": 5.555},
        {"price": True},
    ],
)
async def test_amount_outside_column_precision_fails_only_that_record(db, seeded, fetch_all, overrides):
    records = [price("P-001"), price("P-002", **overrides)]

    result = await create_product_prices_bulk(db, records)

    assert result.created == 1
    assert result.errors[0].index == 1
    assert result.errors[0].code == "invalid_fields"
    rows = await fetch_all(ProductPrice)
    assert [row.product_reference for row in rows] == ["P-001"]


async def test_amounts_keep_their_decimal_digits(db, seeded, fetch_all):
    await create_product_prices_bulk(
        db, [price("P-001", price=19.99, vlr_impu_consumo=0.3, discount=12.5)]
    )

    rows = await fetch_all(ProductPrice)
    assert rows[0].price == Decimal("19.99")
    assert rows[0].vlr_impu_consumo == Decimal("0.3")
    assert rows[0].discount == Decimal("12.5")
