from catalog_sync.db.models.cities import City
from catalog_sync.db.models.catalogs import Catalog
from catalog_sync.db.models.products import Product
from catalog_sync.db.models.product_prices import ProductPrice
from catalog_sync.db.models.product_stocks import ProductStock
from catalog_sync.db.models.prod_uoms import ProdUom
from catalog_sync.db.models.sync_logs import SyncLog

__all__ = [
    "Catalog",
    "City",
    "ProdUom",
    "Product",
    "ProductPrice",
    "ProductStock",
    "SyncLog",
]
