# catalog_sync/db/models/product_prices.py
from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, SmallInteger, String
from sqlalchemy.sql import func

from catalog_sync.db.base import Base


class ProductPrice(Base):
    __tablename__ = "product_prices"

    """Price of a product inside one catalog.

    The composite primary key (catalog_id, product_reference) is the natural
    key; product_reference is not a foreign key because prices may arrive
    before the product master data does.
    """

    catalog_id = Column(Integer, ForeignKey("catalogs.id"), primary_key=True)
    product_reference = Column(String(20), primary_key=True)

    price = Column(Numeric(17, 4), nullable=True, default=0)
    discount = Column(Numeric(4, 2), nullable=False, default=0)
    vlr_impu_consumo = Column(Numeric(19, 4), nullable=True)
    impuest_consumo = Column(Integer, nullable=True)
    is_active = Column(SmallInteger, nullable=False, default=1)

    created = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    modified = Column(DateTime(timezone=True), nullable=True, onupdate=func.now())
