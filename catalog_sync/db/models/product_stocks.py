from sqlalchemy import BigInteger, Column, DateTime, ForeignKey, Index, Integer, SmallInteger, String, UniqueConstraint
from sqlalchemy.sql import func

from catalog_sync.db.base import Base


class ProductStock(Base):
    __tablename__ = "product_stocks"

    """On-hand stock for a product in a city.

    One row per (product_id, city_id); the bulk sync overwrites the quantity
    rather than applying deltas.
    """

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_id = Column(String(20), nullable=False)
    city_id = Column(Integer, ForeignKey("cities.id"), nullable=False)

    stock = Column(BigInteger, nullable=False, default=0)
    is_active = Column(SmallInteger, nullable=True, default=1)

    created = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    modified = Column(DateTime(timezone=True), nullable=True, onupdate=func.now())

    __table_args__ = (
        UniqueConstraint("product_id", "city_id", name="uq_product_stocks_product_city"),
        Index("ix_product_stocks_city", "city_id"),
    )
