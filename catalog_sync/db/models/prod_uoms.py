from sqlalchemy import Column, DateTime, Integer, SmallInteger, String
from sqlalchemy.sql import func

from catalog_sync.db.base import Base


class ProdUom(Base):
    __tablename__ = "prod_uoms"

    """Ordering rules (unit of measure and quantity limits) for a product."""

    product_id = Column(String(20), primary_key=True)
    unit_of_measure = Column(String(10), nullable=False)
    min_order_qty = Column(Integer, nullable=False)
    max_order_qty = Column(Integer, nullable=False)
    order_increment = Column(Integer, nullable=False)
    is_active = Column(SmallInteger, nullable=False, default=1)

    created = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    modified = Column(DateTime(timezone=True), nullable=True, onupdate=func.now())
