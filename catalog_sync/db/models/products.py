from sqlalchemy import Column, DateTime, Numeric, SmallInteger, String
from sqlalchemy.sql import func

from catalog_sync.db.base import Base


class Product(Base):
    __tablename__ = "products"

    """Master data for a sellable product, keyed by its ERP reference.

    Packing columns describe the sale unit and the unit it converts to;
    convertion_rate keeps the ERP spelling so payloads map one to one.
    """

    reference = Column(String(20), primary_key=True)
    name = Column(String(50), nullable=False)
    packing = Column(String(3), nullable=True)
    convertion_rate = Column(Numeric(15, 8), nullable=True)
    vat_group = Column(String(10), nullable=True)
    vat = Column(Numeric(4, 2), nullable=False, default=0)
    packing_to = Column(String(3), nullable=True)
    is_active = Column(SmallInteger, nullable=False, default=1)

    created = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    modified = Column(DateTime(timezone=True), nullable=True, onupdate=func.now())
