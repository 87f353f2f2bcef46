# catalog_sync/db/models/cities.py
from sqlalchemy import Column, DateTime, Integer, Numeric, String
from sqlalchemy.sql import func

from catalog_sync.db.base import Base


class City(Base):
    __tablename__ = "cities"

    """Business unit a catalog or stock row belongs to.

    Incoming payloads reference cities by name (their "business_unit"); the
    bulk processor resolves that name to the integer id stored on catalogs
    and stock rows.
    """

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(5), nullable=False, unique=True)
    minimum_order = Column(Numeric(22, 2), nullable=False, default=30000)
    prefix = Column(String(2), nullable=True)

    created = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    modified = Column(DateTime(timezone=True), nullable=True, onupdate=func.now())
