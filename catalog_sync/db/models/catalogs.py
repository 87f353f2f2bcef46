# catalog_sync/db/models/catalogs.py
from sqlalchemy import Column, DateTime, ForeignKey, Integer, SmallInteger, String, UniqueConstraint
from sqlalchemy.sql import func

from catalog_sync.db.base import Base


class Catalog(Base):
    __tablename__ = "catalogs"

    """A named price catalog published for one city.

    Catalogs are identified by (name, city_id); they are never deleted by the
    bulk sync, an inactive catalog simply carries is_active = 0.
    """

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(20), nullable=False)
    city_id = Column(Integer, ForeignKey("cities.id"), nullable=False)
    is_active = Column(SmallInteger, nullable=False, default=1)

    created = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    modified = Column(DateTime(timezone=True), nullable=True, onupdate=func.now())

    __table_args__ = (
        UniqueConstraint("name", "city_id", name="uq_catalogs_name_city"),
    )
