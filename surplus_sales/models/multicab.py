"""
MultiCab model for database.
"""
from sqlalchemy import Column, Float, Integer, String, Text

from surplus_sales.database import Base
from surplus_sales.models.base import TimestampMixin


class MultiCab(TimestampMixin, Base):
    """MultiCab vehicle database model."""

    __tablename__ = "multicabs"

    name = Column(String(255), nullable=False, index=True)
    make = Column(String(100), nullable=False)
    quantity = Column(Integer, nullable=False, default=0)
    price = Column(Float, nullable=False, default=0.0)
    status = Column(String(50), nullable=False, default="Available")
    unit_color = Column(String(50), nullable=False)
    image = Column(Text, nullable=True)
