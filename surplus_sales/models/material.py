"""
Material model for database.
"""
from sqlalchemy import Column, Integer, String, Text

from surplus_sales.database import Base
from surplus_sales.models.base import TimestampMixin


class Material(TimestampMixin, Base):
    """Material database model."""

    __tablename__ = "materials"

    name = Column(String(255), nullable=False, index=True)
    category = Column(String(100), nullable=False)
    supplier = Column(String(255), nullable=False)
    quantity = Column(Integer, nullable=False, default=0)
    status = Column(String(50), nullable=False, default="In Stock")
    image = Column(Text, nullable=True)
