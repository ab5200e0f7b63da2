"""
Accessory model for database.
"""
import enum

from sqlalchemy import Column, Float, Integer, String, Text

from surplus_sales.database import Base
from surplus_sales.models.base import TimestampMixin


class AccessoryMake(str, enum.Enum):
    GENERIC = "Generic"
    OEM = "OEM"
    AFTERMARKET = "Aftermarket"
    CUSTOM = "Custom"


class AccessoryColor(str, enum.Enum):
    BLACK = "Black"
    WHITE = "White"
    SILVER = "Silver"
    CHROME = "Chrome"
    CUSTOM = "Custom"


class AccessoryStatus(str, enum.Enum):
    """Inventory status, derived from quantity unless set explicitly."""
    IN_STOCK = "In Stock"
    LOW_STOCK = "Low Stock"
    OUT_OF_STOCK = "Out of Stock"
    AVAILABLE = "Available"


def status_for_quantity(quantity: int) -> AccessoryStatus:
    if quantity == 0:
        return AccessoryStatus.OUT_OF_STOCK
    if quantity <= 2:
        return AccessoryStatus.LOW_STOCK
    if quantity <= 5:
        return AccessoryStatus.IN_STOCK
    return AccessoryStatus.AVAILABLE


class Accessory(TimestampMixin, Base):
    """Accessory database model."""

    __tablename__ = "accessories"

    name = Column(String(255), nullable=False, index=True)
    make = Column(String(50), nullable=False)
    quantity = Column(Integer, nullable=False, default=0)
    price = Column(Float, nullable=False, default=0.0)
    status = Column(String(50), nullable=False)
    unit_color = Column(String(50), nullable=False)
    image = Column(Text, nullable=True)
