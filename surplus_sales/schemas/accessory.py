"""
Pydantic schemas for Accessory.
"""
from pydantic import BaseModel, ConfigDict
from typing import Optional
from surplus_sales.models.accessory import AccessoryColor, AccessoryMake, AccessoryStatus
from surplus_sales.schemas.common import InventoryRecord


class AccessoryBase(BaseModel):
    """Base accessory schema with common fields."""
    name: str
    make: AccessoryMake
    quantity: int = 0
    price: float = 0.0
    status: Optional[AccessoryStatus] = None
    unit_color: AccessoryColor
    image: Optional[str] = None


class AccessoryCreate(AccessoryBase):
    """Schema for creating an accessory. Status is derived from quantity when omitted."""
    pass


class AccessoryUpdate(BaseModel):
    """Schema for updating an accessory."""
    name: Optional[str] = None
    make: Optional[AccessoryMake] = None
    quantity: Optional[int] = None
    price: Optional[float] = None
    status: Optional[AccessoryStatus] = None
    unit_color: Optional[AccessoryColor] = None
    image: Optional[str] = None


class Accessory(InventoryRecord):
    """Schema for accessory responses."""
    name: str
    make: str
    quantity: int
    price: float
    status: str
    unit_color: str

    model_config = ConfigDict(from_attributes=True)
