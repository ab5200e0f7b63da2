"""
Pydantic schemas for MultiCab.
"""
from pydantic import BaseModel, ConfigDict
from typing import Optional
from surplus_sales.schemas.common import InventoryRecord


class MultiCabBase(BaseModel):
    """Base cab schema with common fields."""
    name: str
    make: str
    quantity: int = 0
    price: float = 0.0
    status: str = "Available"
    unit_color: str
    image: Optional[str] = None


class MultiCabCreate(MultiCabBase):
    """Schema for creating a cab."""
    pass


class MultiCabUpdate(BaseModel):
    """Schema for updating a cab."""
    name: Optional[str] = None
    make: Optional[str] = None
    quantity: Optional[int] = None
    price: Optional[float] = None
    status: Optional[str] = None
    unit_color: Optional[str] = None
    image: Optional[str] = None


class MultiCab(InventoryRecord):
    """Schema for cab responses."""
    name: str
    make: str
    quantity: int
    price: float
    status: str
    unit_color: str

    model_config = ConfigDict(from_attributes=True)
