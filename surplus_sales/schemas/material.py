"""
Pydantic schemas for Material.
"""
from pydantic import BaseModel, ConfigDict
from typing import Optional
from surplus_sales.schemas.common import InventoryRecord


class MaterialBase(BaseModel):
    """Base material schema with common fields."""
    name: str
    category: str
    supplier: str
    quantity: int = 0
    status: str = "In Stock"
    image: Optional[str] = None


class MaterialCreate(MaterialBase):
    """Schema for creating a material."""
    pass


class MaterialUpdate(BaseModel):
    """Schema for updating a material."""
    name: Optional[str] = None
    category: Optional[str] = None
    supplier: Optional[str] = None
    quantity: Optional[int] = None
    status: Optional[str] = None
    image: Optional[str] = None


class Material(InventoryRecord):
    """Schema for material responses."""
    name: str
    category: str
    supplier: str
    quantity: int
    status: str

    model_config = ConfigDict(from_attributes=True)
