"""
Pydantic schemas for request/response validation.
"""
from surplus_sales.schemas.accessory import AccessoryBase, AccessoryCreate, AccessoryUpdate, Accessory
from surplus_sales.schemas.common import ErrorResponse, InventoryRecord, SuccessResponse
from surplus_sales.schemas.material import MaterialBase, MaterialCreate, MaterialUpdate, Material
from surplus_sales.schemas.multicab import MultiCabBase, MultiCabCreate, MultiCabUpdate, MultiCab
from surplus_sales.schemas.user import (
    LoginRequest, PasswordUpdate, User, UserRegister, UserUpdate,
)

__all__ = [
    "AccessoryBase", "AccessoryCreate", "AccessoryUpdate", "Accessory",
    "ErrorResponse", "InventoryRecord", "SuccessResponse",
    "MaterialBase", "MaterialCreate", "MaterialUpdate", "Material",
    "MultiCabBase", "MultiCabCreate", "MultiCabUpdate", "MultiCab",
    "LoginRequest", "PasswordUpdate", "User", "UserRegister", "UserUpdate",
]
