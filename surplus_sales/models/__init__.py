"""
SQLAlchemy database models.
"""
from surplus_sales.models.accessory import Accessory, AccessoryColor, AccessoryMake, AccessoryStatus
from surplus_sales.models.material import Material
from surplus_sales.models.multicab import MultiCab
from surplus_sales.models.user import User, UserRole

__all__ = [
    "Accessory", "AccessoryColor", "AccessoryMake", "AccessoryStatus",
    "Material", "MultiCab", "User", "UserRole",
]
