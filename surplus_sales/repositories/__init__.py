"""
Data access layer.
"""
from surplus_sales.repositories.accessories import AccessoryRepository
from surplus_sales.repositories.materials import MaterialRepository
from surplus_sales.repositories.multicabs import MultiCabRepository
from surplus_sales.repositories.query import FilterClause, FilterQuery
from surplus_sales.repositories.users import UserRepository

__all__ = [
    "AccessoryRepository", "MaterialRepository", "MultiCabRepository",
    "FilterClause", "FilterQuery", "UserRepository",
]
