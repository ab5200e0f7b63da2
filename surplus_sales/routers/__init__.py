"""
API routers.
"""
from surplus_sales.routers import accessories, cabs, materials, users

__all__ = ["accessories", "cabs", "materials", "users"]
