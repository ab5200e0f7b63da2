"""
Surplus Sales inventory and user management API.
"""
__version__ = "1.0.0"
