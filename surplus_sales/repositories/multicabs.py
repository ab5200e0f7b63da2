"""
MultiCab repository.
"""
from surplus_sales.models.multicab import MultiCab
from surplus_sales.repositories.base import EntityRepository
from surplus_sales.repositories.query import FilterQuery


class MultiCabRepository(EntityRepository):
    model = MultiCab
    entity_name = "Cab"
    query = FilterQuery(
        MultiCab,
        filters={"make": "make", "unit_color": "unit_color", "status": "status"},
        search_columns=("name", "make"),
    )
    required_fields = ("name", "make", "unit_color")
    non_negative_fields = ("quantity", "price")
