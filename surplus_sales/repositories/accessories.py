"""
Accessory repository.
"""
from surplus_sales.models.accessory import Accessory, status_for_quantity
from surplus_sales.repositories.base import EntityRepository
from surplus_sales.repositories.query import FilterQuery


class AccessoryRepository(EntityRepository):
    model = Accessory
    entity_name = "Accessory"
    query = FilterQuery(
        Accessory,
        filters={"make": "make", "status": "status", "unit_color": "unit_color"},
        search_columns=("name", "make"),
    )
    required_fields = ("name", "make", "unit_color")
    non_negative_fields = ("quantity", "price")

    def prepare_create(self, values: dict) -> dict:
        values = super().prepare_create(values)
        if not values.get("status"):
            values["status"] = status_for_quantity(values.get("quantity") or 0).value
        return values

    def prepare_update(self, instance, changes: dict) -> dict:
        changes = super().prepare_update(instance, changes)
        if changes.get("quantity") is not None and not changes.get("status"):
            changes["status"] = status_for_quantity(changes["quantity"]).value
        return changes
