"""
Material repository.

Material filters compare case-insensitively, and a numeric search term is
treated as a material ID.
"""
from surplus_sales.models.material import Material
from surplus_sales.repositories.base import EntityRepository
from surplus_sales.repositories.query import FilterQuery


class MaterialRepository(EntityRepository):
    model = Material
    entity_name = "Material"
    query = FilterQuery(
        Material,
        filters={"category": "category", "supplier": "supplier", "status": "status"},
        search_columns=("name", "category", "supplier"),
        case_insensitive=True,
        numeric_search_matches_id=True,
    )
    required_fields = ("name", "category", "supplier")
    non_negative_fields = ("quantity",)
