"""
Material routes. All of them require a valid bearer token.
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from surplus_sales.database import get_db
from surplus_sales.permissions import authorize
from surplus_sales.repositories import MaterialRepository
from surplus_sales.repositories.base import DEFAULT_PAGE_LIMIT, page_number
from surplus_sales.schemas.common import serialize
from surplus_sales.schemas.material import Material as MaterialSchema, MaterialCreate, MaterialUpdate

router = APIRouter(prefix="/materials", tags=["materials"])


def get_repository(db: AsyncSession = Depends(get_db)) -> MaterialRepository:
    return MaterialRepository(db)


def material_filters(
    search: Optional[str] = None,
    category: Optional[str] = None,
    supplier: Optional[str] = None,
    status_filter: Optional[str] = Query(None, alias="status"),
) -> dict:
    return {"search": search, "category": category, "supplier": supplier, "status": status_filter}


@router.get("", dependencies=[Depends(authorize("materials:read"))])
async def get_materials(
    filters: dict = Depends(material_filters),
    repo: MaterialRepository = Depends(get_repository),
):
    """
    Get all materials, newest first, with optional filters.
    """
    materials = await repo.list(filters)
    return [serialize(MaterialSchema, material) for material in materials]


@router.get("/paginated", dependencies=[Depends(authorize("materials:read"))])
async def get_paginated_materials(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    filters: dict = Depends(material_filters),
    repo: MaterialRepository = Depends(get_repository),
):
    """
    Get one page of materials with the total match count.
    """
    materials, total, page, limit = await repo.paginate(
        filters, page_number(page, 1), page_number(limit, DEFAULT_PAGE_LIMIT)
    )
    return {
        "materials": [serialize(MaterialSchema, material) for material in materials],
        "total": total,
        "page": page,
        "limit": limit,
        "totalPages": (total + limit - 1) // limit,
    }


@router.get("/{material_id}", dependencies=[Depends(authorize("materials:read"))])
async def get_material(material_id: int, repo: MaterialRepository = Depends(get_repository)):
    """
    Get a specific material by ID.
    """
    material = await repo.get_by_id(material_id)
    return serialize(MaterialSchema, material)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(authorize("materials:write"))],
)
async def create_material(material: MaterialCreate, repo: MaterialRepository = Depends(get_repository)):
    """
    Create a new material.
    """
    created = await repo.create(material)
    return serialize(MaterialSchema, created)


@router.put("/{material_id}", dependencies=[Depends(authorize("materials:write"))])
async def update_material(
    material_id: int,
    material_update: MaterialUpdate,
    repo: MaterialRepository = Depends(get_repository),
):
    """
    Update a material. Fields left out of the body keep their values.
    """
    updated = await repo.update(material_id, material_update)
    return serialize(MaterialSchema, updated)


@router.delete(
    "/{material_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(authorize("materials:write"))],
)
async def delete_material(material_id: int, repo: MaterialRepository = Depends(get_repository)):
    """
    Delete a material.
    """
    await repo.delete(material_id)
    return None
