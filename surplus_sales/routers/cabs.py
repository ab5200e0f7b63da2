"""
MultiCab routes.
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from surplus_sales.database import get_db
from surplus_sales.permissions import authorize
from surplus_sales.repositories import MultiCabRepository
from surplus_sales.schemas.common import serialize
from surplus_sales.schemas.multicab import MultiCab as MultiCabSchema, MultiCabCreate, MultiCabUpdate

router = APIRouter(prefix="/cabs", tags=["cabs"])


def get_repository(db: AsyncSession = Depends(get_db)) -> MultiCabRepository:
    return MultiCabRepository(db)


@router.get("", dependencies=[Depends(authorize("cabs:read"))])
async def get_cabs(
    make: Optional[str] = None,
    status_filter: Optional[str] = Query(None, alias="status"),
    unit_color: Optional[str] = None,
    search: Optional[str] = None,
    repo: MultiCabRepository = Depends(get_repository),
):
    """
    Get all cabs, newest first, with optional filters.
    """
    cabs = await repo.list({"make": make, "status": status_filter, "unit_color": unit_color, "search": search})
    return [serialize(MultiCabSchema, cab) for cab in cabs]


@router.get("/{cab_id}", dependencies=[Depends(authorize("cabs:read"))])
async def get_cab(cab_id: int, repo: MultiCabRepository = Depends(get_repository)):
    """
    Get a specific cab by ID.
    """
    cab = await repo.get_by_id(cab_id)
    return serialize(MultiCabSchema, cab)


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(authorize("cabs:write"))])
async def create_cab(cab: MultiCabCreate, repo: MultiCabRepository = Depends(get_repository)):
    """
    Add a new cab.
    """
    created = await repo.create(cab)
    return serialize(MultiCabSchema, created)


@router.put("/{cab_id}", dependencies=[Depends(authorize("cabs:write"))])
async def update_cab(
    cab_id: int,
    cab_update: MultiCabUpdate,
    repo: MultiCabRepository = Depends(get_repository),
):
    """
    Update a cab. Fields left out of the body keep their values.
    """
    updated = await repo.update(cab_id, cab_update)
    return serialize(MultiCabSchema, updated)


@router.delete(
    "/{cab_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(authorize("cabs:write"))],
)
async def delete_cab(cab_id: int, repo: MultiCabRepository = Depends(get_repository)):
    """
    Delete a cab.
    """
    await repo.delete(cab_id)
    return None
