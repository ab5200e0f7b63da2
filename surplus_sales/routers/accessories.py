"""
Accessory routes.
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from surplus_sales.database import get_db
from surplus_sales.errors import success_body
from surplus_sales.permissions import authorize
from surplus_sales.repositories import AccessoryRepository
from surplus_sales.schemas.accessory import Accessory as AccessorySchema, AccessoryCreate, AccessoryUpdate
from surplus_sales.schemas.common import serialize

router = APIRouter(prefix="/accessories", tags=["accessories"])


def get_repository(db: AsyncSession = Depends(get_db)) -> AccessoryRepository:
    return AccessoryRepository(db)


@router.get("", dependencies=[Depends(authorize("accessories:read"))])
async def get_accessories(
    make: Optional[str] = None,
    status_filter: Optional[str] = Query(None, alias="status"),
    unit_color: Optional[str] = None,
    search: Optional[str] = None,
    repo: AccessoryRepository = Depends(get_repository),
):
    """
    Get all accessories, newest first, with optional filters.
    """
    accessories = await repo.list(
        {"make": make, "status": status_filter, "unit_color": unit_color, "search": search}
    )
    return {
        "data": [serialize(AccessorySchema, accessory) for accessory in accessories],
        "count": len(accessories),
    }


@router.get("/{accessory_id}", dependencies=[Depends(authorize("accessories:read"))])
async def get_accessory(accessory_id: int, repo: AccessoryRepository = Depends(get_repository)):
    """
    Get a specific accessory by ID.
    """
    accessory = await repo.get_by_id(accessory_id)
    return serialize(AccessorySchema, accessory)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(authorize("accessories:write"))],
)
async def create_accessory(accessory: AccessoryCreate, repo: AccessoryRepository = Depends(get_repository)):
    """
    Create a new accessory.
    """
    created = await repo.create(accessory)
    return success_body("Accessory created successfully", serialize(AccessorySchema, created))


@router.put("/{accessory_id}", dependencies=[Depends(authorize("accessories:write"))])
async def update_accessory(
    accessory_id: int,
    accessory_update: AccessoryUpdate,
    repo: AccessoryRepository = Depends(get_repository),
):
    """
    Update an accessory. Fields left out of the body keep their values.
    """
    updated = await repo.update(accessory_id, accessory_update)
    return success_body("Accessory updated successfully", serialize(AccessorySchema, updated))


@router.delete(
    "/{accessory_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(authorize("accessories:write"))],
)
async def delete_accessory(accessory_id: int, repo: AccessoryRepository = Depends(get_repository)):
    """
    Delete an accessory.
    """
    await repo.delete(accessory_id)
    return None
