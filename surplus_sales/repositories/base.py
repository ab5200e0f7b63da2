"""
Repository base classes.

Every statement runs under a deadline so a stalled database cannot hold a
request open indefinitely; cancelling the request cancels the statement too.
"""
import asyncio
import logging
from typing import Any, List, Mapping, Optional, Union

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from surplus_sales.config import get_settings
from surplus_sales.errors import NotFoundError, StoreTimeoutError, ValidationError
from surplus_sales.models.base import utcnow
from surplus_sales.repositories.query import FilterQuery

logger = logging.getLogger(__name__)

MAX_PAGE_LIMIT = 100
DEFAULT_PAGE_LIMIT = 10


def page_number(value: Optional[str], default: int) -> int:
    """Parse a page or limit query value; anything that is not an integer means ``default``."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


Payload = Union[BaseModel, Mapping[str, Any]]


def payload_values(payload: Payload, *, partial: bool) -> dict:
    """Field values of a request payload; partial payloads keep only fields that were sent."""
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", exclude_unset=partial)
    return dict(payload)


class SessionRepository:
    """Session wrapper that applies the statement timeout."""

    def __init__(self, session: AsyncSession, timeout: Optional[float] = None):
        self.session = session
        self.timeout = timeout if timeout is not None else get_settings().db_statement_timeout

    async def _run(self, awaitable):
        try:
            return await asyncio.wait_for(awaitable, self.timeout)
        except asyncio.TimeoutError:
            logger.error("Database call exceeded %.1fs", self.timeout)
            raise StoreTimeoutError()

    async def _execute(self, statement):
        return await self._run(self.session.execute(statement))

    async def _commit(self) -> None:
        await self._run(self.session.commit())

    async def _refresh(self, instance) -> None:
        await self._run(self.session.refresh(instance))


class EntityRepository(SessionRepository):
    """CRUD over one inventory model, configured by class attributes."""

    model = None
    entity_name = "Record"
    query: FilterQuery = None
    required_fields: tuple[str, ...] = ()
    non_negative_fields: tuple[str, ...] = ()

    async def list(self, filters: Optional[Mapping[str, Any]] = None) -> list:
        result = await self._execute(self.query.select(filters))
        return list(result.scalars().all())

    async def paginate(
        self,
        filters: Optional[Mapping[str, Any]] = None,
        page: int = 1,
        limit: int = DEFAULT_PAGE_LIMIT,
    ) -> tuple[List, int, int, int]:
        """Return ``(items, total, page, limit)`` with page and limit clamped."""
        page = max(page, 1)
        if limit < 1:
            limit = DEFAULT_PAGE_LIMIT
        limit = min(limit, MAX_PAGE_LIMIT)

        total = (await self._execute(self.query.count(filters))).scalar_one()
        offset = (page - 1) * limit
        if offset >= total:
            # Past the last match.
            return [], total, page, limit
        statement = self.query.select(filters).offset(offset).limit(limit)
        result = await self._execute(statement)
        return list(result.scalars().all()), total, page, limit

    async def get_by_id(self, entity_id: int):
        result = await self._execute(select(self.model).where(self.model.id == entity_id))
        instance = result.scalar_one_or_none()
        if instance is None:
            raise NotFoundError(f"{self.entity_name} with ID {entity_id} not found")
        return instance

    async def create(self, payload: Payload):
        values = self.prepare_create(payload_values(payload, partial=False))
        self.validate(values)

        values["created_at"] = values["updated_at"] = utcnow()
        instance = self.model(**values)
        self.session.add(instance)
        await self._commit()
        await self._refresh(instance)
        logger.info("Created %s %s", self.entity_name.lower(), instance.id)
        return instance

    async def update(self, entity_id: int, payload: Payload):
        instance = await self.get_by_id(entity_id)
        changes = self.prepare_update(instance, payload_values(payload, partial=True))

        merged = {column: getattr(instance, column) for column in self._columns()}
        merged.update(changes)
        self.validate(merged)

        for field, value in changes.items():
            setattr(instance, field, value)
        instance.updated_at = utcnow()

        await self._commit()
        await self._refresh(instance)
        logger.info("Updated %s %s (%s)", self.entity_name.lower(), entity_id, ", ".join(changes) or "no fields")
        return instance

    async def delete(self, entity_id: int) -> None:
        instance = await self.get_by_id(entity_id)
        await self._run(self.session.delete(instance))
        await self._commit()
        logger.info("Deleted %s %s", self.entity_name.lower(), entity_id)

    def validate(self, values: Mapping[str, Any]) -> None:
        """Reject records with blank required text or negative amounts."""
        missing = [
            field for field in self.required_fields
            if values.get(field) is None or not str(values.get(field)).strip()
        ]
        if missing:
            raise ValidationError(
                f"Missing required fields: {', '.join(missing)}",
                status_code=422,
            )
        for field in self.non_negative_fields:
            value = values.get(field)
            if value is not None and value < 0:
                raise ValidationError(f"{field} must be non-negative", status_code=422)

    def prepare_create(self, values: dict) -> dict:
        if "image" in values:
            values["image"] = normalize_image(values["image"])
        return values

    def prepare_update(self, instance, changes: dict) -> dict:
        # An explicit null only clears nullable columns; elsewhere it means "unchanged".
        nullable = {column.key for column in self.model.__table__.columns if column.nullable}
        changes = {field: value for field, value in changes.items() if value is not None or field in nullable}
        if "image" in changes:
            changes["image"] = normalize_image(changes["image"])
        return changes

    def _columns(self) -> List[str]:
        return [column.key for column in self.model.__table__.columns]


def normalize_image(image: Optional[str]) -> Optional[str]:
    """Store NULL for missing images and for the default placeholder."""
    if image is None or image in ("", "null") or image == get_settings().default_image_url:
        return None
    return image
