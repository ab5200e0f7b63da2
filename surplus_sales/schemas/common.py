"""
Response envelopes shared by all endpoints.
"""
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from surplus_sales.config import get_settings


class ErrorResponse(BaseModel):
    error: str
    message: str
    status_code: int = Field(serialization_alias="statusCode")
    timestamp: str


class SuccessResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: Optional[Any] = None
    timestamp: str


class InventoryRecord(BaseModel):
    """Fields every inventory record carries in responses."""
    id: int
    image: str
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    @field_validator("image", mode="before")
    @classmethod
    def default_image(cls, value):
        return value or get_settings().default_image_url


def serialize(schema: type[BaseModel], instance) -> dict:
    """Render an ORM instance through a response schema using wire field names."""
    return schema.model_validate(instance).model_dump(mode="json", by_alias=True)
