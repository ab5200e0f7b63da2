"""
Pydantic schemas for User and Authentication.
"""
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional
from surplus_sales.models.user import UserRole


class UserRegister(BaseModel):
    """Schema for registering a user. Emptiness is checked by the endpoint."""
    full_name: str = Field("", validation_alias=AliasChoices("fullName", "full_name", "name"))
    email: str = ""
    password: str = ""
    role: Optional[str] = None


class LoginRequest(BaseModel):
    """Schema for login request."""
    email: str = ""
    password: str = ""


class UserUpdate(BaseModel):
    """Schema for updating a user. Only the fields sent are applied."""
    full_name: Optional[str] = Field(None, validation_alias=AliasChoices("fullName", "full_name", "name"))
    email: Optional[str] = None
    role: Optional[UserRole] = None
    is_active: Optional[bool] = Field(None, validation_alias=AliasChoices("isActive", "is_active"))


class PasswordUpdate(BaseModel):
    """Schema for setting a new password."""
    new_password: str = Field("", validation_alias=AliasChoices("newPassword", "new_password"))


class User(BaseModel):
    """Schema for user responses. The password hash is never included."""
    id: str
    full_name: str = Field(serialization_alias="fullName")
    email: str
    role: str
    is_active: bool = Field(serialization_alias="isActive")
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    model_config = ConfigDict(from_attributes=True)
