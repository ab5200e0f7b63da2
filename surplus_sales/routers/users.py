"""
User routes: registration, login and account management.
"""
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from surplus_sales.auth import Principal, authenticate, create_access_token, validate_password
from surplus_sales.database import get_db
from surplus_sales.errors import PermissionDeniedError, ValidationError, success_body
from surplus_sales.permissions import authorize
from surplus_sales.repositories import UserRepository
from surplus_sales.schemas.common import serialize
from surplus_sales.schemas.user import (
    LoginRequest,
    PasswordUpdate,
    User as UserSchema,
    UserRegister,
    UserUpdate,
)
from surplus_sales.validators import validate_email, validate_required_fields, validate_role

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


def get_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(payload: UserRegister, users: UserRepository = Depends(get_repository)):
    """
    Register a new user and return an access token.
    """
    validate_required_fields(
        payload.model_dump(),
        ("full_name", "email", "password"),
        labels={"full_name": "fullName"},
    )
    email = validate_email(payload.email)
    role = validate_role(payload.role or "staff")
    validate_password(payload.password)

    user = await users.create(payload.full_name, email, payload.password, role)
    return {
        "message": "User registered successfully",
        "user": serialize(UserSchema, user),
        "token": create_access_token(user),
    }


@router.post("/login")
async def login(payload: LoginRequest, users: UserRepository = Depends(get_repository)):
    """
    Authenticate with email and password.
    """
    validate_required_fields(payload.model_dump(), ("email", "password"))
    user = await authenticate(users, payload.email, payload.password)
    logger.info("User %s logged in", user.id)
    return {
        "message": "Login successful",
        "user": serialize(UserSchema, user),
        "token": create_access_token(user),
    }


@router.get("")
async def get_users(
    users: UserRepository = Depends(get_repository),
    principal: Principal = Depends(authorize("users:list")),
):
    """
    Get all users, newest first.
    """
    return {"users": [serialize(UserSchema, user) for user in await users.list()]}


@router.get("/me")
async def get_me(
    users: UserRepository = Depends(get_repository),
    principal: Principal = Depends(authorize("users:read")),
):
    """
    Get the authenticated user.
    """
    user = await users.get_by_id(principal.user_id)
    return {"user": serialize(UserSchema, user)}


@router.get("/{user_id}")
async def get_user(
    user_id: str,
    users: UserRepository = Depends(get_repository),
    principal: Principal = Depends(authorize("users:read")),
):
    """
    Get a specific user by ID.
    """
    user = await users.get_by_id(user_id)
    return {"user": serialize(UserSchema, user)}


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    user_update: UserUpdate,
    users: UserRepository = Depends(get_repository),
    principal: Principal = Depends(authorize("users:update")),
):
    """
    Update a user's profile. Fields left out of the body keep their values.
    """
    changes = user_update.model_dump(mode="json", exclude_unset=True)
    changes = {field: value for field, value in changes.items() if value is not None}
    if "full_name" in changes:
        if not changes["full_name"].strip():
            raise ValidationError("fullName must not be blank")
        changes["full_name"] = changes["full_name"].strip()
    if "email" in changes:
        changes["email"] = validate_email(changes["email"])

    existing = await users.get_by_id(user_id)
    if not existing.is_active:
        logger.warning("Update attempt for inactive user %s", user_id)
        raise PermissionDeniedError("Account is inactive")

    user = await users.update(user_id, changes)
    return {"message": "User updated successfully", "user": serialize(UserSchema, user)}


@router.delete("/{user_id}")
async def delete_user(
    user_id: str,
    users: UserRepository = Depends(get_repository),
    principal: Principal = Depends(authorize("users:delete")),
):
    """
    Permanently delete a user.
    """
    await users.delete(user_id)
    return success_body("User deleted successfully")


@router.put("/{user_id}/activate")
async def activate_user(
    user_id: str,
    users: UserRepository = Depends(get_repository),
    principal: Principal = Depends(authorize("users:activate")),
):
    """
    Re-enable login for a user.
    """
    user = await users.set_active(user_id, True)
    return success_body("User activated successfully", serialize(UserSchema, user))


@router.put("/{user_id}/deactivate")
async def deactivate_user(
    user_id: str,
    users: UserRepository = Depends(get_repository),
    principal: Principal = Depends(authorize("users:deactivate")),
):
    """
    Disable login for a user without deleting the account.
    """
    user = await users.set_active(user_id, False)
    return success_body("User deactivated successfully", serialize(UserSchema, user))


@router.put("/{user_id}/password")
async def update_password(
    user_id: str,
    payload: PasswordUpdate,
    users: UserRepository = Depends(get_repository),
    principal: Principal = Depends(authorize("users:password")),
):
    """
    Set a new password for a user.
    """
    validate_password(payload.new_password)

    user = await users.get_by_id(user_id)
    if not user.is_active:
        logger.warning("Password update attempt for inactive user %s", user_id)
        raise PermissionDeniedError("Account is inactive")

    await users.update_password(user_id, payload.new_password)
    return success_body("Password updated successfully")
