"""
User repository.
"""
import logging
from typing import List, Optional

from sqlalchemy import func, select

from surplus_sales.auth import hash_password
from surplus_sales.errors import ConflictError, NotFoundError
from surplus_sales.models.base import utcnow
from surplus_sales.models.user import User, UserRole
from surplus_sales.repositories.base import SessionRepository

logger = logging.getLogger(__name__)


class UserRepository(SessionRepository):

    async def list(self) -> List[User]:
        result = await self._execute(select(User).order_by(User.created_at.desc()))
        return list(result.scalars().all())

    async def get_by_id(self, user_id: str) -> User:
        result = await self._execute(select(User).where(User.id == user_id))
        user = result.scalar_one_or_none()
        if user is None:
            raise NotFoundError("User not found")
        return user

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self._execute(
            select(User).where(func.lower(User.email) == email.strip().lower())
        )
        return result.scalar_one_or_none()

    async def email_exists(self, email: str) -> bool:
        return await self.get_by_email(email) is not None

    async def create(self, full_name: str, email: str, password: str, role: str = UserRole.STAFF.value) -> User:
        if await self.email_exists(email):
            raise ConflictError("Email already in use")

        now = utcnow()
        user = User(
            created_at=now,
            updated_at=now,
            full_name=full_name.strip(),
            email=email.strip().lower(),
            password_hash=hash_password(password),
            role=role,
            is_active=True,
        )
        self.session.add(user)
        await self._commit()
        await self._refresh(user)
        logger.info("Registered user %s with role %s", user.id, user.role)
        return user

    async def update(self, user_id: str, changes: dict) -> User:
        """Apply profile changes; only keys present in ``changes`` are written."""
        user = await self.get_by_id(user_id)

        email = changes.get("email")
        if email is not None:
            email = email.strip().lower()
            if email != user.email and await self.email_exists(email):
                raise ConflictError("Email already in use")
            changes["email"] = email

        for field, value in changes.items():
            setattr(user, field, value)
        user.updated_at = utcnow()

        await self._commit()
        await self._refresh(user)
        return user

    async def update_password(self, user_id: str, new_password: str) -> User:
        user = await self.get_by_id(user_id)
        user.password_hash = hash_password(new_password)
        user.updated_at = utcnow()
        await self._commit()
        logger.info("Password changed for user %s", user_id)
        return user

    async def set_active(self, user_id: str, active: bool) -> User:
        user = await self.get_by_id(user_id)
        user.is_active = active
        user.updated_at = utcnow()
        await self._commit()
        await self._refresh(user)
        logger.info("User %s %s", user_id, "activated" if active else "deactivated")
        return user

    async def delete(self, user_id: str) -> None:
        user = await self.get_by_id(user_id)
        await self._run(self.session.delete(user))
        await self._commit()
        logger.info("Deleted user %s", user_id)
