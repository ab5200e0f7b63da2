"""
Authentication: password hashing, JWT issue/verification and login.
"""
import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError, jwt

from surplus_sales.config import get_settings
from surplus_sales.errors import (
    AuthenticationError,
    AuthFailure,
    InactiveAccountError,
    ValidationError,
)

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

# bcrypt only looks at the first 72 bytes of a password.
BCRYPT_MAX_BYTES = 72


@dataclass(frozen=True)
class Principal:
    """Identity decoded from a verified access token."""

    user_id: str
    email: Optional[str]
    role: str


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash or over-long password.
        return False


def validate_password(password: Optional[str]) -> str:
    """Validate password strength."""
    min_length = get_settings().password_min_length
    if not password:
        raise ValidationError("Password is required")
    if len(password) < min_length:
        raise ValidationError(f"Password must be at least {min_length} characters long")
    if len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
        raise ValidationError(f"Password must not exceed {BCRYPT_MAX_BYTES} bytes")
    if not re.search(r"[A-Z]", password):
        raise ValidationError("Password must contain at least one uppercase letter")
    if not re.search(r"[a-z]", password):
        raise ValidationError("Password must contain at least one lowercase letter")
    if not re.search(r"\d", password):
        raise ValidationError("Password must contain at least one number")
    return password


def create_access_token(user, expires_delta: Optional[timedelta] = None) -> str:
    """Issue a signed token carrying the user's id and role."""
    settings = get_settings()
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    claims = {
        "sub": str(user.id),
        "email": user.email,
        "role": user.role,
        "iat": int(now.timestamp()),
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(claims, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> Principal:
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except ExpiredSignatureError:
        raise AuthenticationError("Token has expired")
    except JWTError as exc:
        logger.info("Rejected token: %s", exc)
        raise AuthenticationError("Invalid or malformed JWT")

    user_id = payload.get("sub")
    role = payload.get("role")
    if not user_id or not role or "exp" not in payload:
        raise AuthenticationError("Invalid token claims")
    return Principal(user_id=user_id, email=payload.get("email"), role=role)


def principal_from_credentials(credentials: Optional[HTTPAuthorizationCredentials]) -> Principal:
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Missing or malformed JWT (Bearer token required)")
    return decode_access_token(credentials.credentials)


async def authenticate(users, email: str, password: str):
    """Return the user for valid credentials.

    Unknown email and wrong password both surface as "Invalid credentials";
    the reason code is kept on the exception for logging.
    """
    user = await users.get_by_email(email)
    if user is None:
        logger.warning("Login failed for %s: %s", email, AuthFailure.UNKNOWN_EMAIL.value)
        raise AuthenticationError("Invalid credentials", reason=AuthFailure.UNKNOWN_EMAIL)

    if not verify_password(password, user.password_hash):
        logger.warning("Login failed for %s: %s", email, AuthFailure.WRONG_PASSWORD.value)
        raise AuthenticationError("Invalid credentials", reason=AuthFailure.WRONG_PASSWORD)

    if not user.is_active:
        logger.warning("Login failed for %s: %s", email, AuthFailure.INACTIVE.value)
        raise InactiveAccountError()

    return user
