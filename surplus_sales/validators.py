"""
Input validation helpers shared by the user endpoints.
"""
import re
from typing import Iterable, Mapping

from surplus_sales.errors import ValidationError
from surplus_sales.models.user import UserRole

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def validate_required_fields(data: Mapping, required_fields: Iterable[str], labels: Mapping[str, str] = None) -> None:
    """Check if all required fields are present and non-blank."""
    labels = labels or {}
    missing = [labels.get(field, field) for field in required_fields if not str(data.get(field) or "").strip()]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")


def validate_email(email: str) -> str:
    """Validate email format"""
    if not email:
        raise ValidationError("Email is required")
    email = email.strip().lower()
    if not EMAIL_PATTERN.match(email):
        raise ValidationError("Invalid email format")
    return email


def validate_role(role: str) -> str:
    allowed = [r.value for r in UserRole]
    if role not in allowed:
        raise ValidationError(f"Role must be one of: {', '.join(allowed)}")
    return role
