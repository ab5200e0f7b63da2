"""
Route access policies.

Each guarded route names an action; the table below says who may perform it.
``authorize(action)`` is the single gate that enforces the table.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials

from surplus_sales.auth import Principal, bearer_scheme, principal_from_credentials
from surplus_sales.errors import PermissionDeniedError
from surplus_sales.models.user import UserRole

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Policy:
    authenticated: bool = True
    # None means any authenticated role.
    roles: Optional[frozenset[str]] = None
    # Allow the user named by the ``user_id`` path parameter.
    allow_owner: bool = False


PUBLIC = Policy(authenticated=False)
AUTHENTICATED = Policy()
MANAGERS = Policy(roles=frozenset({UserRole.ADMIN.value, UserRole.STAFF.value}))

POLICIES: dict[str, Policy] = {
    "users:register": PUBLIC,
    "users:login": PUBLIC,
    "users:list": AUTHENTICATED,
    "users:read": AUTHENTICATED,
    "users:update": MANAGERS,
    "users:delete": MANAGERS,
    "users:activate": MANAGERS,
    "users:deactivate": MANAGERS,
    "users:password": Policy(roles=MANAGERS.roles, allow_owner=True),
    "accessories:read": PUBLIC,
    "accessories:write": PUBLIC,
    "materials:read": AUTHENTICATED,
    "materials:write": AUTHENTICATED,
    "cabs:read": PUBLIC,
    "cabs:write": PUBLIC,
}


def check_policy(policy: Policy, principal: Principal, owner_id: Optional[str] = None) -> None:
    if policy.roles is None or principal.role in policy.roles:
        return
    if policy.allow_owner and owner_id is not None and owner_id == principal.user_id:
        return
    logger.warning("Permission denied for user %s with role %s", principal.user_id, principal.role)
    raise PermissionDeniedError("You do not have permission to perform this action")


def authorize(action: str):
    """Dependency enforcing the policy registered for ``action``."""
    policy = POLICIES[action]

    if not policy.authenticated:
        async def allow_anyone() -> Optional[Principal]:
            return None
        return allow_anyone

    async def require_policy(
        request: Request,
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    ) -> Principal:
        principal = principal_from_credentials(credentials)
        request.state.principal = principal
        check_policy(policy, principal, request.path_params.get("user_id"))
        return principal

    return require_policy
