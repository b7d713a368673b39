# task_tracker/utils/auth.py
"""
Request authentication and role gating.

`authenticate` is mounted as a router-level dependency on every protected
router: it resolves the bearer token to a live user and attaches an
`IdentityContext` to `request.state`. `require_roles(...)` builds a gate that
only reads that context, so gates compose in any order.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from fastapi import Header, Request

from task_tracker.exceptions import (
    Forbidden,
    InvalidToken,
    Unauthenticated,
    UnauthenticatedReason,
)
from task_tracker.models.user import Role

logger = logging.getLogger(__name__)

INVALID_TOKEN_MESSAGE = "Invalid or expired token"


@dataclass(frozen=True)
class IdentityContext:
    """Who is making the current request. Lives for one request only."""

    user_id: int
    role: Role
    employee_id: Optional[int] = None


def get_container(request: Request):
    return request.app.state.container


def _bearer_token(authorization: Optional[str]) -> str:
    if not authorization:
        raise Unauthenticated(UnauthenticatedReason.MISSING, "No token provided")

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise Unauthenticated(UnauthenticatedReason.MALFORMED, "Invalid token format")
    return parts[1]


def authenticate(
    request: Request,
    authorization: Optional[str] = Header(default=None),
) -> IdentityContext:
    token = _bearer_token(authorization)
    container = get_container(request)

    try:
        user_id = container.tokens.verify(token)
    except InvalidToken:
        raise Unauthenticated(UnauthenticatedReason.INVALID, INVALID_TOKEN_MESSAGE) from None

    user = container.credentials.get(user_id)
    # A deactivated account looks exactly like a bad token to the caller
    if user is None or not user.is_active:
        logger.info("Token for unknown or inactive user id=%s rejected", user_id)
        raise Unauthenticated(UnauthenticatedReason.INVALID, INVALID_TOKEN_MESSAGE)

    identity = IdentityContext(user_id=user.id, role=Role(user.role), employee_id=user.employee_id)
    request.state.identity = identity
    return identity


def current_identity(request: Request) -> IdentityContext:
    identity = getattr(request.state, "identity", None)
    if identity is None:
        raise Unauthenticated(UnauthenticatedReason.NO_IDENTITY, "Authentication required")
    return identity


def require_roles(*roles: Role) -> Callable[[Request], IdentityContext]:
    """Build a dependency that only lets the given roles through"""
    if not roles:
        raise ValueError("require_roles needs at least one role")
    allowed = tuple(dict.fromkeys(Role(role) for role in roles))

    def role_gate(request: Request) -> IdentityContext:
        identity = current_identity(request)
        if identity.role not in allowed:
            raise Forbidden(
                required_roles=[role.value for role in allowed],
                user_role=identity.role.value,
            )
        return identity

    return role_gate
