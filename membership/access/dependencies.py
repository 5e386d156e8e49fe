"""
FastAPI dependencies - access checks for route handlers.

Usage:
    @app.get("/courses/{course_id}/lessons")
    async def lessons(course_id: str, session: Session = Depends(require_premium())):
        ...

    @app.get("/events")
    async def events(session: Session | None = Depends(get_session)):
        return filter_by_access(all_events, session)

- `get_session` resolves to a Session or None (never fails)
- `require_session()` raises 401 when anonymous
- `require_premium()` / `require_access(...)` raise 403 when denied
"""

from __future__ import annotations

import logging
from typing import Callable

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from membership.access.service import get_authorization_service
from membership.access.session import Session, subscription_of
from membership.access.strategies import ResourceRequirements
from membership.access.tokens import TokenError, decode_session_token
from membership.access.utils import has_premium_access

logger = logging.getLogger(__name__)

PREMIUM_REQUIRED = "Premium subscription required"

# Optional bearer (doesn't fail if no token)
optional_bearer = HTTPBearer(auto_error=False)


async def get_session(
    credentials: HTTPAuthorizationCredentials | None = Depends(optional_bearer),
) -> Session | None:
    """Resolve the session from the bearer token, if any."""
    if not credentials:
        return None
    try:
        return decode_session_token(credentials.credentials)
    except TokenError as e:
        logger.info(f"Rejected session token: {e}")
        return None


def require_session() -> Callable:
    """Require a logged-in user."""

    async def dependency(session: Session | None = Depends(get_session)) -> Session:
        if session is None or not session.is_authenticated:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
        return session

    return dependency


def require_premium() -> Callable:
    """Require an active premium subscription."""

    async def dependency(session: Session = Depends(require_session())) -> Session:
        if not has_premium_access(session):
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=PREMIUM_REQUIRED)
        return session

    return dependency


def require_access(
    requirements: ResourceRequirements,
    strategy_name: str | None = None,
) -> Callable:
    """
    Require the session to satisfy arbitrary requirements.

    Anonymous callers are evaluated with no tier and no status, so they
    pass only unconstrained requirements.
    """

    async def dependency(session: Session | None = Depends(get_session)) -> Session | None:
        tier, sub_status = subscription_of(session)
        service = get_authorization_service()
        if not service.can_access(tier, sub_status, requirements, strategy_name):
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")
        return session

    return dependency
