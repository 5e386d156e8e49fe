# =============================================================================
# Session Tokens
# =============================================================================
#
# The session travels as a signed JWT:
#   - user identity (sub, email, name)
#   - the subscription snapshot (tier + status) used by the access checks
#
# Tokens are re-issued whenever the subscription changes, so the snapshot
# is as fresh as the last login or billing update.
#
# =============================================================================

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from membership.access.session import Session, SessionSubscription, SessionUser
from membership.access.subscription import (
    SubscriptionStatus,
    SubscriptionTier,
    parse_status,
    parse_tier,
)
from membership.config import Settings, get_settings
from membership.ids import generate_id, utc_now

logger = logging.getLogger(__name__)

TOKEN_TYPE = "session"


class TokenError(Exception):
    """Base exception for token errors."""
    pass


class TokenExpiredError(TokenError):
    """Token has expired."""
    pass


class TokenInvalidError(TokenError):
    """Token is invalid or malformed."""
    pass


def create_session_token(
    user_id: str,
    email: str | None = None,
    name: str | None = None,
    tier: SubscriptionTier | str | None = None,
    status: SubscriptionStatus | str | None = None,
    settings: Settings | None = None,
) -> str:
    """Create a signed session token carrying the subscription snapshot."""
    settings = settings or get_settings()
    now = utc_now()
    expire = now + timedelta(minutes=settings.session_token_expire_minutes)

    payload: dict[str, Any] = {
        "sub": user_id,
        "exp": expire,
        "iat": now,
        "type": TOKEN_TYPE,
        "jti": generate_id("tok"),
    }
    if email:
        payload["email"] = email
    if name:
        payload["name"] = name

    tier = parse_tier(tier)
    status = parse_status(status)
    if tier is not None or status is not None:
        payload["subscription"] = {
            "tier": tier.value if tier else None,
            "status": status.value if status else None,
        }

    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_session_token(token: str, settings: Settings | None = None) -> Session:
    """
    Decode and validate a session token.

    Raises:
        TokenExpiredError: Token has expired
        TokenInvalidError: Token is invalid, or isn't a session token
    """
    settings = settings or get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        raise TokenExpiredError("Token has expired")
    except jwt.InvalidTokenError as e:
        raise TokenInvalidError(f"Invalid token: {e}")

    if payload.get("type") != TOKEN_TYPE:
        raise TokenInvalidError(f"Expected {TOKEN_TYPE} token, got {payload.get('type')}")
    if not payload.get("sub"):
        raise TokenInvalidError("Token has no subject")

    subscription = None
    claim = payload.get("subscription")
    if isinstance(claim, dict):
        tier = parse_tier(claim.get("tier"))
        status = parse_status(claim.get("status"))
        if claim.get("tier") and tier is None:
            logger.warning(f"Ignoring unknown subscription tier in token: {claim.get('tier')}")
        subscription = SessionSubscription(tier=tier, status=status)

    return Session(
        user=SessionUser(
            id=payload["sub"],
            email=payload.get("email"),
            name=payload.get("name"),
            subscription=subscription,
        ),
        expires=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        metadata={"jti": payload.get("jti", "")},
    )
