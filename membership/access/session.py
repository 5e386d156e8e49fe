"""
Session shape consumed by the access checks.

The session is produced elsewhere (login, token decoding) and looks like
`session.user.subscription.tier` / `.status`. Every level may be missing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping

from membership.access.subscription import (
    SubscriptionStatus,
    SubscriptionTier,
    parse_status,
    parse_tier,
)


@dataclass
class SessionSubscription:
    tier: SubscriptionTier | None = None
    status: SubscriptionStatus | None = None


@dataclass
class SessionUser:
    id: str
    email: str | None = None
    name: str | None = None
    subscription: SessionSubscription | None = None


@dataclass
class Session:
    """An authenticated user's session."""

    user: SessionUser | None = None
    expires: datetime | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def subscription(self) -> SessionSubscription | None:
        return self.user.subscription if self.user else None


def _field(obj: Any, key: str) -> Any:
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def subscription_of(
    session: Session | Mapping[str, Any] | None,
) -> tuple[SubscriptionTier | None, SubscriptionStatus | None]:
    """
    Extract (tier, status) from a session.

    Accepts a Session, a mapping with the same nesting (decoded claims),
    or None. Anything missing comes back as None.
    """
    subscription = _field(_field(session, "user"), "subscription")
    return (
        parse_tier(_field(subscription, "tier")),
        parse_status(_field(subscription, "status")),
    )
