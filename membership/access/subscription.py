"""
Subscription tiers and statuses.

This defines WHAT a subscription can be, not HOW access is decided.
The decisions live in strategies.py.

Tier and status are always optional at the boundaries: a visitor without
a session (or a session without a subscription) has neither, and that is
NOT the same thing as the FREE tier.
"""

from __future__ import annotations

from enum import Enum


class SubscriptionTier(str, Enum):
    """Platform-wide subscription tier."""

    FREE = "FREE"
    PREMIUM = "PREMIUM"


class SubscriptionStatus(str, Enum):
    """Lifecycle state of a subscription (mirrors the billing provider)."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    CANCELED = "CANCELED"
    PAST_DUE = "PAST_DUE"


def parse_tier(value) -> SubscriptionTier | None:
    """Coerce a raw tier value (exact match only); anything else becomes None."""
    if value is None or isinstance(value, SubscriptionTier):
        return value
    try:
        return SubscriptionTier(value)
    except ValueError:
        return None


def parse_status(value) -> SubscriptionStatus | None:
    """Coerce a raw status value (exact match only); anything else becomes None."""
    if value is None or isinstance(value, SubscriptionStatus):
        return value
    try:
        return SubscriptionStatus(value)
    except ValueError:
        return None


def is_premium_active(
    tier: SubscriptionTier | str | None,
    status: SubscriptionStatus | str | None,
) -> bool:
    """Is this an active premium subscription?"""
    return tier == SubscriptionTier.PREMIUM and status == SubscriptionStatus.ACTIVE


def has_access(
    tier: SubscriptionTier | str | None,
    status: SubscriptionStatus | str | None,
    requires_premium: bool,
) -> bool:
    """Can a subscription reach a resource that may require premium?"""
    if not requires_premium:
        return True
    return is_premium_active(tier, status)
