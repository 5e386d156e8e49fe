"""
Access control - who may see which events, courses, and services.

Design:
1. Strategies decide (pure functions of tier + status + requirements)
2. The authorization service picks a strategy by name
3. Session helpers apply the default strategy to a request's session
"""

from membership.access.subscription import (
    SubscriptionTier,
    SubscriptionStatus,
    has_access,
    is_premium_active,
)
from membership.access.strategies import (
    PermissionStrategy,
    PremiumAccessStrategy,
    FreeAccessStrategy,
    TierBasedStrategy,
    ResourceRequirements,
)
from membership.access.service import (
    AuthorizationService,
    build_authorization_service,
    get_authorization_service,
    set_authorization_service,
    reset_authorization_service,
)
from membership.access.session import (
    Session,
    SessionUser,
    SessionSubscription,
    subscription_of,
)
from membership.access.utils import (
    check_resource_access,
    has_premium_access,
    filter_by_access,
    ensure_resource_access,
)

__all__ = [
    # Subscription
    "SubscriptionTier",
    "SubscriptionStatus",
    "has_access",
    "is_premium_active",
    # Strategies
    "PermissionStrategy",
    "PremiumAccessStrategy",
    "FreeAccessStrategy",
    "TierBasedStrategy",
    "ResourceRequirements",
    # Service
    "AuthorizationService",
    "build_authorization_service",
    "get_authorization_service",
    "set_authorization_service",
    "reset_authorization_service",
    # Session
    "Session",
    "SessionUser",
    "SessionSubscription",
    "subscription_of",
    # Helpers
    "check_resource_access",
    "has_premium_access",
    "filter_by_access",
    "ensure_resource_access",
]
