"""
Permission strategies - pluggable access decisions.

A strategy answers one question: given a subscription tier and status,
may the caller reach a resource with these requirements?

Strategies are stateless and pure. They never raise for a missing tier or
status; a missing value simply fails any premium or tier check.

Example:
    class StaffOnlyStrategy(PermissionStrategy):
        name = "staff-only"

        def can_access(self, tier=None, status=None, requirements=None) -> bool:
            return False
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional

from membership.access.subscription import (
    SubscriptionStatus,
    SubscriptionTier,
    is_premium_active,
)


CustomCheck = Callable[
    [Optional[SubscriptionTier], Optional[SubscriptionStatus]], bool
]


@dataclass(frozen=True)
class ResourceRequirements:
    """
    What a protected resource demands.

    Every field is optional; None means "no constraint". Conflicting fields
    are not validated, each strategy applies its own precedence.
    """

    requires_premium: bool | None = None
    required_tier: SubscriptionTier | None = None
    custom_check: CustomCheck | None = None


# =============================================================================
# Base
# =============================================================================


class PermissionStrategy(ABC):
    """Base class for all permission strategies."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name, used as the registry key."""
        pass

    @abstractmethod
    def can_access(
        self,
        tier: SubscriptionTier | None = None,
        status: SubscriptionStatus | None = None,
        requirements: ResourceRequirements | None = None,
    ) -> bool:
        """Decide whether the subscription may access the resource."""
        pass

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(name={self.name})>"


def _requires_premium(requirements: ResourceRequirements | None) -> bool:
    return bool(requirements is not None and requirements.requires_premium)


# =============================================================================
# Built-in strategies
# =============================================================================


class PremiumAccessStrategy(PermissionStrategy):
    """
    Grants premium resources to active premium subscribers.

    This is the system default.
    """

    @property
    def name(self) -> str:
        return "premium-access"

    def can_access(self, tier=None, status=None, requirements=None) -> bool:
        if not _requires_premium(requirements):
            return True
        return is_premium_active(tier, status)


class FreeAccessStrategy(PermissionStrategy):
    """Only free resources; never grants premium, whatever the subscription."""

    @property
    def name(self) -> str:
        return "free-access"

    def can_access(self, tier=None, status=None, requirements=None) -> bool:
        return not _requires_premium(requirements)


class TierBasedStrategy(PermissionStrategy):
    """
    Tier matching with an escape hatch for custom rules.

    Precedence: custom_check > required_tier > requires_premium > allow.
    """

    @property
    def name(self) -> str:
        return "tier-based"

    def can_access(self, tier=None, status=None, requirements=None) -> bool:
        if requirements is None:
            return True

        if requirements.custom_check is not None:
            return bool(requirements.custom_check(tier, status))

        if requirements.required_tier is not None:
            return (
                tier is not None
                and tier == requirements.required_tier
                and status == SubscriptionStatus.ACTIVE
            )

        if requirements.requires_premium:
            return is_premium_active(tier, status)

        return True


BUILTIN_STRATEGIES: tuple[type[PermissionStrategy], ...] = (
    PremiumAccessStrategy,
    FreeAccessStrategy,
    TierBasedStrategy,
)
