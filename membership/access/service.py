"""
Authorization service - the registry of permission strategies.

Strategies are registered by name and resolved per call. Callers that
don't name a strategy get the default one; callers that name a strategy
which isn't registered also get the default, with a warning logged.

The registry is read far more often than it is written. Reads take the
current snapshot without locking; writes copy the mapping under a lock
and swap the new snapshot in.
"""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Mapping

from membership.access.strategies import (
    BUILTIN_STRATEGIES,
    PermissionStrategy,
    PremiumAccessStrategy,
    ResourceRequirements,
)
from membership.access.subscription import SubscriptionStatus, SubscriptionTier
from membership.config import Settings, get_settings
from membership.errors import ConfigurationError

logger = logging.getLogger(__name__)


class AuthorizationService:
    """
    Central access-control entry point.

    Usage:
        service = AuthorizationService()
        service.register_strategy(TierBasedStrategy())

        service.can_access(tier, status, ResourceRequirements(requires_premium=True))
        service.can_access(
            tier,
            status,
            ResourceRequirements(required_tier=SubscriptionTier.PREMIUM),
            strategy_name="tier-based",
        )
    """

    def __init__(self, default_strategy: PermissionStrategy | None = None):
        self._default = default_strategy or PremiumAccessStrategy()
        self._lock = threading.Lock()
        self._strategies: Mapping[str, PermissionStrategy] = MappingProxyType(
            {self._default.name: self._default}
        )

    @property
    def default_strategy(self) -> PermissionStrategy:
        return self._default

    # =========================================================================
    # Registry
    # =========================================================================

    def register_strategy(self, strategy: PermissionStrategy) -> None:
        """Register a strategy by its name, replacing any previous one."""
        with self._lock:
            strategies = dict(self._strategies)
            strategies[strategy.name] = strategy
            self._strategies = MappingProxyType(strategies)

    def unregister_strategy(self, strategy_name: str) -> None:
        """Remove a strategy. The default strategy can't be removed."""
        if strategy_name == self._default.name:
            return
        with self._lock:
            if strategy_name not in self._strategies:
                return
            strategies = dict(self._strategies)
            del strategies[strategy_name]
            self._strategies = MappingProxyType(strategies)

    def get_strategy(self, strategy_name: str) -> PermissionStrategy | None:
        """Get a registered strategy by name (None if missing)."""
        return self._strategies.get(strategy_name)

    def list_strategies(self) -> list[str]:
        """List all registered strategy names."""
        return list(self._strategies.keys())

    # =========================================================================
    # Decisions
    # =========================================================================

    def resolve(self, strategy_name: str | None = None) -> PermissionStrategy:
        """Pick the strategy for a call, falling back to the default."""
        if strategy_name is None:
            return self._default

        strategy = self._strategies.get(strategy_name)
        if strategy is None:
            logger.warning(
                f"Strategy not found: {strategy_name}, using default "
                f"({self._default.name})"
            )
            return self._default
        return strategy

    def can_access(
        self,
        tier: SubscriptionTier | None = None,
        status: SubscriptionStatus | None = None,
        requirements: ResourceRequirements | None = None,
        strategy_name: str | None = None,
    ) -> bool:
        """
        Check whether a subscription may access a resource.

        Args:
            tier: Subscription tier (None for no subscription)
            status: Subscription status (None for no subscription)
            requirements: What the resource demands (None = nothing)
            strategy_name: Strategy to use; default strategy if omitted
                or not registered

        Returns:
            The resolved strategy's decision
        """
        strategy = self.resolve(strategy_name)
        return strategy.can_access(tier, status, requirements)

    def __repr__(self) -> str:
        return (
            f"<AuthorizationService(default={self._default.name}, "
            f"strategies={self.list_strategies()})>"
        )


def build_authorization_service(settings: Settings | None = None) -> AuthorizationService:
    """
    Build a service with every built-in strategy registered.

    The default strategy is the one named by DEFAULT_ACCESS_STRATEGY.
    """
    settings = settings or get_settings()
    builtins = {cls().name: cls for cls in BUILTIN_STRATEGIES}

    default_cls = builtins.get(settings.default_access_strategy)
    if default_cls is None:
        raise ConfigurationError(
            f"Unknown access strategy '{settings.default_access_strategy}'. "
            f"Available: {sorted(builtins)}"
        )

    service = AuthorizationService(default_cls())
    for name, cls in builtins.items():
        if name != service.default_strategy.name:
            service.register_strategy(cls())
    return service


# Process-wide instance, owned by application startup
_service: AuthorizationService | None = None


def get_authorization_service() -> AuthorizationService:
    """Get the process-wide authorization service."""
    global _service
    if _service is None:
        _service = build_authorization_service()
    return _service


def set_authorization_service(service: AuthorizationService) -> None:
    """Install an explicitly built service (startup wiring)."""
    global _service
    _service = service


def reset_authorization_service() -> None:
    """Reset the process-wide service (useful for testing)."""
    global _service
    _service = None
