"""
Tests for the permission strategies.

Strategies are pure: same inputs, same answer, no exceptions for a
missing tier or status.
"""

from unittest.mock import Mock

import pytest

from membership.access.strategies import (
    FreeAccessStrategy,
    PremiumAccessStrategy,
    ResourceRequirements,
    TierBasedStrategy,
)
from membership.access.subscription import (
    SubscriptionStatus,
    SubscriptionTier,
    has_access,
    is_premium_active,
)

TIERS = [None, *SubscriptionTier]
STATUSES = [None, *SubscriptionStatus]
NOT_PREMIUM_ACTIVE = [
    (tier, status)
    for tier in TIERS
    for status in STATUSES
    if not (tier == SubscriptionTier.PREMIUM and status == SubscriptionStatus.ACTIVE)
]

PREMIUM_REQUIRED = ResourceRequirements(requires_premium=True)
NOT_PREMIUM = ResourceRequirements(requires_premium=False)


# =============================================================================
# Subscription helpers
# =============================================================================


class TestSubscriptionHelpers:
    def test_premium_active(self):
        assert is_premium_active(SubscriptionTier.PREMIUM, SubscriptionStatus.ACTIVE)
        assert is_premium_active("PREMIUM", "ACTIVE")

    def test_not_premium_active(self):
        assert not is_premium_active(SubscriptionTier.FREE, SubscriptionStatus.ACTIVE)
        assert not is_premium_active(SubscriptionTier.PREMIUM, SubscriptionStatus.PAST_DUE)
        assert not is_premium_active(None, SubscriptionStatus.ACTIVE)
        assert not is_premium_active(SubscriptionTier.PREMIUM, None)

    def test_has_access(self):
        assert has_access(None, None, False)
        assert not has_access(SubscriptionTier.FREE, SubscriptionStatus.ACTIVE, True)
        assert has_access(SubscriptionTier.PREMIUM, SubscriptionStatus.ACTIVE, True)


# =============================================================================
# PremiumAccessStrategy
# =============================================================================


class TestPremiumAccessStrategy:
    @pytest.fixture
    def strategy(self):
        return PremiumAccessStrategy()

    def test_name(self, strategy):
        assert strategy.name == "premium-access"

    @pytest.mark.parametrize("tier", TIERS)
    @pytest.mark.parametrize("status", STATUSES)
    def test_unconstrained_resources_always_allowed(self, strategy, tier, status):
        assert strategy.can_access(tier, status, NOT_PREMIUM)
        assert strategy.can_access(tier, status, ResourceRequirements())
        assert strategy.can_access(tier, status, None)

    def test_active_premium_allowed(self, strategy):
        assert strategy.can_access(
            SubscriptionTier.PREMIUM, SubscriptionStatus.ACTIVE, PREMIUM_REQUIRED
        )

    @pytest.mark.parametrize(("tier", "status"), NOT_PREMIUM_ACTIVE)
    def test_everyone_else_denied(self, strategy, tier, status):
        assert not strategy.can_access(tier, status, PREMIUM_REQUIRED)

    def test_plain_string_values(self, strategy):
        assert strategy.can_access("PREMIUM", "ACTIVE", PREMIUM_REQUIRED)
        assert not strategy.can_access("PREMIUM", "INACTIVE", PREMIUM_REQUIRED)


# =============================================================================
# FreeAccessStrategy
# =============================================================================


class TestFreeAccessStrategy:
    @pytest.fixture
    def strategy(self):
        return FreeAccessStrategy()

    def test_name(self, strategy):
        assert strategy.name == "free-access"

    @pytest.mark.parametrize("tier", TIERS)
    @pytest.mark.parametrize("status", STATUSES)
    def test_never_grants_premium(self, strategy, tier, status):
        assert not strategy.can_access(tier, status, PREMIUM_REQUIRED)

    @pytest.mark.parametrize("tier", TIERS)
    @pytest.mark.parametrize("status", STATUSES)
    def test_free_resources_always_allowed(self, strategy, tier, status):
        assert strategy.can_access(tier, status, NOT_PREMIUM)

    def test_no_requirements(self, strategy):
        assert strategy.can_access(SubscriptionTier.FREE, SubscriptionStatus.ACTIVE)


# =============================================================================
# TierBasedStrategy
# =============================================================================


class TestTierBasedStrategy:
    @pytest.fixture
    def strategy(self):
        return TierBasedStrategy()

    def test_name(self, strategy):
        assert strategy.name == "tier-based"

    def test_required_tier_mismatch(self, strategy):
        req = ResourceRequirements(required_tier=SubscriptionTier.PREMIUM)
        assert not strategy.can_access(SubscriptionTier.FREE, SubscriptionStatus.ACTIVE, req)

    def test_required_tier_match(self, strategy):
        req = ResourceRequirements(required_tier=SubscriptionTier.PREMIUM)
        assert strategy.can_access(SubscriptionTier.PREMIUM, SubscriptionStatus.ACTIVE, req)

    def test_required_tier_needs_active_status(self, strategy):
        req = ResourceRequirements(required_tier=SubscriptionTier.FREE)
        assert strategy.can_access(SubscriptionTier.FREE, SubscriptionStatus.ACTIVE, req)
        assert not strategy.can_access(SubscriptionTier.FREE, SubscriptionStatus.CANCELED, req)
        assert not strategy.can_access(None, SubscriptionStatus.ACTIVE, req)

    def test_requires_premium(self, strategy):
        assert strategy.can_access(
            SubscriptionTier.PREMIUM, SubscriptionStatus.ACTIVE, PREMIUM_REQUIRED
        )
        assert not strategy.can_access(
            SubscriptionTier.FREE, SubscriptionStatus.ACTIVE, PREMIUM_REQUIRED
        )
        assert not strategy.can_access(None, SubscriptionStatus.ACTIVE, PREMIUM_REQUIRED)
        assert not strategy.can_access(
            SubscriptionTier.PREMIUM, SubscriptionStatus.INACTIVE, PREMIUM_REQUIRED
        )

    def test_custom_check_called_with_tier_and_status(self, strategy):
        check = Mock(return_value=True)
        req = ResourceRequirements(custom_check=check)

        assert strategy.can_access(SubscriptionTier.FREE, SubscriptionStatus.ACTIVE, req)
        check.assert_called_once_with(SubscriptionTier.FREE, SubscriptionStatus.ACTIVE)

    def test_custom_check_overrides_everything(self, strategy):
        req = ResourceRequirements(
            requires_premium=True,
            required_tier=SubscriptionTier.PREMIUM,
            custom_check=lambda tier, status: True,
        )
        assert strategy.can_access(None, None, req)

        req = ResourceRequirements(
            required_tier=SubscriptionTier.PREMIUM,
            custom_check=lambda tier, status: False,
        )
        assert not strategy.can_access(
            SubscriptionTier.PREMIUM, SubscriptionStatus.ACTIVE, req
        )

    def test_required_tier_beats_requires_premium(self, strategy):
        req = ResourceRequirements(
            requires_premium=True, required_tier=SubscriptionTier.FREE
        )
        assert strategy.can_access(SubscriptionTier.FREE, SubscriptionStatus.ACTIVE, req)

    def test_no_requirements(self, strategy):
        assert strategy.can_access(SubscriptionTier.FREE, SubscriptionStatus.ACTIVE)
        assert strategy.can_access(None, None, ResourceRequirements())
