"""Shared fixtures: sessions and a clean authorization service."""

import pytest

from membership.access.service import (
    AuthorizationService,
    reset_authorization_service,
)
from membership.config import get_settings

from factories import make_session


@pytest.fixture(autouse=True)
def _fresh_singletons():
    """Each test gets its own process-wide service and settings."""
    reset_authorization_service()
    get_settings.cache_clear()
    yield
    reset_authorization_service()
    get_settings.cache_clear()


@pytest.fixture
def service():
    """Fresh authorization service (premium-access default)."""
    return AuthorizationService()


@pytest.fixture
def premium_session():
    return make_session(tier="PREMIUM", status="ACTIVE")


@pytest.fixture
def free_session():
    return make_session(tier="FREE", status="ACTIVE")
