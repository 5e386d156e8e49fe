"""
Session-level helpers around the authorization service.

These bind the service to the session shape so route handlers don't deal
with tiers and statuses directly:

    if not check_resource_access(session, course.is_premium_only):
        ...
    events = filter_by_access(all_events, session)
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, TypeVar

from membership.access.service import AuthorizationService, get_authorization_service
from membership.access.session import Session, subscription_of
from membership.access.strategies import ResourceRequirements
from membership.errors import PremiumRequiredError

T = TypeVar("T")


def check_resource_access(
    session: Session | None,
    requires_premium: bool,
    *,
    service: AuthorizationService | None = None,
) -> bool:
    """Can the session's user access a resource, using the default strategy?"""
    service = service or get_authorization_service()
    tier, status = subscription_of(session)
    return service.can_access(
        tier,
        status,
        ResourceRequirements(requires_premium=requires_premium),
    )


def has_premium_access(
    session: Session | None,
    *,
    service: AuthorizationService | None = None,
) -> bool:
    """Does the session's user have an active premium subscription?"""
    return check_resource_access(session, True, service=service)


def is_premium_only(item: Any) -> bool:
    """Read the premium flag from a model or a plain mapping."""
    if isinstance(item, Mapping):
        return bool(item.get("is_premium_only", False))
    return bool(getattr(item, "is_premium_only", False))


def filter_by_access(
    items: Iterable[T],
    session: Session | None,
    *,
    service: AuthorizationService | None = None,
) -> list[T]:
    """
    Keep only the items the session's user may see.

    Premium users see everything; everyone else loses premium-only items.
    Always returns a new list in the original order.
    """
    if has_premium_access(session, service=service):
        return list(items)
    return [item for item in items if not is_premium_only(item)]


def ensure_resource_access(
    session: Session | None,
    resource: Any,
    *,
    service: AuthorizationService | None = None,
) -> None:
    """
    Raise if the session's user can't access the resource.

    Usage:
        ensure_resource_access(session, course)  # raises PremiumRequiredError
    """
    if not check_resource_access(session, is_premium_only(resource), service=service):
        raise PremiumRequiredError(resource)
