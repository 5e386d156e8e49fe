"""
Protected resources: events, courses, and the services directory.

Each carries `is_premium_only`, the flag the access checks read. Storage
is handled elsewhere; these models are what the repositories hand back.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, EmailStr, Field

from membership.ids import generate_id, utc_now


class ServiceCategory(str, Enum):
    """Categories in the services directory."""

    CONSULTING = "CONSULTING"
    LEGAL = "LEGAL"
    FINANCE = "FINANCE"
    MARKETING = "MARKETING"
    TECHNOLOGY = "TECHNOLOGY"
    HEALTH = "HEALTH"
    EDUCATION = "EDUCATION"
    OTHER = "OTHER"


class ProtectedResource(BaseModel):
    """Base for anything that can be gated behind premium."""

    is_premium_only: bool = False
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


# =============================================================================
# Events
# =============================================================================


class Event(ProtectedResource):
    id: str = Field(default_factory=lambda: generate_id("evt"))

    title: str
    description: str = ""
    start_date: datetime
    end_date: datetime
    location: str = ""
    image_url: str | None = None
    max_attendees: int | None = None


# =============================================================================
# Courses
# =============================================================================


class Course(ProtectedResource):
    id: str = Field(default_factory=lambda: generate_id("crs"))

    title: str
    description: str = ""
    thumbnail: str | None = None
    duration: int | None = None  # minutes
    published: bool = False


# =============================================================================
# Services directory
# =============================================================================


class ServiceListing(ProtectedResource):
    """A member's listing in the services directory."""

    id: str = Field(default_factory=lambda: generate_id("svc"))
    user_id: str

    title: str
    description: str = ""
    category: ServiceCategory = ServiceCategory.OTHER
    image_url: str | None = None
    contact_email: EmailStr | None = None
    contact_phone: str | None = None
    published: bool = False
