"""Identifier and clock helpers shared by models and tokens."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone


def generate_id(prefix: str = "") -> str:
    """
    Short random ID, optionally prefixed.

    generate_id("evt") -> "evt_3f9a0c1b7d2e"
    """
    uid = uuid.uuid4().hex[:12]
    return f"{prefix}_{uid}" if prefix else uid


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
