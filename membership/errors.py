"""
Exceptions raised by the membership platform.

Access decisions themselves never raise; these cover configuration
mistakes and the explicit "enforce" helpers.
"""

from __future__ import annotations

from typing import Any


class MembershipError(Exception):
    """Base exception for the membership platform."""
    pass


class ConfigurationError(MembershipError):
    """Raised when settings reference something that doesn't exist."""
    pass


class PremiumRequiredError(MembershipError):
    """Raised when a premium-only resource is requested without access."""
    
    def __init__(self, resource: Any = None, message: str = "Premium subscription required"):
        super().__init__(message)
        self.resource = resource
        self.message = message
