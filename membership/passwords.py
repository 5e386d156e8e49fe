# =============================================================================
# Password Hashing
# =============================================================================
#
# PBKDF2-SHA256 with a random per-password salt, stored as "salt:hash".
# The rest of the platform only needs hash(), compare(), and authenticate().
#
# =============================================================================

from __future__ import annotations

import hashlib
import secrets
from typing import Any, Callable, Mapping

from membership.config import get_settings


class PasswordService:
    """Hashes and verifies member passwords."""

    def __init__(self, iterations: int = 100_000):
        self.iterations = iterations

    def _digest(self, password: str, salt: str) -> str:
        hash_bytes = hashlib.pbkdf2_hmac(
            "sha256",
            password.encode("utf-8"),
            salt.encode("utf-8"),
            iterations=self.iterations,
        )
        return hash_bytes.hex()

    def hash(self, password: str) -> str:
        """
        Hash a password.

        Returns: salt:hash format string
        """
        salt = secrets.token_hex(32)
        return f"{salt}:{self._digest(password, salt)}"

    def compare(self, password: str, password_hash: str) -> bool:
        """Verify a password against its hash (False for malformed hashes)."""
        try:
            salt, stored_hash = password_hash.split(":")
        except (ValueError, AttributeError):
            return False
        return secrets.compare_digest(self._digest(password, salt), stored_hash)


password_service = PasswordService(iterations=get_settings().password_hash_iterations)


def authenticate(
    email: str,
    password: str,
    lookup: Callable[[str], Any | None],
    passwords: PasswordService | None = None,
) -> Any | None:
    """
    Authenticate a member by email and password.

    `lookup` finds the stored user record by email (repository call); the
    record carries `password_hash` as an attribute or mapping key.

    Returns the user record, or None if authentication fails.
    """
    if not email or not password:
        return None

    user = lookup(email)
    if user is None:
        return None

    if isinstance(user, Mapping):
        password_hash = user.get("password_hash")
    else:
        password_hash = getattr(user, "password_hash", None)

    if not (passwords or password_service).compare(password, password_hash):
        return None
    return user
