"""Authentication infrastructure components.

This module provides password hashing and session token services.
"""

from gatekeeper.infrastructure.auth.password_hasher import PasswordHasher
from gatekeeper.infrastructure.auth.token_issuer import TokenIssuer

__all__ = [
    "PasswordHasher",
    "TokenIssuer",
]
