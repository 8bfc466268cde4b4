"""Domain entities for Gatekeeper.

Entities are pure Python dataclasses that represent core business concepts.
They have no dependencies on infrastructure or external frameworks.
"""

from gatekeeper.domain.entities.account import Account
from gatekeeper.domain.entities.token_claims import TokenClaims

__all__ = [
    "Account",
    "TokenClaims",
]
