"""Domain services for Gatekeeper.

Services contain business logic that doesn't naturally fit within a single entity.
"""

from gatekeeper.domain.services.account_validator import (
    AccountValidationError,
    AccountValidator,
)
from gatekeeper.domain.services.credential_service import (
    AccountStore,
    CredentialService,
)

__all__ = [
    "AccountStore",
    "AccountValidationError",
    "AccountValidator",
    "CredentialService",
]
