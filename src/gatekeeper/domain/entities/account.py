"""Account entity for registration and sign-in.

Accounts are uniquely identified by a store-assigned integer id and by their
lowercased email address.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Account:
    """Account entity representing a registered user identity.

    Attributes:
        id: Unique identifier assigned by the store.
        email: Email address, stored lowercased.
        password_hash: Encoded password hash (never the plaintext).
        created_at: Timestamp when the account was created.
        updated_at: Timestamp when the account was last updated.
    """

    id: int
    email: str
    password_hash: str = field(repr=False)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        """Validate account data after initialization."""
        if not self.email:
            raise ValueError("Email is required")
        if not self.password_hash:
            raise ValueError("Password hash is required")
