"""Identity payload carried inside a session token."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TokenClaims:
    """Claims embedded in a session token.

    Attributes:
        email: Email of the account the token was issued to.
        id: Id of the account the token was issued to.
    """

    email: str
    id: int
