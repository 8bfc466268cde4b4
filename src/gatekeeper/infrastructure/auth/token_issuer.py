"""Session token issuance and verification.

Tokens are HS256-signed JWTs carrying the account email and id. They are
never persisted: validity is decided by signature and expiry alone.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from gatekeeper.core.config import Settings
from gatekeeper.core.exceptions import InvalidTokenError, SigningError, TokenExpiredError
from gatekeeper.core.logging import get_logger
from gatekeeper.domain.entities import TokenClaims

logger = get_logger(__name__)


class TokenIssuer:
    """Creates and validates signed, time-limited session tokens."""

    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        expires_delta: timedelta = timedelta(hours=1),
        issuer: str = "gatekeeper",
    ) -> None:
        """Initialize the token issuer.

        Args:
            secret_key: Secret key for signing tokens.
            expires_delta: Lifetime of issued tokens.
            issuer: Value of the ``iss`` claim.

        Raises:
            SigningError: If no secret key is provided.
        """
        if not secret_key:
            raise SigningError(
                "Token signing key is not configured",
                "Set GATEKEEPER_SECRET_KEY before starting the service",
            )
        self._secret_key = secret_key
        self.expires_delta = expires_delta
        self.issuer = issuer

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenIssuer":
        """Build an issuer from configuration."""
        return cls(
            secret_key=settings.secret_key,
            expires_delta=timedelta(minutes=settings.access_token_expire_minutes),
            issuer=settings.token_issuer,
        )

    def issue(self, claims: TokenClaims, now: datetime | None = None) -> str:
        """Create a signed token for the given claims.

        Args:
            claims: Identity to embed in the token.
            now: Issuance time. Defaults to the current UTC time.

        Returns:
            Encoded JWT.

        Raises:
            SigningError: If the token cannot be signed.
        """
        if now is None:
            now = datetime.now(timezone.utc)

        payload: dict[str, Any] = {
            "iss": self.issuer,
            "sub": str(claims.id),
            "iat": now,
            "exp": now + self.expires_delta,
            "email": claims.email,
            "id": claims.id,
        }

        try:
            return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)
        except (jwt.PyJWTError, TypeError, ValueError) as e:
            logger.error("Token signing failed", error_type=type(e).__name__)
            raise SigningError(explanation="Token could not be signed") from e

    def verify(self, token: str) -> TokenClaims:
        """Verify a token and return its claims.

        Args:
            token: The encoded JWT.

        Returns:
            The claims embedded at issuance.

        Raises:
            TokenExpiredError: If the token has expired.
            InvalidTokenError: If the token is malformed or its signature does not match.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                issuer=self.issuer,
                options={"require": ["exp", "iat", "iss"]},
            )
        except jwt.ExpiredSignatureError as e:
            logger.info("Token rejected: expired")
            raise TokenExpiredError(explanation="Token has expired") from e
        except jwt.InvalidTokenError as e:
            logger.info("Token rejected: invalid", reason=type(e).__name__)
            raise InvalidTokenError(explanation="Token is invalid") from e

        try:
            return TokenClaims(email=str(payload["email"]), id=int(payload["id"]))
        except (KeyError, TypeError, ValueError) as e:
            logger.info("Token rejected: missing or malformed claims")
            raise InvalidTokenError(explanation="Token claims are malformed") from e

    def get_expires_in(self) -> int:
        """Get the token lifetime in seconds."""
        return int(self.expires_delta.total_seconds())
