"""Credential service for account lifecycle, sign-in and access checks.

Orchestrates the password hasher, the token issuer and the account store.
Every failure is raised as a typed ``GatekeeperError``; nothing is recovered
locally.
"""

import asyncio
from typing import TYPE_CHECKING, Protocol

from gatekeeper.core.exceptions import (
    AuthenticationError,
    InvalidTokenError,
    NotFoundError,
    ValidationError,
)
from gatekeeper.core.logging import get_logger
from gatekeeper.domain.entities import Account, TokenClaims
from gatekeeper.domain.services.account_validator import AccountValidator

if TYPE_CHECKING:
    from gatekeeper.infrastructure.auth import PasswordHasher, TokenIssuer
    from gatekeeper.infrastructure.persistence.models import AccountModel

logger = get_logger(__name__)


class AccountStore(Protocol):
    """Storage contract the credential service depends on."""

    async def create(self, email: str, password_hash: str) -> "AccountModel": ...

    async def get_by_id(self, account_id: int) -> "AccountModel | None": ...

    async def get_by_email(self, email: str) -> "AccountModel | None": ...

    async def delete(self, account_id: int) -> int: ...

    async def has_role(self, account_id: int, role_name: str) -> bool: ...


def to_entity(model: "AccountModel") -> Account:
    """Convert a stored account row to the domain entity."""
    return Account(
        id=model.id,
        email=model.email,
        password_hash=model.password_hash,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class CredentialService:
    """Service for registration, sign-in, authentication and authorization."""

    def __init__(
        self,
        store: AccountStore,
        hasher: "PasswordHasher",
        issuer: "TokenIssuer",
        validator: AccountValidator | None = None,
        admin_role_name: str = "ADMIN",
    ) -> None:
        """Initialize the credential service.

        Args:
            store: Account store used for persistence.
            hasher: Password hasher shared by the process.
            issuer: Token issuer shared by the process.
            validator: Input validator. Defaults to the 5-100 character policy.
            admin_role_name: Name of the role checked by ``is_admin``.
        """
        self.store = store
        self.hasher = hasher
        self.issuer = issuer
        self.validator = validator or AccountValidator()
        self.admin_role_name = admin_role_name

    async def create_account(self, email: str, password: str) -> Account:
        """Register a new account.

        Args:
            email: Email address. Stored lowercased.
            password: Plaintext password. Hashed before it reaches the store.

        Returns:
            The created account.

        Raises:
            ValidationError: If the input is malformed or the email is taken.
        """
        errors = self.validator.validate(email, password)
        if errors:
            logger.info(
                "Account creation rejected: validation",
                fields=[e.field for e in errors],
            )
            raise ValidationError(explanation="; ".join(e.message for e in errors))

        normalized = self.validator.normalize_email(email)
        password_hash = await asyncio.to_thread(self.hasher.hash, password)
        model = await self.store.create(normalized, password_hash)

        logger.info("Account created", account_id=model.id)
        return to_entity(model)

    async def destroy_account(self, account_id: int) -> int:
        """Delete an account.

        Args:
            account_id: ID of the account to delete.

        Returns:
            Number of accounts deleted. 0 when the account did not exist.
        """
        deleted = await self.store.delete(account_id)
        logger.info("Account delete requested", account_id=account_id, deleted=deleted)
        return deleted

    async def get_account(self, account_id: int) -> Account:
        """Fetch an account by ID.

        Raises:
            NotFoundError: If no such account exists.
        """
        model = await self.store.get_by_id(account_id)
        if model is None:
            raise NotFoundError(
                "Invalid account id sent in the request",
                f"There is no record of an account with id {account_id}",
            )
        return to_entity(model)

    async def sign_in(self, email: str, password: str) -> str:
        """Verify credentials and issue a session token.

        Args:
            email: Email address, matched case-insensitively.
            password: Plaintext password guess.

        Returns:
            Signed token carrying the account email and id.

        Raises:
            NotFoundError: If no account has this email.
            AuthenticationError: If the password does not match.
            SigningError: If the token cannot be signed.
        """
        model = await self.store.get_by_email(self.validator.normalize_email(email))
        if model is None:
            logger.info("Sign-in rejected: unknown email")
            raise NotFoundError(
                "Invalid email sent in the request",
                "Please check the email, as there is no record of the email",
            )

        # No stored password is longer than the policy allows
        if len(password) > self.validator.max_password_length:
            logger.info("Sign-in rejected: password too long", account_id=model.id)
            raise AuthenticationError("Incorrect password", "Incorrect password")

        matches = await asyncio.to_thread(self.hasher.verify, password, model.password_hash)
        if not matches:
            logger.info("Sign-in rejected: password mismatch", account_id=model.id)
            raise AuthenticationError("Incorrect password", "Incorrect password")

        token = self.issuer.issue(TokenClaims(email=model.email, id=model.id))
        logger.info(
            "Sign-in succeeded",
            account_id=model.id,
            expires_in=self.issuer.get_expires_in(),
        )
        return token

    async def is_authenticated(self, token: str) -> int:
        """Check a session token and confirm its account still exists.

        Args:
            token: Token presented by the caller.

        Returns:
            ID of the authenticated account.

        Raises:
            AuthenticationError: If the token is invalid, expired, or refers
                to an account that no longer exists.
        """
        try:
            claims = self.issuer.verify(token)
        except InvalidTokenError as e:
            raise AuthenticationError("Authentication failed", "Invalid or expired token") from e

        model = await self.store.get_by_id(claims.id)
        if model is None:
            logger.info("Token rejected: account no longer exists", account_id=claims.id)
            raise AuthenticationError(
                "Authentication failed",
                "No user with the corresponding token exists",
            )
        return model.id

    async def is_admin(self, account_id: int) -> bool:
        """Check whether an account holds the admin role.

        The caller is not authenticated here; any party that can reach this
        operation can query any account id.

        Raises:
            NotFoundError: If no such account exists.
        """
        account = await self.get_account(account_id)
        return await self.store.has_role(account.id, self.admin_role_name)
