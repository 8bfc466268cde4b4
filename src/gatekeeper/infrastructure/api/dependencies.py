"""FastAPI dependencies for the account endpoints.

Builds the credential service from the per-request database session and the
process-wide hasher, token issuer and settings stored on ``app.state``.
"""

from typing import Annotated

from fastapi import Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from gatekeeper.core.config import Settings
from gatekeeper.core.exceptions import AuthenticationError, ValidationError
from gatekeeper.core.logging import get_logger
from gatekeeper.domain.services import AccountValidator, CredentialService
from gatekeeper.infrastructure.api.schemas import CredentialsRequest
from gatekeeper.infrastructure.persistence.database import get_db_session
from gatekeeper.infrastructure.persistence.repositories import AccountRepository

logger = get_logger(__name__)


def get_app_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return request.app.state.settings


async def get_credential_service(
    request: Request,
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> CredentialService:
    """Build a credential service bound to the request's session."""
    settings = get_app_settings(request)
    return CredentialService(
        store=AccountRepository(session),
        hasher=request.app.state.password_hasher,
        issuer=request.app.state.token_issuer,
        validator=AccountValidator(
            min_password_length=settings.password_min_length,
            max_password_length=settings.password_max_length,
        ),
        admin_role_name=settings.admin_role_name,
    )


def require_credentials(body: CredentialsRequest | None = None) -> tuple[str, str]:
    """Ensure both email and password are present in the request body.

    Returns:
        Tuple of (email, plaintext password).

    Raises:
        ValidationError: If either field is missing or empty.
    """
    body = body or CredentialsRequest()
    password = body.password.get_secret_value() if body.password is not None else ""
    if not body.email or not password:
        logger.info("Request rejected: email or password missing")
        raise ValidationError(
            "Something went wrong",
            "Email or Password are missing in the request",
        )
    return body.email, password


def require_account_id(
    account_id: Annotated[int | None, Query(alias="id")] = None,
) -> int:
    """Ensure the account id query parameter is present.

    Raises:
        ValidationError: If the id is missing.
    """
    if account_id is None:
        raise ValidationError("Something went wrong", "UserId is missing in the request")
    return account_id


def require_token(request: Request) -> str:
    """Extract the session token from the configured request header.

    Raises:
        AuthenticationError: If no token was supplied.
    """
    header = get_app_settings(request).token_header
    token = request.headers.get(header)
    if not token:
        raise AuthenticationError("No token provided", f"Missing {header} header")
    return token


CredentialServiceDep = Annotated[CredentialService, Depends(get_credential_service)]
Credentials = Annotated[tuple[str, str], Depends(require_credentials)]
AccountId = Annotated[int, Depends(require_account_id)]
AccessToken = Annotated[str, Depends(require_token)]
