"""Account API routes.

Provides endpoints for sign-up, sign-in, token checks, account deletion and
the admin role check. Failures are raised as ``GatekeeperError`` and turned
into the response envelope by the application's exception handlers.
"""

from fastapi import APIRouter, status

from gatekeeper.core.logging import get_logger
from gatekeeper.infrastructure.api.dependencies import (
    AccessToken,
    AccountId,
    Credentials,
    CredentialServiceDep,
)
from gatekeeper.infrastructure.api.schemas import AccountResponse, ApiResponse

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse,
    responses={400: {"description": "Validation error or email already registered"}},
)
async def sign_up(credentials: Credentials, service: CredentialServiceDep) -> ApiResponse:
    """Register a new account."""
    email, password = credentials
    account = await service.create_account(email, password)
    return ApiResponse(
        data=AccountResponse.model_validate(account).model_dump(mode="json"),
        success=True,
        message="Successfully created a new user",
    )


@router.post(
    "/signin",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse,
    responses={
        401: {"description": "Incorrect password"},
        404: {"description": "No account with this email"},
    },
)
async def sign_in(credentials: Credentials, service: CredentialServiceDep) -> ApiResponse:
    """Verify credentials and return a session token."""
    email, password = credentials
    token = await service.sign_in(email, password)
    return ApiResponse(data=token, success=True, message="Successfully signin a user")


@router.get(
    "/isAuthenticated",
    response_model=ApiResponse,
    responses={401: {"description": "Missing, invalid or expired token"}},
)
async def is_authenticated(token: AccessToken, service: CredentialServiceDep) -> ApiResponse:
    """Validate the session token and return the account id it belongs to."""
    account_id = await service.is_authenticated(token)
    return ApiResponse(
        data=account_id,
        success=True,
        message="User Authenticated and token is valid",
    )


@router.delete(
    "/delete/{account_id}",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse,
)
async def delete_account(account_id: int, service: CredentialServiceDep) -> ApiResponse:
    """Delete an account. Deleting an unknown id is not an error."""
    deleted = await service.destroy_account(account_id)
    return ApiResponse(data=deleted, success=True, message="Successfully deleted a user")


@router.get(
    "/isAdmin",
    response_model=ApiResponse,
    responses={404: {"description": "No account with this id"}},
)
async def is_admin(account_id: AccountId, service: CredentialServiceDep) -> ApiResponse:
    """Report whether an account holds the admin role.

    The caller is not authenticated by this endpoint.
    """
    result = await service.is_admin(account_id)
    return ApiResponse(
        data=result,
        success=True,
        message="successfully fetched whether user is admin or not",
    )
