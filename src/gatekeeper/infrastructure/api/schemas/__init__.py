"""Pydantic schemas for API requests and responses."""

from gatekeeper.infrastructure.api.schemas.account_schemas import (
    AccountResponse,
    ApiResponse,
    CredentialsRequest,
)

__all__ = [
    "AccountResponse",
    "ApiResponse",
    "CredentialsRequest",
]
