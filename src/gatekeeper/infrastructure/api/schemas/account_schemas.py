"""Pydantic schemas for account endpoints."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, SecretStr


class CredentialsRequest(BaseModel):
    """Request body for sign-up and sign-in.

    Both fields are optional at the schema level so that a missing field is
    reported with the service's own error envelope instead of a 422.
    """

    email: str | None = Field(None, description="Account email address")
    password: SecretStr | None = Field(None, description="Account password")


class AccountResponse(BaseModel):
    """Account information returned by the API. Never includes the password hash."""

    id: int = Field(..., description="Account ID")
    email: str = Field(..., description="Account email address")
    created_at: datetime = Field(..., description="When the account was created")
    updated_at: datetime = Field(..., description="When the account was last updated")

    model_config = {"from_attributes": True}


class ApiResponse(BaseModel):
    """Envelope used by every account endpoint."""

    data: Any = Field(default_factory=dict, description="Response payload")
    success: bool = Field(..., description="Whether the request succeeded")
    message: str = Field(..., description="Human-readable outcome")
    err: Any = Field(default_factory=dict, description="Error explanation, empty on success")
