"""Persistence repositories for database operations."""

from gatekeeper.infrastructure.persistence.repositories.account_repository import (
    AccountRepository,
)

__all__ = [
    "AccountRepository",
]
