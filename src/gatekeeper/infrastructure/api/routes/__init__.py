"""API Routes for Gatekeeper."""

from gatekeeper.infrastructure.api.routes.accounts_router import router as accounts_router

__all__ = [
    "accounts_router",
]
