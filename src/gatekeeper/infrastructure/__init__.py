"""Infrastructure layer - External dependencies and implementations.

This layer contains all external dependencies including:
- Database adapters (SQLAlchemy)
- API routes (FastAPI)
- Password hashing and token signing (argon2, PyJWT)
"""
