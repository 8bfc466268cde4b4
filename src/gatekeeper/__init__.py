"""Gatekeeper - account registration, sign-in and session tokens.

A small account service: argon2 password hashing, signed session tokens
and an admin role check behind a JSON HTTP API.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
