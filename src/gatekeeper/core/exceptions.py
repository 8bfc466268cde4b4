"""Error taxonomy shared by the credential core and the API layer.

Every failure raised by the core is a ``GatekeeperError`` subclass carrying a
machine-readable ``kind``, a human ``message``, an optional ``explanation``
and the HTTP status the API layer maps it to.
"""


class GatekeeperError(Exception):
    """Base class for all Gatekeeper failures."""

    kind = "AppError"
    status_code = 500
    default_message = "Something went wrong"

    def __init__(self, message: str | None = None, explanation: str | None = None) -> None:
        self.message = message or self.default_message
        self.explanation = explanation
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(kind={self.kind}, message={self.message!r})>"


class ValidationError(GatekeeperError):
    """Raised when caller input is malformed or violates a store constraint."""

    kind = "ValidationError"
    status_code = 400
    default_message = "Not able to validate the data sent in the request"


class NotFoundError(GatekeeperError):
    """Raised when a referenced entity does not exist."""

    kind = "AttributeNotFound"
    status_code = 404
    default_message = "Requested resource was not found"


class AuthenticationError(GatekeeperError):
    """Raised when a credential or token is rejected."""

    kind = "AuthenticationError"
    status_code = 401
    default_message = "Authentication failed"


class InvalidTokenError(GatekeeperError):
    """Raised when a token is malformed, tampered with or expired."""

    kind = "InvalidToken"
    status_code = 401
    default_message = "Invalid or expired token"


class TokenExpiredError(InvalidTokenError):
    """Raised when a token's signature is valid but it has expired."""


class SigningError(GatekeeperError):
    """Raised when a token cannot be signed."""

    kind = "SigningError"
    status_code = 500
    default_message = "Not able to sign the token"


class MalformedHashError(GatekeeperError):
    """Raised when a stored password hash cannot be parsed."""

    kind = "MalformedHash"
    status_code = 500
    default_message = "Stored credential is corrupt"


class StoreError(GatekeeperError):
    """Raised when the account store fails for reasons other than bad input."""

    kind = "StoreError"
    status_code = 500
    default_message = "Something went wrong in the account store"
