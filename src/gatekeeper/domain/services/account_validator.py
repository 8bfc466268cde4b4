"""Account input validation.

Checks the shape of sign-up input before anything is hashed or persisted:
- Email must be a syntactically valid address
- Password length must fall within the configured bounds
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email


@dataclass(frozen=True)
class AccountValidationError:
    """Represents a single account validation error.

    Attributes:
        field: The field name ('email' or 'password').
        message: Human-readable error message.
        code: Machine-readable error code.
    """

    field: str
    message: str
    code: str


class AccountValidator:
    """Validates sign-up input.

    Default policy:
    - Email must be syntactically valid (deliverability is not checked)
    - Password between 5 and 100 characters
    """

    def __init__(self, min_password_length: int = 5, max_password_length: int = 100) -> None:
        self.min_password_length = min_password_length
        self.max_password_length = max_password_length

    @staticmethod
    def normalize_email(email: str) -> str:
        """Normalize an email address for storage and lookup."""
        return (email or "").strip().lower()

    def validate(self, email: str, password: str) -> list[AccountValidationError]:
        """Validate an email/password pair.

        Args:
            email: The email address to validate.
            password: The plaintext password to validate.

        Returns:
            List of validation errors. Empty list if the input is valid.
        """
        errors: list[AccountValidationError] = []

        try:
            validate_email(self.normalize_email(email), check_deliverability=False)
        except EmailNotValidError:
            errors.append(
                AccountValidationError(
                    field="email",
                    message="Validation isEmail on email failed",
                    code="email_invalid",
                )
            )

        length = len(password or "")
        if length < self.min_password_length or length > self.max_password_length:
            errors.append(
                AccountValidationError(
                    field="password",
                    message=(
                        f"Password must be between {self.min_password_length} "
                        f"and {self.max_password_length} characters"
                    ),
                    code="password_length",
                )
            )

        return errors
