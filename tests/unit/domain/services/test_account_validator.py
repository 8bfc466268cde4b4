"""Unit tests for AccountValidator."""

import pytest

from gatekeeper.domain.services import AccountValidationError, AccountValidator


class TestAccountValidator:
    """Tests for AccountValidator."""

    def test_valid_input(self):
        """Test that a well-formed email and password pass."""
        validator = AccountValidator()

        assert validator.validate("alice@example.com", "secret1") == []

    @pytest.mark.parametrize("email", ["not-an-email", "alice@", "@example.com", "alice example.com"])
    def test_invalid_email(self, email):
        """Test that syntactically invalid emails are rejected."""
        errors = AccountValidator().validate(email, "secret1")

        assert errors == [
            AccountValidationError(
                field="email",
                message="Validation isEmail on email failed",
                code="email_invalid",
            )
        ]

    def test_password_at_bounds(self):
        """Test that passwords of exactly the minimum and maximum length pass."""
        validator = AccountValidator()

        assert validator.validate("alice@example.com", "a" * 5) == []
        assert validator.validate("alice@example.com", "a" * 100) == []

    def test_password_too_short(self):
        """Test that a password below the minimum length is rejected."""
        errors = AccountValidator().validate("alice@example.com", "abcd")

        assert len(errors) == 1
        assert errors[0].field == "password"
        assert errors[0].code == "password_length"

    def test_password_too_long(self):
        """Test that a password above the maximum length is rejected."""
        errors = AccountValidator().validate("alice@example.com", "a" * 101)

        assert [e.code for e in errors] == ["password_length"]

    def test_custom_bounds(self):
        """Test that configured bounds replace the defaults."""
        validator = AccountValidator(min_password_length=8, max_password_length=12)

        assert validator.validate("alice@example.com", "secret1") != []
        assert validator.validate("alice@example.com", "secret12") == []
        assert "between 8 and 12" in validator.validate("alice@example.com", "short")[0].message

    def test_reports_every_failing_field(self):
        """Test that email and password errors are reported together."""
        errors = AccountValidator().validate("bad", "abc")

        assert {e.field for e in errors} == {"email", "password"}

    def test_mixed_case_email_is_valid(self):
        """Test that case does not affect email validity."""
        assert AccountValidator().validate("Alice@Example.COM", "secret1") == []


class TestNormalizeEmail:
    """Tests for AccountValidator.normalize_email."""

    def test_lowercases_and_strips(self):
        assert AccountValidator.normalize_email("  Alice@Example.COM ") == "alice@example.com"

    def test_none_becomes_empty(self):
        assert AccountValidator.normalize_email(None) == ""
