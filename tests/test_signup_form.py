"""Tests for signup form checks."""

from revisit_admin.services.signup_form import SignupForm, validate_signup


def _form(password: str, confirm_password: str, **overrides: str) -> SignupForm:
    fields = {"name": "Ada", "email": "ada@example.com"} | overrides
    return SignupForm(
        password=password, confirm_password=confirm_password, **fields
    )


def test_valid_signup_has_no_errors() -> None:
    assert validate_signup(_form("secret", "secret")) == {}


def test_mismatched_passwords() -> None:
    assert validate_signup(_form("secret1", "secret2")) == {
        "confirm_password": "Passwords do not match"
    }


def test_short_password() -> None:
    assert validate_signup(_form("abc", "abc")) == {
        "password": "Password must be at least 6 characters"
    }


def test_blank_name_and_email() -> None:
    assert validate_signup(_form("secret", "secret", name=" ", email="")) == {
        "name": "Full name is required",
        "email": "Email is required",
    }
