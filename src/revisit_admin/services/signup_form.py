"""Signup form checks run before an account is created."""

from dataclasses import dataclass

MIN_PASSWORD_LENGTH = 6


@dataclass(frozen=True)
class SignupForm:
    """Raw signup inputs as typed by the user."""

    name: str
    email: str
    password: str
    confirm_password: str


def validate_signup(form: SignupForm) -> dict[str, str]:
    """Return field-level error messages; an empty dict means valid."""
    errors: dict[str, str] = {}
    if not form.name.strip():
        errors["name"] = "Full name is required"
    if not form.email.strip():
        errors["email"] = "Email is required"
    if form.password != form.confirm_password:
        errors["confirm_password"] = "Passwords do not match"
    if len(form.password) < MIN_PASSWORD_LENGTH:
        errors["password"] = (
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        )
    return errors
