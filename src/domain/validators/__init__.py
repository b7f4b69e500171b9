"""Validators package exports."""

from src.domain.validators.functions import (
    MIN_PASSWORD_LENGTH,
    validate_contact_number,
    validate_email,
    validate_optional_url,
    validate_password_length,
    validate_uid,
)

__all__ = [
    "MIN_PASSWORD_LENGTH",
    "validate_contact_number",
    "validate_email",
    "validate_optional_url",
    "validate_password_length",
    "validate_uid",
]
