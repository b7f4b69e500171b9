"""Centralized validation functions (DRY principle).

All validation logic defined once, reused everywhere via Annotated types
(src/domain/types.py). Validators are pure functions that raise ValueError
on validation failure.
"""

import re

_EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
_CONTACT_NUMBER_PATTERN = re.compile(r"^[0-9]{10}$")
_URL_PATTERN = re.compile(r"^https?://[^\s/$.?#][^\s]*$", re.IGNORECASE)

# Shortest password accepted anywhere (login, creation, password change)
MIN_PASSWORD_LENGTH = 6


def validate_email(v: str) -> str:
    """Validate email format.

    Args:
        v: Email address to validate.

    Returns:
        Normalized email (stripped, lowercase).

    Raises:
        ValueError: If email format is invalid.

    Example:
        >>> validate_email("Alice@Example.COM")
        'alice@example.com'
        >>> validate_email("invalid")
        ValueError: Invalid email address
    """
    v = v.strip()
    if not _EMAIL_PATTERN.match(v):
        raise ValueError("Invalid email address")
    return v.lower()


def validate_password_length(v: str) -> str:
    """Validate password meets the minimum length.

    Args:
        v: Password to validate.

    Returns:
        Password unchanged (validation only).

    Raises:
        ValueError: If password is shorter than MIN_PASSWORD_LENGTH.
    """
    if len(v) < MIN_PASSWORD_LENGTH:
        raise ValueError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        )
    return v


def validate_uid(v: str) -> str:
    """Validate participant UID.

    Args:
        v: UID to validate.

    Returns:
        UID stripped of surrounding whitespace.

    Raises:
        ValueError: If UID is empty.
    """
    v = v.strip()
    if not v:
        raise ValueError("UID is required")
    return v


def validate_contact_number(v: str) -> str:
    """Validate a 10-digit contact number.

    Args:
        v: Contact number to validate.

    Returns:
        Contact number unchanged.

    Raises:
        ValueError: If not exactly 10 digits.

    Example:
        >>> validate_contact_number("9876543210")
        '9876543210'
        >>> validate_contact_number("+91 98765")
        ValueError: Contact number must be 10 digits
    """
    if not _CONTACT_NUMBER_PATTERN.match(v):
        raise ValueError("Contact number must be 10 digits")
    return v


def validate_optional_url(v: str | None) -> str | None:
    """Validate an optional http(s) URL.

    Empty strings are treated as absent.

    Args:
        v: URL or None.

    Returns:
        URL unchanged, or None when empty.

    Raises:
        ValueError: If a non-empty value is not an http(s) URL.
    """
    if v is None or not v.strip():
        return None
    if not _URL_PATTERN.match(v.strip()):
        raise ValueError("Invalid URL format")
    return v.strip()
