"""Annotated types with centralized validation (DRY principle).

Define validation once, use everywhere.
All custom types use Pydantic's Annotated with Field constraints and AfterValidator.

Usage:
    from src.domain.types import ContactNumber, Email, Password

    class CreateParticipantRequest(BaseModel):
        email: Email  # Validation included!
        contact_number: ContactNumber
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from src.domain.validators import (
    validate_contact_number,
    validate_email,
    validate_optional_url,
    validate_password_length,
    validate_uid,
)

# ============================================================================
# Authentication Types
# ============================================================================

Email = Annotated[
    str,
    Field(
        min_length=5,
        max_length=255,
        description="Email address",
        examples=["user@example.com"],
    ),
    AfterValidator(validate_email),
]
"""Email address with validation and normalization.

Validation:
- Format: standard email pattern (user@domain.tld)
- Normalized to lowercase

Examples:
    >>> from pydantic import BaseModel
    >>> class CreateAdmin(BaseModel):
    ...     email: Email
    >>> CreateAdmin(email="Admin@Example.COM").email
    'admin@example.com'
"""

Password = Annotated[
    str,
    Field(
        max_length=128,
        description="Password (minimum 6 characters)",
        examples=["secret1"],
    ),
    AfterValidator(validate_password_length),
]
"""Password with minimum length validation."""

Uid = Annotated[
    str,
    Field(
        max_length=64,
        description="Participant UID",
        examples=["P-0001"],
    ),
    AfterValidator(validate_uid),
]
"""Participant UID (stripped, non-empty)."""

# ============================================================================
# Profile Types
# ============================================================================

ContactNumber = Annotated[
    str,
    Field(
        description="10-digit contact number",
        examples=["9876543210"],
    ),
    AfterValidator(validate_contact_number),
]
"""10-digit contact number."""

OptionalUrl = Annotated[
    str | None,
    Field(
        default=None,
        description="Optional http(s) URL (empty string treated as absent)",
        examples=["https://maps.example.com/hostel-a"],
    ),
    AfterValidator(validate_optional_url),
]
"""Optional URL; empty strings normalize to None."""
