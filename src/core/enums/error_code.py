"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    INVALID_EMAIL = "invalid_email"
    INVALID_PASSWORD = "invalid_password"
    PASSWORD_TOO_SHORT = "password_too_short"
    CURRENT_PASSWORD_REQUIRED = "current_password_required"
    INVALID_PHONE_NUMBER = "invalid_phone_number"
    INVALID_ROLE = "invalid_role"
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"
    PROFILE_NOT_FOUND = "profile_not_found"

    # Conflict errors
    USER_ALREADY_EXISTS = "user_already_exists"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    TOKEN_INVALID = "token_invalid"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"
    ADMIN_DELETION_FORBIDDEN = "admin_deletion_forbidden"
