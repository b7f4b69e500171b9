"""Common error classes used across all domains and layers.

Error Types:
- ValidationError: Input validation failures
- NotFoundError: Resource not found
- ConflictError: Resource conflicts (duplicate email or UID)
- AuthenticationError: Authentication failures
- AuthorizationError: Authorization failures (no permission)

Usage:
    from src.core.errors import ValidationError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.PASSWORD_TOO_SHORT,
        message="New password must be at least 6 characters",
        field="new_password",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (User, Participant, ...).
        resource_id: ID of the resource that was not found.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate email or UID).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (invalid credentials, token invalid)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (no permission).

    Attributes:
        required_role: Role that was required.
    """

    required_role: str | None = None
