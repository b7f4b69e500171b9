"""Application layer error types.

Application errors wrap domain errors with handler-level context. Handlers
return them inside Failure; the presentation layer maps each code to an
HTTP status.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
    admin_required: FORBIDDEN error for non-administrator callers
"""

from dataclasses import dataclass
from enum import Enum

from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError
from src.core.errors.domain_error import DomainError


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    HTTP mapping (presentation layer):
        COMMAND_VALIDATION_FAILED -> 400
        UNAUTHORIZED -> 401
        FORBIDDEN -> 403
        NOT_FOUND -> 404
        CONFLICT -> 409
        COMMAND_EXECUTION_FAILED, QUERY_FAILED -> 500
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"
    QUERY_FAILED = "query_failed"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code.
        message: Human-readable error message.
        domain_error: Original domain error, if the failure came from a
            domain rule.
        details: Additional context as key-value pairs.

    Examples:
        >>> ApplicationError(
        ...     code=ApplicationErrorCode.FORBIDDEN,
        ...     message="Administrator role required",
        ... )
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None


def admin_required() -> ApplicationError:
    """Build the FORBIDDEN error returned to non-administrator callers."""
    return ApplicationError(
        code=ApplicationErrorCode.FORBIDDEN,
        message="Administrator role required",
        domain_error=AuthorizationError(
            code=ErrorCode.PERMISSION_DENIED,
            message="Administrator role required",
            required_role="admin",
        ),
    )
