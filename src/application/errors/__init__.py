"""Application layer errors.

This package contains error types for the application layer (command/query handlers).

Exports:
    ApplicationError: Application layer error dataclass
    ApplicationErrorCode: Application-level error code enum
    admin_required: FORBIDDEN error for non-administrator callers
"""

from src.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
    admin_required,
)

__all__ = [
    "ApplicationError",
    "ApplicationErrorCode",
    "admin_required",
]
