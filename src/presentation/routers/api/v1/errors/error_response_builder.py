"""Error response builder.

Converts application layer failures into Problem Details JSON responses.

Exports:
    ErrorResponseBuilder: Utility class for building error responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.config import settings
from src.core.errors import ValidationError
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# ApplicationErrorCode -> (HTTP status, title)
_ERROR_CODE_INFO: dict[ApplicationErrorCode, tuple[int, str]] = {
    ApplicationErrorCode.COMMAND_VALIDATION_FAILED: (
        status.HTTP_400_BAD_REQUEST,
        "Validation Failed",
    ),
    ApplicationErrorCode.UNAUTHORIZED: (
        status.HTTP_401_UNAUTHORIZED,
        "Authentication Required",
    ),
    ApplicationErrorCode.FORBIDDEN: (status.HTTP_403_FORBIDDEN, "Access Denied"),
    ApplicationErrorCode.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Resource Not Found"),
    ApplicationErrorCode.CONFLICT: (status.HTTP_409_CONFLICT, "Resource Conflict"),
    ApplicationErrorCode.COMMAND_EXECUTION_FAILED: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Command Execution Failed",
    ),
    ApplicationErrorCode.QUERY_FAILED: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Query Failed",
    ),
}


class ErrorResponseBuilder:
    """Build Problem Details error responses from ApplicationError.

    Example:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="User not found",
        ... )
        >>> response = ErrorResponseBuilder.from_application_error(
        ...     error=error,
        ...     request=request,
        ...     trace_id=get_trace_id() or "",
        ... )
        >>> response.status_code
        404
    """

    @staticmethod
    def from_application_error(
        error: ApplicationError,
        request: Request,
        trace_id: str,
    ) -> JSONResponse:
        """Convert ApplicationError to a JSON response.

        Args:
            error: Application layer error to convert.
            request: FastAPI Request object (for instance path).
            trace_id: Request trace ID for debugging.

        Returns:
            JSONResponse with ProblemDetails content.
        """
        status_code = ErrorResponseBuilder.get_status_code(error.code)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=ErrorResponseBuilder.get_title(error.code),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=None,
            trace_id=trace_id or None,
        )

        if isinstance(error.domain_error, ValidationError):
            problem.errors = [
                ErrorDetail(
                    field=error.domain_error.field or "unknown",
                    code=error.domain_error.code.value,
                    message=error.domain_error.message,
                )
            ]

        headers = (
            {"WWW-Authenticate": "Bearer"}
            if status_code == status.HTTP_401_UNAUTHORIZED
            else None
        )
        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
            headers=headers,
        )

    @staticmethod
    def get_status_code(code: ApplicationErrorCode) -> int:
        """Map application error code to HTTP status code.

        Example:
            >>> ErrorResponseBuilder.get_status_code(ApplicationErrorCode.FORBIDDEN)
            403
        """
        return _ERROR_CODE_INFO.get(
            code, (status.HTTP_500_INTERNAL_SERVER_ERROR, "")
        )[0]

    @staticmethod
    def get_title(code: ApplicationErrorCode) -> str:
        """Get human-readable title for application error code."""
        return _ERROR_CODE_INFO.get(code, (0, "Internal Server Error"))[1]
