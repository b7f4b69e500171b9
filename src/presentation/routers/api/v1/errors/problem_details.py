"""RFC 9457 Problem Details models.

Every error the API returns, whether produced by a handler Failure or by a
global exception handler, is serialized through ProblemDetails so clients
see one shape.

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: Problem Details response body
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Field-level error, used for validation failures.

    Examples:
        >>> ErrorDetail(
        ...     field="contact_number",
        ...     code="validation_failed",
        ...     message="Contact number must be exactly 10 digits",
        ... )
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """Problem Details for HTTP APIs.

    Examples:
        >>> ProblemDetails(
        ...     type="https://api.example.com/errors/forbidden",
        ...     title="Access Denied",
        ...     status=403,
        ...     detail="Administrator role required",
        ...     instance="/api/v1/logs",
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["https://api.example.com/errors/forbidden"],
    )
    title: str = Field(
        ...,
        description="Short, human-readable summary",
        examples=["Access Denied"],
    )
    status: int = Field(..., description="HTTP status code", examples=[403])
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["Administrator role required"],
    )
    instance: str = Field(
        ...,
        description="Request path of this occurrence",
        examples=["/api/v1/logs"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="Field-specific errors",
    )
    trace_id: str | None = Field(
        None,
        description="Request trace ID for debugging",
    )
