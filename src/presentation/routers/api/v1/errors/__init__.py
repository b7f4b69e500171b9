"""Problem Details error responses and exception handlers.

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: Problem Details response body
    ErrorResponseBuilder: Converts ApplicationError into a JSON response
    register_exception_handlers: Register global exception handlers with FastAPI
"""

from src.presentation.routers.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from src.presentation.routers.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "register_exception_handlers",
]
