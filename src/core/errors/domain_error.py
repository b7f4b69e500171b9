"""Base class for errors returned as values.

Handlers never raise these; they wrap them in ApplicationError inside a
Failure, and the presentation layer turns them into Problem Details.
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Error data carried through a Failure (not an Exception).

    Attributes:
        code: Machine-readable error code, echoed to API clients.
        message: Human-readable message.
        details: Extra context for logs.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
