"""Shared kernel used by every layer of the portal.

Holds the Result type handlers return, the DomainError hierarchy carried
inside Failure, error codes, settings and the dependency container. Nothing
here imports from the domain, application or presentation layers except the
container, which is the composition root.
"""

from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
]
