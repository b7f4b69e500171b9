"""Result types for railway-oriented programming.

Handlers return a Result instead of raising, so the presentation layer can
map each failure to an HTTP response explicitly.

Usage:
    async def handle(self, cmd: DeleteUser) -> Result[UUID, ApplicationError]:
        if user is None:
            return Failure(error=not_found)
        return Success(value=user.id)

    match await handler.handle(cmd):
        case Success(value=user_id):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
