"""Get profile query handler."""

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.queries.user_queries import GetProfile
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities import User
from src.domain.protocols import UserRepository


class GetProfileHandler:
    """Handler returning the caller's own account and profile."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, query: GetProfile) -> Result[User, ApplicationError]:
        """Handle get profile query.

        Returns:
            Success(User), or Failure(NOT_FOUND) if the account vanished
            after the token was issued.
        """
        user = await self._user_repo.find_by_id(query.context.user_id)
        if user is None:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message="User not found",
                    domain_error=NotFoundError(
                        code=ErrorCode.USER_NOT_FOUND,
                        message="User not found",
                        resource_type="User",
                        resource_id=str(query.context.user_id),
                    ),
                )
            )
        return Success(value=user)
