"""List users and list participants query handlers.

Both are projections over the account store with no enrichment.
"""

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import ApplicationError, admin_required
from src.application.queries.user_queries import ListParticipants, ListUsers
from src.core.result import Failure, Result, Success
from src.domain.entities import ParticipantProfile, User
from src.domain.protocols import UserRepository


@dataclass
class ParticipantListItem:
    """Participant directory entry."""

    id: UUID
    name: str | None
    college: str | None
    email: str


class ListUsersHandler:
    """Handler listing every account for administrators.

    Accounts come back newest first, each with its profile.
    """

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, query: ListUsers) -> Result[list[User], ApplicationError]:
        """Handle list users query.

        Returns:
            Success(list[User]), or Failure(FORBIDDEN) for non-admin callers.
        """
        if not query.context.is_admin:
            return Failure(error=admin_required())
        return Success(value=await self._user_repo.list_all())


class ListParticipantsHandler:
    """Handler for the participant directory (any signed-in caller)."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(
        self, query: ListParticipants
    ) -> Result[list[ParticipantListItem], ApplicationError]:
        """Handle list participants query.

        Returns:
            Success(list[ParticipantListItem]) ordered by name ascending.
        """
        users = await self._user_repo.list_participants()
        items = [
            ParticipantListItem(
                id=user.id,
                name=user.display_name(),
                college=(
                    user.profile.college
                    if isinstance(user.profile, ParticipantProfile)
                    else None
                ),
                email=user.email,
            )
            for user in users
        ]
        items.sort(key=lambda item: (item.name or "").lower())
        return Success(value=items)
