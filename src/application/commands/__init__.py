"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (CreateUser, UpdateProfile).

Each command has a corresponding handler that contains the business logic
to execute the command.
"""

from src.application.commands.auth_commands import (
    AuthenticateUser,
    AuthenticatedUser,
)
from src.application.commands.user_commands import (
    CreateUser,
    DeleteUser,
    UpdateAvatar,
    UpdateProfile,
)

__all__ = [
    # Auth commands
    "AuthenticateUser",
    "AuthenticatedUser",
    # Account commands
    "CreateUser",
    "DeleteUser",
    "UpdateAvatar",
    "UpdateProfile",
]
