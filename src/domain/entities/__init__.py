"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.login_log import LoginLog
from src.domain.entities.user import (
    AdminProfile,
    DisplayNameProvider,
    ParticipantProfile,
    Profile,
    User,
)

__all__ = [
    "AdminProfile",
    "DisplayNameProvider",
    "LoginLog",
    "ParticipantProfile",
    "Profile",
    "User",
]
