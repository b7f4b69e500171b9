"""Repository implementations (adapters for hexagonal architecture).

This package contains concrete implementations of repository protocols
defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.login_log_repository import (
    LoginLogRepository,
)
from src.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "LoginLogRepository",
    "UserRepository",
]
