"""Database models for persistence layer.

These SQLAlchemy models map to database tables. They are infrastructure
concerns and are never imported by the domain layer; repositories map them
to domain entities.

Models:
    - user.py: Accounts
    - participant.py: Participant profiles
    - admin.py: Administrator profiles
    - login_log.py: Login audit rows
"""

from src.infrastructure.persistence.models.admin import Admin
from src.infrastructure.persistence.models.login_log import LoginLog
from src.infrastructure.persistence.models.participant import Participant
from src.infrastructure.persistence.models.user import User

__all__ = [
    "Admin",
    "LoginLog",
    "Participant",
    "User",
]
