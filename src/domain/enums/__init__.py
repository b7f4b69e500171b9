"""Domain enums for business logic.

Available Enums:
    - UserRole: Account roles (admin, participant)
    - LocationSource: Origin of a login log's location fields
"""

from src.domain.enums.location_source import LocationSource
from src.domain.enums.user_role import UserRole

__all__ = [
    "LocationSource",
    "UserRole",
]
